from pydantic import BaseModel, model_validator

from schemas.auth import SimpleUserOut, Username, ValidatePassword
from schemas.lang import Lang


class UserUpdateIn(BaseModel):
    username: Username | None = None
    password: ValidatePassword | None = None
    study_lang: Lang | None = None
    display_lang: Lang | None = None

    @model_validator(mode="after")
    def _require_change(self):
        if not self.model_fields_set:
            raise ValueError("Nothing to update")
        return self


class UsersOut(BaseModel):
    users: list[SimpleUserOut]
    count: int
