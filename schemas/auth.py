from datetime import datetime
from typing import Annotated
import re

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, SecretStr

from schemas.lang import Lang, LanguageCode

PASSWORD_REGEX = re.compile(
    r"^[A-Za-z0-9!@#$%^&*()_\-+=\[\]{};:'\",.<>/?|`~]+$"
)


def validate_password(v: SecretStr) -> SecretStr:
    password = v.get_secret_value()

    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")

    if " " in password:
        raise ValueError("Password must not contain spaces")

    if not PASSWORD_REGEX.fullmatch(password):
        raise ValueError(
            "Password may contain only English letters, digits and special symbols"
        )

    return v


ValidatePassword = Annotated[SecretStr, AfterValidator(validate_password)]
Username = Annotated[str, Field(min_length=3, max_length=50)]


class RegisterIn(BaseModel):
    username: Username
    password: ValidatePassword
    study_lang: Lang
    display_lang: Lang


class LoginIn(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class LoginOut(BaseModel):
    token: str
    refresh_token: str


class RefreshIn(BaseModel):
    token: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)


class RefreshOut(BaseModel):
    token: str


class SimpleUserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class RegisterOut(BaseModel):
    user: SimpleUserOut


class ClaimsUser(BaseModel):
    """Identity snapshot carried inside an access token.

    Built from the stored user when a token is minted and never re-read while
    the token is valid, so a request sees the user as of login/refresh.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    username: str
    created_at: datetime
    study_lang: LanguageCode
    display_lang: LanguageCode

    @classmethod
    def from_user(cls, user) -> "ClaimsUser":
        return cls.model_validate(user, from_attributes=True)


class TokenClaims(BaseModel):
    model_config = ConfigDict(frozen=True)

    exp: int
    user: ClaimsUser
