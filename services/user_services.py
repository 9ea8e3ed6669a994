import logging

from sqlalchemy.orm import Session

from core.errors import NotFound, UsernameTaken
from core.security import hash_password
from models.user import User
from repositories.user_repo import UserRepository
from schemas.lang import LanguageCode

logger = logging.getLogger(__name__)

USERS_PAGE_SIZE = 50


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def get_users(self, *, offset: int = 0) -> list[User]:
        return self.repo.list_users(offset=offset, limit=USERS_PAGE_SIZE)

    def update_user(
        self,
        *,
        user_id: int,
        username: str | None = None,
        password=None,
        study_lang: LanguageCode | None = None,
        display_lang: LanguageCode | None = None,
    ) -> User:
        """Change the stored user. Tokens already issued keep their old claims
        until the next refresh or login."""
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")

        if username is not None and username != user.username:
            if self.repo.get_by_username(username):
                raise UsernameTaken("Username already taken")
            user.username = username
        if password is not None:
            user.password_hash = hash_password(password)
        if study_lang is not None:
            user.study_lang = LanguageCode(study_lang).value
        if display_lang is not None:
            user.display_lang = LanguageCode(display_lang).value

        user = self.repo.save(user)
        logger.info("Updated user %s", user_id)
        return user
