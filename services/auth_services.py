import logging
from typing import Union

from pydantic import SecretStr
from sqlalchemy.orm import Session

from core.errors import InvalidCredentials, RefreshMismatch, UsernameTaken
from core.security import (
    create_access_token,
    decode_access_token,
    dummy_verify_password,
    generate_refresh_token,
    hash_password,
    hash_refresh_token,
    refresh_token_matches,
    verify_password,
)
from models.user import User
from repositories.user_repo import UserRepository
from schemas.auth import ClaimsUser
from schemas.lang import LanguageCode

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def register(
        self,
        *,
        username: str,
        password: Union[str, SecretStr],
        study_lang: LanguageCode,
        display_lang: LanguageCode,
    ) -> User:
        if self.repo.get_by_username(username):
            raise UsernameTaken("Username already taken")
        user = self.repo.create(
            username=username,
            password_hash=hash_password(password),
            study_lang=LanguageCode(study_lang).value,
            display_lang=LanguageCode(display_lang).value,
        )
        logger.info("Registered user %s", user.id)
        return user

    def login(self, *, username: str, password: Union[str, SecretStr]) -> tuple[str, str]:
        """Return ``(access_token, refresh_token)``.

        The new refresh token replaces whatever the user had before, so a
        login elsewhere invalidates older refresh tokens.
        """
        user = self.repo.get_by_username(username)
        if user is None:
            dummy_verify_password()
            logger.info("Login failed")
            raise InvalidCredentials("Invalid credentials")
        if not verify_password(password, user.password_hash):
            logger.info("Login failed")
            raise InvalidCredentials("Invalid credentials")

        refresh_token = generate_refresh_token()
        self.repo.set_refresh_token_hash(user, hash_refresh_token(refresh_token))
        access_token = create_access_token(ClaimsUser.from_user(user))
        logger.info("User %s logged in", user.id)
        return access_token, refresh_token

    def refresh(self, *, token: str, refresh_token: str) -> str:
        """Mint a new access token from the user's current stored state.

        The presented access token may be expired but must carry a valid
        signature. The refresh token itself stays as it is.
        """
        claims = decode_access_token(token, verify_exp=False)
        user = self.repo.get_by_id(claims.user.id)
        if user is None or not refresh_token_matches(refresh_token, user.refresh_token_hash):
            raise RefreshMismatch("Refresh token does not match")
        logger.info("Refreshed access token for user %s", user.id)
        return create_access_token(ClaimsUser.from_user(user))

    def logout(self, *, user_id: int) -> None:
        user = self.repo.get_by_id(user_id)
        if user is not None:
            self.repo.set_refresh_token_hash(user, None)
            logger.info("User %s logged out", user_id)
