from sqlalchemy import select
from models.user import User
from core.errors import UsernameTaken
from repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def get_by_username(self, username: str) -> User | None:
        with self._store():
            return self.db.execute(select(User).where(User.username == username)).scalar_one_or_none()

    def get_by_id(self, user_id: int) -> User | None:
        with self._store():
            return self.db.get(User, user_id)

    def list_users(self, *, offset: int = 0, limit: int = 50) -> list[User]:
        stmt = select(User).order_by(User.id).offset(offset).limit(limit)
        with self._store():
            return list(self.db.execute(stmt).scalars())

    def create(self, *, username: str, password_hash: str, study_lang: str, display_lang: str) -> User:
        user = User(
            username=username,
            password_hash=password_hash,
            study_lang=study_lang,
            display_lang=display_lang,
        )
        self._commit(user, conflict=UsernameTaken)
        return user

    def save(self, user: User) -> User:
        self._commit(user, conflict=UsernameTaken)
        return user

    def set_refresh_token_hash(self, user: User, token_hash: str | None) -> User:
        user.refresh_token_hash = token_hash
        return self.save(user)
