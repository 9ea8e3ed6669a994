from typing import Callable

from sqlalchemy import select

from core.errors import StoreUnavailable
from models.word_data import UserWordData
from repositories.base import BaseRepository


class _RowExists(Exception):
    pass


class WordDataRepository(BaseRepository):
    def get(self, *, user_id: int, lang: str) -> UserWordData | None:
        stmt = select(UserWordData).where(
            UserWordData.user_id == user_id,
            UserWordData.lang == lang,
        )
        with self._store():
            return self.db.execute(stmt).scalar_one_or_none()

    def get_or_new(self, *, user_id: int, lang: str) -> UserWordData:
        """Existing row, or an unsaved empty one; rows only appear on the first write."""
        entity = self.get(user_id=user_id, lang=lang)
        if entity is None:
            entity = UserWordData(user_id=user_id, lang=lang, word_status_data={}, word_definition_data={})
        return entity

    def update(self, *, user_id: int, lang: str, change: Callable[[UserWordData], None]) -> UserWordData:
        """Apply ``change`` to the (user, lang) row and save it.

        If another writer inserted the row first, the insert loses the race on
        the unique constraint; the stored row is re-read and ``change`` applied
        to it instead.
        """
        entity = self.get_or_new(user_id=user_id, lang=lang)
        change(entity)
        try:
            self._commit(entity, conflict=_RowExists)
        except _RowExists:
            entity = self.get(user_id=user_id, lang=lang)
            if entity is None:
                raise StoreUnavailable()
            change(entity)
            self._commit(entity)
        return entity
