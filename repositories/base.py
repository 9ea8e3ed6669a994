import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store(self, conflict: type[Exception] | None = None) -> Iterator[None]:
        """Run a unit of store work; any SQLAlchemy failure is rolled back and
        surfaced as StoreUnavailable so storage internals never leak.

        When ``conflict`` is given, a constraint violation raises that instead.
        """
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            if conflict is not None and isinstance(exc, IntegrityError):
                raise conflict() from exc
            logger.exception("Store operation failed in %s", type(self).__name__)
            raise StoreUnavailable() from exc

    def _commit(self, *entities, conflict: type[Exception] | None = None) -> None:
        with self._store(conflict):
            for entity in entities:
                self.db.add(entity)
            self.db.commit()
            for entity in entities:
                self.db.refresh(entity)
