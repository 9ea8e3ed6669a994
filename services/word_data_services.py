from sqlalchemy.orm import Session

from core.errors import EmptyWord
from models.word_data import UserWordData
from repositories.word_data_repo import WordDataRepository
from schemas.word import WordStatus
from services.lexical_indexer import normalize_word
from services.segmenter import resolve_language


def _normalize_all(words: list[str]) -> list[str]:
    normalized = [normalize_word(word) for word in words]
    if not all(normalized):
        raise EmptyWord("Words must not be empty")
    return normalized


class WordDataService:
    """Per-user, per-language word progress.

    Keys go through the same normalization as article unique words, so
    "Cat" and "cat" are one entry. A row is only created by the first write.
    """

    def __init__(self, db: Session):
        self.repo = WordDataRepository(db)

    def get_word_data(self, *, user_id: int, lang: str) -> dict:
        lang = resolve_language(lang).value
        entity = self.repo.get(user_id=user_id, lang=lang)
        if entity is None:
            return {"word_status_data": {}, "word_definition_data": {}}
        return {
            "word_status_data": dict(entity.word_status_data or {}),
            "word_definition_data": dict(entity.word_definition_data or {}),
        }

    def update_word_status(self, *, user_id: int, lang: str, word: str, status: WordStatus) -> UserWordData:
        return self.batch_update_word_status(user_id=user_id, lang=lang, words=[word], status=status)

    def batch_update_word_status(
        self,
        *,
        user_id: int,
        lang: str,
        words: list[str],
        status: WordStatus,
    ) -> UserWordData:
        # every word is validated before the single write, so a batch lands whole or not at all
        lang = resolve_language(lang).value
        normalized = _normalize_all(words)
        value = WordStatus(status).value

        def change(entity: UserWordData) -> None:
            # a fresh dict so the JSON column is seen as changed
            statuses = dict(entity.word_status_data or {})
            for word in normalized:
                statuses[word] = value
            entity.word_status_data = statuses

        return self.repo.update(user_id=user_id, lang=lang, change=change)

    def update_word_definition(self, *, user_id: int, lang: str, word: str, definition: str) -> UserWordData:
        lang = resolve_language(lang).value
        (key,) = _normalize_all([word])
        definition = definition.strip()

        def change(entity: UserWordData) -> None:
            definitions = dict(entity.word_definition_data or {})
            if definition:
                definitions[key] = definition
            else:
                definitions.pop(key, None)
            entity.word_definition_data = definitions

        return self.repo.update(user_id=user_id, lang=lang, change=change)
