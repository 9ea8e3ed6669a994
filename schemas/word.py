from enum import Enum

from pydantic import BaseModel, Field, constr


class WordStatus(str, Enum):
    UNKNOWN = "unknown"
    LEARNING = "learning"
    KNOWN = "known"


Word = constr(strip_whitespace=True, min_length=1, max_length=100)


class WordStatusIn(BaseModel):
    lang: str
    word: Word
    status: WordStatus


class BatchWordStatusIn(BaseModel):
    lang: str
    words: list[Word] = Field(min_length=1, max_length=5000)
    status: WordStatus


class WordDefinitionIn(BaseModel):
    lang: str
    word: Word
    definition: constr(strip_whitespace=True, max_length=1000)


class WordDataOut(BaseModel):
    word_status_data: dict[str, WordStatus]
    word_definition_data: dict[str, str]
