from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from schemas.lang import normalize_lang

TokenRange = tuple[int, int]


class NewArticleIn(BaseModel):
    title: constr(strip_whitespace=True, min_length=1, max_length=255)
    author: constr(strip_whitespace=True, max_length=255) | None = None
    content: str
    # checked by the segmenter so unknown codes surface as segmentation_failed
    language: str = Field(min_length=1, max_length=10)
    tags: list[str] = Field(default_factory=list)
    is_private: bool = False

    @field_validator("author", mode="before")
    @classmethod
    def _empty_author_to_none(cls, value: str | None):
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value: str):
        return normalize_lang(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_tags_to_empty(cls, value):
        return [] if value is None else value


class SimpleArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str | None = None
    content_length: int
    created_at: datetime
    is_system: bool
    lang: str
    tags: list[str]


class ArticleOut(SimpleArticleOut):
    content: str
    words: list[str]
    sentences: list[TokenRange]
    unique_words: dict[str, bool]
    page_data: list[TokenRange]
    uploader_id: int


class ArticlesOut(BaseModel):
    articles: list[SimpleArticleOut]
    count: int
