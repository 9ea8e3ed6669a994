import logging

from sqlalchemy.orm import Session

from core.config import settings
from core.errors import EmptyContent, NotFound, SegmentationFailed, UnsupportedLanguage
from models.article import Article
from repositories.article_repo import ArticleRepository
from services import lexical_indexer
from services.segmenter import resolve_language, segment

logger = logging.getLogger(__name__)


def _clean_tags(tags: list[str] | None) -> list[str]:
    cleaned: list[str] = []
    for tag in tags or []:
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def assemble(
    *,
    title: str,
    author: str | None,
    content: str,
    language: str,
    tags: list[str] | None,
    is_private: bool,
    uploader_id: int,
    page_size: int | None = None,
) -> Article:
    """Build an unsaved Article with its token index.

    Empty or whitespace-only content is rejected rather than stored as a
    zero-token article.
    """
    if not content or content.isspace():
        raise EmptyContent("Article content is empty")

    try:
        words = segment(content, language)
    except UnsupportedLanguage as exc:
        raise SegmentationFailed(str(exc)) from exc
    except Exception as exc:
        logger.exception("Segmenter failed for language %r", language)
        raise SegmentationFailed("Segmenter failed") from exc

    index = lexical_indexer.index(words, page_size or settings.ARTICLE_PAGE_SIZE)

    return Article(
        title=title,
        author=author,
        content=content,
        content_length=len(content),
        words=words,
        sentences=[list(r) for r in index.sentences],
        unique_words=index.unique_words,
        page_data=[list(r) for r in index.pages],
        is_system=not is_private,
        uploader_id=uploader_id,
        lang=resolve_language(language).value,
        tags=_clean_tags(tags),
    )


class ArticleService:
    def __init__(self, db: Session):
        self.repo = ArticleRepository(db)

    def new_article(
        self,
        *,
        user_id: int,
        title: str,
        author: str | None,
        content: str,
        language: str,
        tags: list[str] | None,
        is_private: bool,
    ) -> Article:
        article = assemble(
            title=title,
            author=author,
            content=content,
            language=language,
            tags=tags,
            is_private=is_private,
            uploader_id=user_id,
        )
        article = self.repo.save(article)
        logger.info(
            "Article %s created by user %s (%s, %d tokens)",
            article.id, user_id, article.lang, len(article.words),
        )
        return article

    def get_articles(
        self,
        *,
        user_id: int,
        limit: int,
        offset: int,
        lang: str | None = None,
        search: str | None = None,
    ) -> list[Article]:
        return self.repo.list_visible(viewer_id=user_id, limit=limit, offset=offset, lang=lang, search=search)

    def get_user_articles(
        self,
        *,
        user_id: int,
        uploader_id: int | None,
        limit: int,
        offset: int,
        lang: str | None = None,
        search: str | None = None,
    ) -> list[Article]:
        uploader_id = user_id if uploader_id is None else uploader_id
        return self.repo.list_by_uploader(
            uploader_id=uploader_id,
            include_private=uploader_id == user_id,
            limit=limit,
            offset=offset,
            lang=lang,
            search=search,
        )

    def get_full_article(self, *, user_id: int, article_id: int) -> Article:
        article = self.repo.get(article_id)
        # private articles of other users are reported as missing
        if article is None or (not article.is_system and article.uploader_id != user_id):
            raise NotFound("Article not found")
        return article
