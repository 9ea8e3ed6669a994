from sqlalchemy import or_, select
from sqlalchemy.orm import load_only

from models.article import Article
from repositories.base import BaseRepository

# columns a SimpleArticle needs; content and the token index stay unloaded
SIMPLE_COLUMNS = (
    Article.id,
    Article.title,
    Article.author,
    Article.content_length,
    Article.created_at,
    Article.is_system,
    Article.lang,
    Article.tags,
)


class ArticleRepository(BaseRepository):
    def get(self, article_id: int) -> Article | None:
        with self._store():
            return self.db.get(Article, article_id)

    def save(self, article: Article) -> Article:
        self._commit(article)
        return article

    def _list(self, stmt, *, limit: int, offset: int, lang: str | None, search: str | None) -> list[Article]:
        if lang:
            stmt = stmt.where(Article.lang == lang)
        if search:
            # % and _ in the search text match themselves
            stmt = stmt.where(Article.title.icontains(search, autoescape=True))
        stmt = (
            stmt.options(load_only(*SIMPLE_COLUMNS))
            .order_by(Article.created_at.desc(), Article.id.desc())
            .offset(offset)
            .limit(limit)
        )
        with self._store():
            return list(self.db.execute(stmt).scalars())

    def list_visible(
        self,
        *,
        viewer_id: int,
        limit: int,
        offset: int,
        lang: str | None = None,
        search: str | None = None,
    ) -> list[Article]:
        stmt = select(Article).where(or_(Article.is_system.is_(True), Article.uploader_id == viewer_id))
        return self._list(stmt, limit=limit, offset=offset, lang=lang, search=search)

    def list_by_uploader(
        self,
        *,
        uploader_id: int,
        include_private: bool,
        limit: int,
        offset: int,
        lang: str | None = None,
        search: str | None = None,
    ) -> list[Article]:
        stmt = select(Article).where(Article.uploader_id == uploader_id)
        if not include_private:
            stmt = stmt.where(Article.is_system.is_(True))
        return self._list(stmt, limit=limit, offset=offset, lang=lang, search=search)
