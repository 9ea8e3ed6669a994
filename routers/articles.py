from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user
from schemas.article import ArticleOut, ArticlesOut, NewArticleIn, SimpleArticleOut
from schemas.auth import ClaimsUser
from schemas.lang import normalize_lang
from services.article_services import ArticleService

router = APIRouter(prefix="/article", tags=["Article"])


def _articles_out(articles) -> ArticlesOut:
    items = [SimpleArticleOut.model_validate(a, from_attributes=True) for a in articles]
    return ArticlesOut(articles=items, count=len(items))


# plain def: segmentation is CPU bound, so this runs in the threadpool
@router.post("/", response_model=ArticleOut, status_code=201)
def new_article(
    data: NewArticleIn,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = ArticleService(db)
    article = svc.new_article(
        user_id=user.id,
        title=data.title,
        author=data.author,
        content=data.content,
        language=data.language,
        tags=data.tags,
        is_private=data.is_private,
    )
    return ArticleOut.model_validate(article, from_attributes=True)


@router.get("/", response_model=ArticlesOut)
async def get_articles(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    lang: str | None = None,
    search: str | None = Query(None, max_length=100),
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = ArticleService(db)
    articles = svc.get_articles(
        user_id=user.id,
        limit=limit,
        offset=offset,
        lang=normalize_lang(lang) if lang else None,
        search=search,
    )
    return _articles_out(articles)


@router.get("/user", response_model=ArticlesOut)
async def get_user_articles(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user_id: int | None = None,
    lang: str | None = None,
    search: str | None = Query(None, max_length=100),
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    svc = ArticleService(db)
    articles = svc.get_user_articles(
        user_id=user.id,
        uploader_id=user_id,
        limit=limit,
        offset=offset,
        lang=normalize_lang(lang) if lang else None,
        search=search,
    )
    return _articles_out(articles)


@router.get("/{article_id}", response_model=ArticleOut)
async def get_full_article(
    article_id: int,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    article = ArticleService(db).get_full_article(user_id=user.id, article_id=article_id)
    return ArticleOut.model_validate(article, from_attributes=True)
