from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user
from schemas.auth import ClaimsUser
from schemas.lang import normalize_lang
from schemas.word import BatchWordStatusIn, WordDataOut, WordDefinitionIn, WordStatusIn
from services.word_data_services import WordDataService

router = APIRouter(prefix="/word_data", tags=["Word data"])


@router.get("/{lang}", response_model=WordDataOut)
async def get_word_data(
    lang: str,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    return WordDataService(db).get_word_data(user_id=user.id, lang=normalize_lang(lang))


@router.post("/status")
async def update_word_status(
    data: WordStatusIn,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    WordDataService(db).update_word_status(
        user_id=user.id,
        lang=normalize_lang(data.lang),
        word=data.word,
        status=data.status,
    )
    return {"success": True}


@router.post("/status/batch")
async def batch_update_word_status(
    data: BatchWordStatusIn,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    WordDataService(db).batch_update_word_status(
        user_id=user.id,
        lang=normalize_lang(data.lang),
        words=data.words,
        status=data.status,
    )
    return {"success": True}


@router.post("/definition")
async def update_word_definition(
    data: WordDefinitionIn,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    WordDataService(db).update_word_definition(
        user_id=user.id,
        lang=normalize_lang(data.lang),
        word=data.word,
        definition=data.definition,
    )
    return {"success": True}
