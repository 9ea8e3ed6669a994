from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user
from schemas.auth import ClaimsUser, SimpleUserOut
from schemas.user import UserUpdateIn, UsersOut
from services.user_services import UserService

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/", response_model=UsersOut)
async def get_users(
    offset: int = Query(0, ge=0),
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    users = [SimpleUserOut.model_validate(u, from_attributes=True) for u in UserService(db).get_users(offset=offset)]
    return UsersOut(users=users, count=len(users))


@router.patch("/", response_model=SimpleUserOut)
async def update_user(
    data: UserUpdateIn,
    user: ClaimsUser = Depends(current_user),
    db: Session = Depends(get_db),
):
    updated = UserService(db).update_user(
        user_id=user.id,
        username=data.username,
        password=data.password,
        study_lang=data.study_lang,
        display_lang=data.display_lang,
    )
    return SimpleUserOut.model_validate(updated, from_attributes=True)
