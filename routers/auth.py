from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user
from schemas.auth import ClaimsUser, LoginIn, LoginOut, RefreshIn, RefreshOut, RegisterIn, RegisterOut, SimpleUserOut
from services.auth_services import AuthService

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/register", response_model=RegisterOut, status_code=201)
async def post_reg(data: RegisterIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    user = svc.register(
        username=data.username,
        password=data.password,
        study_lang=data.study_lang,
        display_lang=data.display_lang,
    )
    return RegisterOut(user=SimpleUserOut.model_validate(user, from_attributes=True))


@router.post("/login", response_model=LoginOut)
async def post_login(data: LoginIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    token, refresh_token = svc.login(username=data.username, password=data.password)
    return LoginOut(token=token, refresh_token=refresh_token)


@router.post("/refresh", response_model=RefreshOut)
async def refresh(data: RefreshIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    token = svc.refresh(token=data.token, refresh_token=data.refresh_token)
    return RefreshOut(token=token)


@router.post("/logout")
async def logout(user: ClaimsUser = Depends(current_user), db: Session = Depends(get_db)):
    AuthService(db).logout(user_id=user.id)
    return {"success": True}


@router.get("/me", response_model=ClaimsUser)
async def me(user: ClaimsUser = Depends(current_user)):
    return user
