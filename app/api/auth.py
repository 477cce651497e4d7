# app/api/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.core.security import create_user_token, verify_password
from app.crud import user as crud_user
from app.db.models.user import User
from app.schemas.user import Token, UserCreate, UserLogin, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Token)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    if crud_user.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=400, detail="Email уже зарегистрирован")

    user = crud_user.create_user(db, user_in)
    logger.info(f"[Auth] Зарегистрирован {user.email} ({user.role})")
    return Token(access_token=create_user_token(user), token_type="bearer")


@router.post("/login", response_model=Token)
def login(form: UserLogin, db: Session = Depends(get_db)):
    user = crud_user.get_user_by_email(db, form.email)
    if not user or not verify_password(form.password, user.hashed_password):
        logger.info(f"[Auth] Неудачный вход: {form.email}")
        raise HTTPException(status_code=401, detail="Неверный email или пароль")
    return Token(access_token=create_user_token(user), token_type="bearer")


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
