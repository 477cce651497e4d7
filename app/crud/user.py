# app/crud/user.py
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.db.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def create_user(db: Session, user_data, role: Optional[str] = None) -> User:
    db_user = User(
        email=user_data.email.lower(),
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=role or user_data.role,
        is_verified=True,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
