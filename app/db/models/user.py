# app/db/models/user.py
from sqlalchemy import Column, Integer, String, Boolean, Enum
from app.db.base import Base

USER_ROLES = ("student", "instructor", "admin")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False)
    is_verified = Column(Boolean, default=True, nullable=False)
