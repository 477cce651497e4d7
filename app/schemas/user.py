# app/schemas/user.py
from pydantic import BaseModel, Field
from typing import Literal


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    full_name: str
    # админов создают вручную
    role: Literal["student", "instructor"] = "student"


class UserLogin(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserOut(BaseModel):
    id: int
    email: str
    full_name: str
    role: Literal["student", "instructor", "admin"]
    is_verified: bool

    class Config:
        from_attributes = True
