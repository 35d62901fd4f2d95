from __future__ import annotations
"""
Schemas Pydantic pour les utilisateurs et l'authentification.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "manager", "technician"]


class LoginIn(BaseModel):
    username: str
    password: str


class LoginOut(BaseModel):
    token: str
    role: str
    username: str


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1)
    role: Role


class UserUpdate(BaseModel):
    role: Optional[Role] = None
    password: Optional[str] = Field(default=None, min_length=1)
    rotate_token: bool = False


class UserTokenOut(BaseModel):
    """Création / rotation : le token est renvoyé à l'admin."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    token: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    created_at: int


class UserListOut(BaseModel):
    users: list[UserOut]
