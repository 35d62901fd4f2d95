from __future__ import annotations
"""server/scada/infrastructure/persistence/repositories/user_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo User (lookup par token / username, création).
"""
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from scada.infrastructure.persistence.database.models.user import User


class UserRepository:
    def __init__(self, session: Session):
        self.s = session

    def get(self, user_id: int) -> User | None:
        return self.s.get(User, user_id)

    def username_by_token(self, token: str) -> str | None:
        return self.s.scalar(select(User.username).where(User.token == token))

    def by_username(self, username: str) -> User | None:
        return self.s.scalar(select(User).where(User.username == username))

    def list_by_username(self) -> Sequence[User]:
        return self.s.scalars(select(User).order_by(User.username)).all()

    def create(self, *, username: str, password_hash: str, role: str, token: Optional[str]) -> User:
        u = User(username=username, password_hash=password_hash, role=role, token=token)
        self.s.add(u)
        self.s.flush()
        return u
