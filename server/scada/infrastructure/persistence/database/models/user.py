from __future__ import annotations
"""server/scada/infrastructure/persistence/database/models/user.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table users.

Le token est NULL pour la ligne de l'admin intégré : son credential est la
constante de configuration ADMIN_TOKEN, jamais stockée ici.
"""
from sqlalchemy import BigInteger, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scada.core.utils.datetime import now_epoch
from scada.infrastructure.persistence.database.base import Base

USER_ROLES = ("admin", "manager", "technician")


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'manager', 'technician')", name="ck_users_role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False)
    token: Mapped[str | None] = mapped_column(String(128), unique=True, index=True, nullable=True)
    created_at: Mapped[int] = mapped_column(BigInteger, default=now_epoch, nullable=False)
