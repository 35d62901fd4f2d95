from __future__ import annotations
"""server/scada/infrastructure/persistence/database/models/machine.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table machines (identité + statut courant).
"""
from sqlalchemy import BigInteger, Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from scada.core.utils.datetime import now_epoch
from scada.infrastructure.persistence.database.base import Base


class Machine(Base):
    __tablename__ = "machines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    code: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    api_key: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    machine_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # statut courant : écrit uniquement par le TelemetryRecorder
    current_speed: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    status_message: Mapped[str] = mapped_column(String, default="", nullable=False)
    is_online: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    last_update: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)

    created_at: Mapped[int] = mapped_column(BigInteger, default=now_epoch, nullable=False)
