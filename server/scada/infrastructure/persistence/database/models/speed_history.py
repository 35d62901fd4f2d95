from __future__ import annotations
"""server/scada/infrastructure/persistence/database/models/speed_history.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table speed_history (append-only, une ligne par mise à jour acceptée).
"""
from sqlalchemy import BigInteger, Float, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from scada.infrastructure.persistence.database.base import Base


class SpeedHistory(Base):
    __tablename__ = "speed_history"
    __table_args__ = (
        Index("ix_speed_history_machine_ts", "machine_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    machine_id: Mapped[int] = mapped_column(Integer, ForeignKey("machines.id"), nullable=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
