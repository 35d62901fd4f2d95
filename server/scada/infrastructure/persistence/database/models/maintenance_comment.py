from __future__ import annotations
"""server/scada/infrastructure/persistence/database/models/maintenance_comment.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table maintenance_comments.
"""
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from scada.core.utils.datetime import now_epoch
from scada.infrastructure.persistence.database.base import Base

PRIORITIES = ("low", "normal", "high", "critical")


class MaintenanceComment(Base):
    __tablename__ = "maintenance_comments"
    __table_args__ = (
        CheckConstraint(
            "priority IN (" + ", ".join(f"'{p}'" for p in PRIORITIES) + ")",
            name="ck_maintenance_comments_priority",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    machine_id: Mapped[int] = mapped_column(Integer, ForeignKey("machines.id"), index=True, nullable=False)
    username: Mapped[str] = mapped_column(String(150), nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(String(16), default="normal", nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, default=now_epoch, nullable=False)
