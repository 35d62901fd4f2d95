from __future__ import annotations
"""server/scada/infrastructure/persistence/repositories/speed_history_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo speed_history (append + lecture récente).
"""
from typing import Sequence

from sqlalchemy import desc, func, insert, select
from sqlalchemy.orm import Session

from scada.infrastructure.persistence.database.models.speed_history import SpeedHistory


class SpeedHistoryRepository:
    def __init__(self, session: Session):
        self.s = session

    def append(self, *, machine_id: int, speed: float, message: str, timestamp: int) -> None:
        self.s.execute(
            insert(SpeedHistory).values(
                machine_id=machine_id,
                speed=speed,
                message=message,
                timestamp=timestamp,
            )
        )

    def latest(self, machine_id: int, limit: int) -> Sequence[SpeedHistory]:
        """Plus récent d'abord ; `id` départage les échantillons de la même seconde."""
        return self.s.scalars(
            select(SpeedHistory)
            .where(SpeedHistory.machine_id == machine_id)
            .order_by(desc(SpeedHistory.timestamp), desc(SpeedHistory.id))
            .limit(limit)
        ).all()

    def count(self, machine_id: int) -> int:
        return self.s.scalar(
            select(func.count()).select_from(SpeedHistory).where(SpeedHistory.machine_id == machine_id)
        ) or 0
