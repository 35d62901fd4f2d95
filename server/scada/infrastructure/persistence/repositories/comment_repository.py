from __future__ import annotations
"""server/scada/infrastructure/persistence/repositories/comment_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo maintenance_comments.
"""
from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from scada.infrastructure.persistence.database.models.maintenance_comment import MaintenanceComment


class CommentRepository:
    def __init__(self, session: Session):
        self.s = session

    def add(self, *, machine_id: int, username: str, comment: str, priority: str, created_at: int) -> MaintenanceComment:
        c = MaintenanceComment(
            machine_id=machine_id,
            username=username,
            comment=comment,
            priority=priority,
            created_at=created_at,
        )
        self.s.add(c)
        self.s.flush()
        return c

    def for_machine(self, machine_id: int) -> Sequence[MaintenanceComment]:
        return self.s.scalars(
            select(MaintenanceComment)
            .where(MaintenanceComment.machine_id == machine_id)
            .order_by(desc(MaintenanceComment.created_at), desc(MaintenanceComment.id))
        ).all()
