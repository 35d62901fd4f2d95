from __future__ import annotations
"""server/scada/application/services/maintenance_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Commentaires de maintenance (append-only).
"""
from typing import Sequence

from sqlalchemy.orm import Session

from scada.core.config import settings
from scada.core.utils.datetime import now_epoch
from scada.domain.errors import ConstraintViolation, NotFound
from scada.domain.policies import Principal, author_name
from scada.infrastructure.persistence.database.models.maintenance_comment import PRIORITIES, MaintenanceComment
from scada.infrastructure.persistence.database.session import unit_of_work
from scada.infrastructure.persistence.repositories.comment_repository import CommentRepository
from scada.infrastructure.persistence.repositories.machine_repository import MachineRepository


def add_comment(
    session: Session,
    principal: Principal,
    machine_id: int,
    *,
    comment: str,
    priority: str = "normal",
) -> MaintenanceComment:
    if priority not in PRIORITIES:
        raise ConstraintViolation(f"Invalid priority '{priority}'")
    if not MachineRepository(session).exists(machine_id):
        raise NotFound("Machine not found")
    with unit_of_work(session):
        return CommentRepository(session).add(
            machine_id=machine_id,
            username=author_name(principal, settings.ADMIN_USERNAME),
            comment=comment,
            priority=priority,
            created_at=now_epoch(),
        )


def list_comments(session: Session, machine_id: int) -> Sequence[MaintenanceComment]:
    if not MachineRepository(session).exists(machine_id):
        raise NotFound("Machine not found")
    return CommentRepository(session).for_machine(machine_id)
