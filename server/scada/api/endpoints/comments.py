from __future__ import annotations
"""server/scada/api/endpoints/comments.py
~~~~~~~~~~~~~~~~~~~~~~~~
Commentaires de maintenance d'une machine (admin ou utilisateur).
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scada.api.deps import require_operator
from scada.api.schemas.comment import CommentIn, CommentListOut, CommentOut
from scada.application.services import maintenance_service
from scada.domain.policies import Principal
from scada.infrastructure.persistence.database.session import get_db

router = APIRouter(prefix="/machines")


@router.post("/{machine_id}/comments", status_code=status.HTTP_201_CREATED, response_model=CommentOut)
def add_comment(
    machine_id: int,
    payload: CommentIn,
    principal: Principal = Depends(require_operator),
    db: Session = Depends(get_db),
):
    return maintenance_service.add_comment(
        db,
        principal,
        machine_id,
        comment=payload.comment,
        priority=payload.priority,
    )


@router.get("/{machine_id}/comments", response_model=CommentListOut)
def get_comments(
    machine_id: int,
    principal: Principal = Depends(require_operator),
    db: Session = Depends(get_db),
) -> CommentListOut:
    rows = maintenance_service.list_comments(db, machine_id)
    return CommentListOut(comments=[CommentOut.model_validate(c) for c in rows])
