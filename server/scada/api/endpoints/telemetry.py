from __future__ import annotations
"""
server/scada/api/endpoints/telemetry.py
~~~~~~~~~~~~~~~~~~~~~~~~
POST /machines/update       : télémétrie envoyée par une machine (API key).
GET  /machines/{id}/history : historique, plus récent d'abord (opérateurs).

Notes :
- La machine ne transmet jamais son id : il vient de la résolution de sa clé.
- `limit` absent → HISTORY_DEFAULT_LIMIT ; hors 1..HISTORY_MAX_LIMIT → 400.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from scada.api.deps import require_machine, require_operator
from scada.api.schemas.telemetry import HistoryOut, SpeedHistoryOut, SpeedUpdateIn, UpdateOut
from scada.application.services.telemetry_service import machine_history, record_telemetry
from scada.domain.policies import Principal
from scada.infrastructure.persistence.database.session import get_db

router = APIRouter(prefix="/machines")


@router.post("/update", response_model=UpdateOut)
def update_machine_speed(
    payload: SpeedUpdateIn,
    principal: Principal = Depends(require_machine),
    db: Session = Depends(get_db),
) -> UpdateOut:
    timestamp = record_telemetry(db, principal.machine_id, payload.speed, payload.message)
    return UpdateOut(success=True, timestamp=timestamp)


@router.get("/{machine_id}/history", response_model=HistoryOut)
def get_history(
    machine_id: int,
    limit: Optional[int] = Query(default=None),
    principal: Principal = Depends(require_operator),
    db: Session = Depends(get_db),
) -> HistoryOut:
    rows = machine_history(db, machine_id, limit)
    return HistoryOut(history=[SpeedHistoryOut.model_validate(r) for r in rows])
