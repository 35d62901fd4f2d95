from __future__ import annotations
"""server/scada/api/endpoints/machines.py
~~~~~~~~~~~~~~~~~~~~~~~~
Machines : enregistrement (admin), listing (opérateurs), mise à jour (admin).
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scada.api.deps import require_admin, require_operator
from scada.api.schemas.machine import MachineCreate, MachineKeyOut, MachineListOut, MachineOut, MachineUpdate
from scada.application.services import registration_service
from scada.domain.policies import Principal
from scada.infrastructure.persistence.database.session import get_db
from scada.infrastructure.persistence.repositories.machine_repository import MachineRepository

router = APIRouter(prefix="/machines")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MachineKeyOut)
def create_machine(
    payload: MachineCreate,
    principal: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return registration_service.register_machine(
        db,
        name=payload.name,
        code=payload.code,
        location=payload.location,
        machine_type=payload.machine_type,
    )


@router.get("", response_model=MachineListOut)
def list_machines(
    principal: Principal = Depends(require_operator),
    db: Session = Depends(get_db),
) -> MachineListOut:
    rows = MachineRepository(db).list_by_name()
    return MachineListOut(machines=[MachineOut.model_validate(m) for m in rows])


@router.put("/{machine_id}", response_model=MachineKeyOut)
def update_machine(
    machine_id: int,
    payload: MachineUpdate,
    principal: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return registration_service.update_machine(
        db,
        machine_id,
        name=payload.name,
        code=payload.code,
        location=payload.location,
        machine_type=payload.machine_type,
        rotate_api_key=payload.rotate_api_key,
    )
