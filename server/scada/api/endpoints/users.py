from __future__ import annotations
"""server/scada/api/endpoints/users.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilisateurs : création, listing, mise à jour (admin uniquement).
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from scada.api.deps import require_admin
from scada.api.schemas.user import UserCreate, UserListOut, UserOut, UserTokenOut, UserUpdate
from scada.application.services import registration_service
from scada.domain.policies import Principal
from scada.infrastructure.persistence.database.session import get_db
from scada.infrastructure.persistence.repositories.user_repository import UserRepository

router = APIRouter(prefix="/users")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserTokenOut)
def create_user(
    payload: UserCreate,
    principal: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return registration_service.register_user(
        db,
        username=payload.username,
        password=payload.password,
        role=payload.role,
    )


@router.get("", response_model=UserListOut)
def list_users(
    principal: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> UserListOut:
    return UserListOut(users=[UserOut.model_validate(u) for u in UserRepository(db).list_by_username()])


@router.put("/{user_id}", response_model=UserTokenOut)
def update_user(
    user_id: int,
    payload: UserUpdate,
    principal: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return registration_service.update_user(
        db,
        user_id,
        role=payload.role,
        password=payload.password,
        rotate_token=payload.rotate_token,
    )
