# server/scada/api/endpoints/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from scada.api.schemas.user import LoginIn, LoginOut
from scada.application.services.auth_service import login as login_service
from scada.infrastructure.persistence.database.session import get_db

router = APIRouter()


@router.post("/login", response_model=LoginOut)
def login(body: LoginIn, s: Session = Depends(get_db)) -> LoginOut:
    result = login_service(s, body.username, body.password)
    return LoginOut(token=result.token, role=result.role, username=result.username)
