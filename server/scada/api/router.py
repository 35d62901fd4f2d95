from __future__ import annotations
"""server/scada/api/router.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router principal API.
"""
from fastapi import APIRouter

from scada.api.endpoints import auth, comments, health, machines, telemetry, users

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(telemetry.router, tags=["telemetry"])
api_router.include_router(machines.router, tags=["machines"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(users.router, tags=["users"])
