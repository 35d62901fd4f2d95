from __future__ import annotations
"""server/scada/main.py
~~~~~~~~~~~~~~~~~~~~~~~~
Point d'entrée FastAPI.

    uvicorn scada.main:app --app-dir server --host 0.0.0.0 --port 8080
"""
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scada.api.router import api_router
from scada.core.config import settings
from scada.core.logging import setup_logging
from scada.core.middleware import install_global_middleware
from scada.infrastructure.persistence.database.session import init_db

app = FastAPI(title="SCADA Server", version="0.3.0")

allow_origins: List[str] = []
if origins := settings.CORS_ALLOW_ORIGINS:
    allow_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins or ["*"],
    allow_credentials=bool(allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
install_global_middleware(app)


@app.on_event("startup")
def startup() -> None:
    setup_logging()
    init_db()


app.include_router(api_router, prefix="/api")
