from __future__ import annotations
"""server/scada/migrations/env.py
~~~~~~~~~~~~~~~~~~~~~~~~
Environnement Alembic : URL depuis settings.DATABASE_URL, cible Base.metadata.
"""
from alembic import context

from scada.core.config import settings
from scada.infrastructure.persistence.database import models  # noqa: F401
from scada.infrastructure.persistence.database.base import Base
from scada.infrastructure.persistence.database.session import build_engine

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = build_engine(settings.DATABASE_URL)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
