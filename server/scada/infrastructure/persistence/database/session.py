# server/scada/infrastructure/persistence/database/session.py
from __future__ import annotations

"""SQLAlchemy engine/session setup + FastAPI dependency + unit of work."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, select
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from scada.core.config import settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None


def build_engine(database_url: str) -> Engine:
    """
    Engine SQLAlchemy avec connect_args selon le dialecte.
    - PostgreSQL: connect_timeout
    - SQLite: check_same_thread désactivé, busy timeout (les écritures
      concurrentes attendent le verrou au lieu d'échouer), FK activées,
      StaticPool pour une base in-memory partagée
    """
    url = make_url(database_url)
    backend = url.get_backend_name()  # e.g. "postgresql", "sqlite"
    kwargs: dict = dict(future=True, pool_pre_ping=True)
    connect_args: dict = {}

    if backend.startswith("postgresql") or backend == "postgres":
        connect_args["connect_timeout"] = settings.DB_CONNECT_TIMEOUT
    elif backend.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        connect_args["timeout"] = max(settings.DB_CONNECT_TIMEOUT, 30)
        db_name = (url.database or "").strip()
        if db_name in ("", ":memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, connect_args=connect_args, **kwargs)

    if backend.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
            dbapi_connection.execute("PRAGMA foreign_keys=ON")

    return engine


def init_engine() -> Engine:
    """Engine singleton construit depuis settings.DATABASE_URL."""
    global _engine
    if _engine is None:
        _engine = build_engine(settings.DATABASE_URL)
    return _engine


def init_sessionmaker() -> sessionmaker:
    """Create (once) and return the SessionLocal factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=init_engine(),
            future=True,
            autoflush=True,
            expire_on_commit=False,
        )
    return _SessionLocal


def get_session() -> Session:
    """Return a new Session (caller is responsible for closing it)."""
    return init_sessionmaker()()


# FastAPI dependency (auto-close)
def get_db() -> Iterator[Session]:
    """
    Usage:
        def endpoint(db: Session = Depends(get_db)): ...
    """
    db = get_session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """
    Portée transactionnelle unique : commit si le bloc se termine, rollback
    sur n'importe quelle exception (puis ré-levée telle quelle).

        with unit_of_work(db):
            repo_a.write(...)
            repo_b.write(...)
    """
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise


def init_db(engine: Engine | None = None) -> None:
    """Crée le schéma (idempotent) puis la ligne de l'admin intégré."""
    # enregistre toutes les tables dans Base.metadata
    from scada.infrastructure.persistence.database import models  # noqa: F401
    from scada.infrastructure.persistence.database.base import Base

    engine = engine or init_engine()
    Base.metadata.create_all(bind=engine)
    with Session(bind=engine, expire_on_commit=False) as s:
        try:
            with unit_of_work(s):
                seed_admin(s)
        except IntegrityError:
            # un autre worker a inséré la ligne entre le contrôle et le flush
            logger.info("Admin seed already created concurrently (username=%s)", settings.ADMIN_USERNAME)


def seed_admin(session: Session) -> None:
    """
    Ligne permanente de l'admin intégré (réserve le username, permet le login).
    Son token reste NULL : le credential admin est la constante ADMIN_TOKEN.
    """
    from scada.core.security import hash_password
    from scada.infrastructure.persistence.database.models.user import User

    existing = session.scalar(select(User).where(User.username == settings.ADMIN_USERNAME))
    if existing is not None:
        logger.debug("Admin seed already present (id=%s)", existing.id)
        return
    session.add(
        User(
            username=settings.ADMIN_USERNAME,
            password_hash=hash_password(settings.ADMIN_PASSWORD),
            role="admin",
            token=None,
        )
    )
    session.flush()
    logger.info("Admin seed created (username=%s)", settings.ADMIN_USERNAME)
