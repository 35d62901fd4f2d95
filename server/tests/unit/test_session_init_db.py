# server/tests/unit/test_session_init_db.py
import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session as OrmSession

from scada.core.config import settings
from scada.infrastructure.persistence.database.models.user import User
from scada.infrastructure.persistence.database.session import build_engine, init_db

pytestmark = pytest.mark.unit


@pytest.fixture
def file_engine(tmp_path):
    engine = build_engine(f"sqlite+pysqlite:///{tmp_path / 'init.db'}")
    try:
        yield engine
    finally:
        engine.dispose()


def _admin_rows(engine) -> int:
    with engine.connect() as conn:
        return conn.scalar(select(func.count()).select_from(User).where(User.username == settings.ADMIN_USERNAME))


def test_init_db_is_idempotent(file_engine):
    init_db(file_engine)
    init_db(file_engine)
    assert _admin_rows(file_engine) == 1


def test_init_db_tolerates_admin_inserted_by_another_worker(file_engine, monkeypatch):
    """Le contrôle d'existence rate (course au démarrage) : l'insert en double ne casse pas init_db."""
    init_db(file_engine)
    monkeypatch.setattr(OrmSession, "scalar", lambda self, *a, **kw: None)

    init_db(file_engine)

    monkeypatch.undo()
    assert _admin_rows(file_engine) == 1
