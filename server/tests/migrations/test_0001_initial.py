# server/tests/migrations/test_0001_initial.py
import pathlib

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from scada.core.config import settings
from scada.infrastructure.persistence.database import models  # noqa: F401
from scada.infrastructure.persistence.database.base import Base

pytestmark = pytest.mark.unit

MIGRATIONS_DIR = pathlib.Path(__file__).resolve().parents[2] / "scada" / "migrations"


@pytest.fixture
def alembic_config(tmp_path, monkeypatch):
    url = f"sqlite+pysqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg, url


def test_migration_0001_upgrade_matches_models(alembic_config):
    """La migration crée les mêmes tables / colonnes que les modèles ORM."""
    cfg, url = alembic_config
    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        insp = inspect(engine)
        tables = set(insp.get_table_names()) - {"alembic_version"}
        assert tables == set(Base.metadata.tables)
        for name, table in Base.metadata.tables.items():
            migrated = {c["name"] for c in insp.get_columns(name)}
            assert migrated == {c.name for c in table.columns}, name
        assert "ix_speed_history_machine_ts" in {i["name"] for i in insp.get_indexes("speed_history")}
    finally:
        engine.dispose()


def test_migration_0001_downgrade(alembic_config):
    cfg, url = alembic_config
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_migration_0001_api_key_enforced_by_unique_index_only(alembic_config):
    """api_key : un seul index unique, comme Base.metadata.create_all."""
    cfg, url = alembic_config
    command.upgrade(cfg, "head")

    engine = create_engine(url)
    try:
        insp = inspect(engine)
        assert all(uc["column_names"] != ["api_key"] for uc in insp.get_unique_constraints("machines"))
        indexes = {i["name"]: i for i in insp.get_indexes("machines")}
        assert indexes["ix_machines_api_key"]["unique"]
        assert indexes["ix_machines_api_key"]["column_names"] == ["api_key"]
    finally:
        engine.dispose()
