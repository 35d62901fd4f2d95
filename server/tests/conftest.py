# server/tests/conftest.py
"""
Conftest *global* pour toute la suite de tests.

Points clés :
- Pose DATABASE_URL SQLite in-memory *avant* l'import de scada.* pour que
  Settings() ne vise jamais ./database.db.
- Centralise les options pytest (--api) et les fixtures HTTP communes
  (api_base, session_retry) utilisées par les tests d'intégration.
- Pour les tests @unit :
  - DB SQLite in-memory partagée (StaticPool) + Base.create_all,
  - ligne admin intégrée recréée avant chaque test, tables vidées après,
  - surcharge FastAPI de get_db vers cette base,
  - factories machines / utilisateurs passant par les vrais services.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest  # noqa: E402
import requests  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from requests.adapters import HTTPAdapter  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from urllib3.util.retry import Retry  # noqa: E402


# ============================================================================
# Helpers
# ============================================================================
def _is_unit(request: pytest.FixtureRequest) -> bool:
    """True si le test courant est marqué @pytest.mark.unit."""
    return request.node.get_closest_marker("unit") is not None


def bearer(credential: str) -> dict:
    return {"Authorization": f"Bearer {credential}"}


# ============================================================================
# Options CLI & fixtures HTTP (intégration)
# ============================================================================
def pytest_addoption(parser):
    parser.addoption("--api", action="store", default=os.getenv("API", "http://localhost:8080"))


@pytest.fixture(scope="session")
def api_base(pytestconfig) -> str:
    return pytestconfig.getoption("--api").rstrip("/")


@pytest.fixture(scope="session")
def session_retry() -> requests.Session:
    """
    Session HTTP robuste avec backoff & retries (utile pour les tests d'intégration).
    """
    s = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=frozenset({"GET", "POST", "PUT"}),
        raise_on_status=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.mount("https://", HTTPAdapter(max_retries=retries))
    return s


# ============================================================================
# UNIT : DB SQLite in-memory partagée + Base.metadata.create_all
# ============================================================================
@pytest.fixture(scope="session")
def _sqlite_engine_unit():
    """
    Engine in-memory **partagé** entre connexions (StaticPool + check_same_thread=False,
    FK activées) : même construction que l'engine applicatif.
    """
    from scada.infrastructure.persistence.database import models  # noqa: F401
    from scada.infrastructure.persistence.database.base import Base
    from scada.infrastructure.persistence.database.session import build_engine

    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture(scope="session")
def _Session_unit(_sqlite_engine_unit):
    return sessionmaker(
        bind=_sqlite_engine_unit,
        future=True,
        autoflush=True,
        expire_on_commit=False,
    )


@pytest.fixture
def Session(request, _Session_unit):
    """
    Fournit un sessionmaker à utiliser comme `with Session() as s:` pour les tests unitaires.
    """
    if not _is_unit(request):
        pytest.skip("Session fixture is only available for unit tests")
    return _Session_unit


@pytest.fixture(autouse=True)
def _fresh_db_for_unit_tests(request, _Session_unit):
    """
    Avant chaque test unitaire : ligne admin intégrée.
    Après : suppression du contenu de toutes les tables.
    ⚠️ Générateur : doit 'yield' aussi hors unit.
    """
    if not _is_unit(request):
        yield
        return

    from scada.infrastructure.persistence.database.base import Base
    from scada.infrastructure.persistence.database.session import seed_admin

    with _Session_unit() as s:
        seed_admin(s)
        s.commit()
    yield
    with _Session_unit() as s:
        for table in reversed(Base.metadata.sorted_tables):
            s.execute(table.delete())
        s.commit()


@pytest.fixture
def db(Session):
    with Session() as s:
        yield s


@pytest.fixture
def client(Session):
    """TestClient avec get_db surchargé vers la base de test."""
    from scada.infrastructure.persistence.database.session import get_db
    from scada.main import app

    def _get_db_for_tests():
        s = Session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db_for_tests
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def admin_headers() -> dict:
    from scada.core.config import settings

    return bearer(settings.ADMIN_TOKEN)


# ============================================================================
# Factories (passent par les services réels)
# ============================================================================
@pytest.fixture
def machine_factory(Session):
    from scada.application.services.registration_service import register_machine

    counter = {"n": 0}

    def _factory(**overrides):
        counter["n"] += 1
        n = counter["n"]
        data = {"name": f"Press {n}", "code": f"PR-{n:03d}", "location": "Hall A", "machine_type": "press"}
        data.update(overrides)
        with Session() as s:
            return register_machine(s, **data)

    return _factory


@pytest.fixture
def user_factory(Session):
    from scada.application.services.registration_service import register_user

    counter = {"n": 0}

    def _factory(**overrides):
        counter["n"] += 1
        data = {"username": f"tech{counter['n']}", "password": "s3cret", "role": "technician"}
        data.update(overrides)
        with Session() as s:
            return register_user(s, **data)

    return _factory
