# server/tests/unit/test_credential_resolver.py
import pytest

from scada.application.services.credential_resolver import resolve
from scada.core.config import settings
from scada.core.security import hash_password
from scada.domain.policies import ADMIN, MachinePrincipal, UserPrincipal
from scada.infrastructure.persistence.repositories.user_repository import UserRepository

pytestmark = pytest.mark.unit


def test_admin_token_resolves_without_store(Session):
    with Session() as s:
        assert resolve(settings.ADMIN_TOKEN, s) == ADMIN


def test_admin_token_wins_even_if_a_user_row_carries_it(Session):
    with Session() as s:
        UserRepository(s).create(
            username="shadow", password_hash=hash_password("x"), role="manager", token=settings.ADMIN_TOKEN
        )
        s.commit()
        assert resolve(settings.ADMIN_TOKEN, s) == ADMIN


def test_machine_key_resolves_to_machine(Session, machine_factory):
    m = machine_factory()
    with Session() as s:
        assert resolve(m.api_key, s) == MachinePrincipal(machine_id=m.id)


def test_user_token_resolves_to_user(Session, user_factory):
    u = user_factory(username="alice")
    with Session() as s:
        assert resolve(u.token, s) == UserPrincipal(username="alice")


def test_user_with_admin_role_is_still_a_user(Session, user_factory):
    u = user_factory(username="boss", role="admin")
    with Session() as s:
        assert resolve(u.token, s) == UserPrincipal(username="boss")


def test_machine_prefixed_unknown_never_falls_back_to_user_tokens(Session):
    spoof = f"{settings.MACHINE_KEY_PREFIX}not-a-real-key"
    with Session() as s:
        UserRepository(s).create(username="mallory", password_hash=hash_password("x"), role="technician", token=spoof)
        s.commit()
        assert resolve(spoof, s) is None


@pytest.mark.parametrize("bearer", [None, "", "garbage", "user_unknown", "machine_unknown", "admin_token_1234"])
def test_unknown_or_empty_resolves_to_none(Session, machine_factory, user_factory, bearer):
    machine_factory()
    user_factory()
    with Session() as s:
        assert resolve(bearer, s) is None


def test_rotated_machine_key_stops_resolving(Session, machine_factory):
    from scada.application.services.registration_service import update_machine

    m = machine_factory()
    old_key = m.api_key
    with Session() as s:
        rotated = update_machine(s, m.id, rotate_api_key=True)
        new_key = rotated.api_key
    assert new_key != old_key
    with Session() as s:
        assert resolve(old_key, s) is None
        assert resolve(new_key, s) == MachinePrincipal(machine_id=m.id)


def test_admin_seed_row_has_no_token(Session):
    with Session() as s:
        admin_row = UserRepository(s).by_username(settings.ADMIN_USERNAME)
        assert admin_row is not None
        assert admin_row.token is None
        assert admin_row.role == "admin"
