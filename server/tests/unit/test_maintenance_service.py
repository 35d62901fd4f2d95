# server/tests/unit/test_maintenance_service.py
import pytest

from scada.application.services.maintenance_service import add_comment, list_comments
from scada.core.config import settings
from scada.domain.errors import AuthorizationFailure, ConstraintViolation, NotFound
from scada.domain.policies import ADMIN, MachinePrincipal, UserPrincipal

pytestmark = pytest.mark.unit


def test_comment_author_comes_from_principal(Session, machine_factory):
    m = machine_factory()
    with Session() as s:
        c1 = add_comment(s, ADMIN, m.id, comment="Belt replaced", priority="high")
        c2 = add_comment(s, UserPrincipal("alice"), m.id, comment="Noise on axis 2")
    assert c1.username == settings.ADMIN_USERNAME
    assert c1.priority == "high"
    assert c2.username == "alice"
    assert c2.priority == "normal"


def test_comments_listed_newest_first(Session, machine_factory):
    m = machine_factory()
    with Session() as s:
        add_comment(s, ADMIN, m.id, comment="first")
        add_comment(s, ADMIN, m.id, comment="second")
    with Session() as s:
        assert [c.comment for c in list_comments(s, m.id)] == ["second", "first"]


def test_machine_cannot_author(Session, machine_factory):
    m = machine_factory()
    with Session() as s:
        with pytest.raises(AuthorizationFailure):
            add_comment(s, MachinePrincipal(m.id), m.id, comment="self report")
        assert list_comments(s, m.id) == []


def test_unknown_machine(Session):
    with Session() as s:
        with pytest.raises(NotFound):
            add_comment(s, ADMIN, 404, comment="x")
        with pytest.raises(NotFound):
            list_comments(s, 404)


def test_unknown_priority_rejected(Session, machine_factory):
    m = machine_factory()
    with Session() as s:
        with pytest.raises(ConstraintViolation):
            add_comment(s, ADMIN, m.id, comment="x", priority="urgent")
        assert list_comments(s, m.id) == []
