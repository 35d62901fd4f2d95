# server/tests/unit/test_config_settings.py
import pytest
from pydantic import ValidationError

from scada.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults_are_consistent():
    s = Settings()
    assert s.MACHINE_KEY_PREFIX == "machine_"
    assert s.USER_TOKEN_PREFIX == "user_"
    assert 1 <= s.HISTORY_DEFAULT_LIMIT <= s.HISTORY_MAX_LIMIT


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "ops-root-token")
    monkeypatch.setenv("HISTORY_DEFAULT_LIMIT", "50")
    s = Settings()
    assert s.ADMIN_TOKEN == "ops-root-token"
    assert s.HISTORY_DEFAULT_LIMIT == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"MACHINE_KEY_PREFIX": ""},
        {"MACHINE_KEY_PREFIX": "tok_", "USER_TOKEN_PREFIX": "tok_"},
        {"MACHINE_KEY_PREFIX": "m_", "USER_TOKEN_PREFIX": "m_user_"},
        {"ADMIN_TOKEN": ""},
        {"ADMIN_TOKEN": "machine_root"},
        {"ADMIN_TOKEN": "user_root"},
        {"HISTORY_DEFAULT_LIMIT": 0},
        {"HISTORY_DEFAULT_LIMIT": 2000, "HISTORY_MAX_LIMIT": 1000},
    ],
)
def test_rejects_overlapping_credential_namespaces(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)
