from __future__ import annotations
"""server/scada/core/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Paramètres (pydantic-settings).
"""

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+pysqlite:///./database.db"
    DB_CONNECT_TIMEOUT: int = 5
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: Optional[str] = None

    # Principal admin intégré : constante de configuration, jamais une ligne rotative.
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_TOKEN: str = "admin_token_12345"

    # Préfixes réservés : ils rendent les espaces de credentials disjoints.
    MACHINE_KEY_PREFIX: str = "machine_"
    USER_TOKEN_PREFIX: str = "user_"

    HISTORY_DEFAULT_LIMIT: int = 100
    HISTORY_MAX_LIMIT: int = 1000

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @model_validator(mode="after")
    def _check_credential_namespaces(self) -> "Settings":
        if not self.MACHINE_KEY_PREFIX or not self.USER_TOKEN_PREFIX:
            raise ValueError("credential prefixes must not be empty")
        if self.MACHINE_KEY_PREFIX.startswith(self.USER_TOKEN_PREFIX) or self.USER_TOKEN_PREFIX.startswith(
            self.MACHINE_KEY_PREFIX
        ):
            raise ValueError("MACHINE_KEY_PREFIX and USER_TOKEN_PREFIX must not overlap")
        if not self.ADMIN_TOKEN:
            raise ValueError("ADMIN_TOKEN must not be empty")
        if self.ADMIN_TOKEN.startswith((self.MACHINE_KEY_PREFIX, self.USER_TOKEN_PREFIX)):
            raise ValueError("ADMIN_TOKEN must not use a reserved credential prefix")
        if not 0 < self.HISTORY_DEFAULT_LIMIT <= self.HISTORY_MAX_LIMIT:
            raise ValueError("HISTORY_DEFAULT_LIMIT must be within 1..HISTORY_MAX_LIMIT")
        return self


settings = Settings()
