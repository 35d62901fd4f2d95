from __future__ import annotations
"""server/scada/core/security.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sécurité : génération des credentials, mots de passe, header Bearer.

- Les API keys machine portent MACHINE_KEY_PREFIX, les tokens utilisateur
  USER_TOKEN_PREFIX : les deux espaces sont disjoints par construction, et
  disjoints de la constante ADMIN_TOKEN (validée dans Settings).
- Les mots de passe sont stockés hachés (passlib).
"""
import uuid
from typing import Optional

from passlib.context import CryptContext

from scada.core.config import settings

_pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

BEARER_SCHEME = "bearer"


def mint_machine_key() -> str:
    return f"{settings.MACHINE_KEY_PREFIX}{uuid.uuid4().hex}"


def mint_user_token() -> str:
    return f"{settings.USER_TOKEN_PREFIX}{uuid.uuid4().hex}"


def is_machine_key(credential: str) -> bool:
    return credential.startswith(settings.MACHINE_KEY_PREFIX)


def hash_password(password: str) -> str:
    return _pwd_ctx.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return _pwd_ctx.verify(password, password_hash)
    except (ValueError, TypeError):
        # hash illisible (ligne corrompue) → refus, pas de 500
        return False


def extract_bearer(authorization: Optional[str]) -> Optional[str]:
    """
    `Authorization: Bearer <credential>` → credential, sinon None.
    Le schéma est insensible à la casse ; le credential est pris tel quel.
    """
    if not authorization:
        return None
    scheme, _, credential = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    credential = credential.strip()
    return credential or None
