from __future__ import annotations
"""server/scada/application/services/auth_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Login username / mot de passe → credential à présenter en Bearer.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from scada.core.config import settings
from scada.core.security import verify_password
from scada.domain.errors import AuthenticationFailure
from scada.infrastructure.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: str
    username: str


def login(session: Session, username: str, password: str) -> LoginResult:
    """
    Vérifie le couple username/password.
    L'admin intégré reçoit la constante ADMIN_TOKEN ; les autres leur token.
    """
    user = UserRepository(session).by_username(username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected for username=%s", username)
        raise AuthenticationFailure("Invalid credentials")

    if user.username == settings.ADMIN_USERNAME:
        token = settings.ADMIN_TOKEN
    elif user.token:
        token = user.token
    else:
        # compte sans token : rien à présenter en Bearer
        raise AuthenticationFailure("Invalid credentials")

    return LoginResult(token=token, role=user.role, username=user.username)
