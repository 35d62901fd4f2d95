from __future__ import annotations
"""
server/scada/api/deps.py
~~~~~~~~~~~~~~~~~~~~~~~~
Dépendances communes côté API.

Authentification unique par header `Authorization: Bearer <credential>`.
L'appelant ne déclare jamais son type : le resolver le déduit, la
politique (`scada.domain.policies.authorize`) tranche.

Contenu :
- get_principal   : extrait le bearer et le résout (None si absent/inconnu).
- require(kinds)  : fabrique une dépendance qui exige un type de principal.
- require_admin / require_operator / require_machine : dépendances prêtes.

Conventions :
- 401 "Missing token" si header absent,
- 401 pour un credential inconnu OU d'un type non autorisé (pas de 403).
"""

from typing import Callable, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from scada.application.services.credential_resolver import resolve
from scada.core.security import extract_bearer
from scada.domain.errors import AuthenticationFailure, AuthorizationFailure
from scada.domain.policies import (
    ADMIN_ONLY,
    MACHINES,
    OPERATORS,
    Principal,
    PrincipalKind,
    authorize,
)
from scada.infrastructure.persistence.database.session import get_db


def get_principal(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    bearer = extract_bearer(authorization)
    if bearer is None:
        raise AuthenticationFailure("Missing token")
    return resolve(bearer, db)


def require(required: frozenset[PrincipalKind], denied_message: str = "Invalid token") -> Callable[..., Principal]:
    """
    Usage:
        def endpoint(principal: Principal = Depends(require(OPERATORS))): ...
    """
    def _dependency(principal: Optional[Principal] = Depends(get_principal)) -> Principal:
        if not authorize(principal, required):
            raise AuthorizationFailure(denied_message)
        return principal

    return _dependency


require_admin = require(ADMIN_ONLY, "Admin access required")
require_operator = require(OPERATORS)
require_machine = require(MACHINES, "Invalid machine API key")
