# server/scada/domain/policies.py

from __future__ import annotations
"""
Règles d'autorisation.

Un credential résolu est un `Principal` (variante étiquetée) :

    Admin                  → principal intégré (constante de configuration)
    UserPrincipal(name)    → opérateur humain (token utilisateur)
    MachinePrincipal(id)   → machine physique (API key)

Fonction principale :
    authorize(principal, required)
Décision pure (aucun accès base) : le type du principal appartient-il à
l'ensemble requis par l'opération ? `None` est toujours refusé.
"""

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional

from scada.domain.errors import AuthorizationFailure


class PrincipalKind(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"
    MACHINE = "machine"


@dataclass(frozen=True)
class Principal:
    kind: ClassVar[PrincipalKind]


@dataclass(frozen=True)
class AdminPrincipal(Principal):
    kind: ClassVar[PrincipalKind] = PrincipalKind.ADMIN


@dataclass(frozen=True)
class UserPrincipal(Principal):
    username: str
    kind: ClassVar[PrincipalKind] = PrincipalKind.USER


@dataclass(frozen=True)
class MachinePrincipal(Principal):
    machine_id: int
    kind: ClassVar[PrincipalKind] = PrincipalKind.MACHINE


ADMIN = AdminPrincipal()

# Ensembles requis par la couche d'opérations
ADMIN_ONLY = frozenset({PrincipalKind.ADMIN})
OPERATORS = frozenset({PrincipalKind.ADMIN, PrincipalKind.USER})
MACHINES = frozenset({PrincipalKind.MACHINE})


def authorize(principal: Optional[Principal], required: frozenset[PrincipalKind]) -> bool:
    """True si `principal` est accepté par l'ensemble `required`."""
    if principal is None:
        return False
    return principal.kind in required


def author_name(principal: Principal, admin_username: str) -> str:
    """Nom d'auteur d'un commentaire : admin intégré ou utilisateur, jamais une machine."""
    if isinstance(principal, AdminPrincipal):
        return admin_username
    if isinstance(principal, UserPrincipal):
        return principal.username
    raise AuthorizationFailure("Machines cannot author maintenance comments")
