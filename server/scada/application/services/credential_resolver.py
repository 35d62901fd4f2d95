from __future__ import annotations
"""
server/scada/application/services/credential_resolver.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Résolution d'un bearer opaque en principal.

Ordre (tests les moins coûteux d'abord) :
    1) égalité exacte avec ADMIN_TOKEN           → ADMIN (aucun accès base)
    2) préfixe machine → lookup api_key exact     → MachinePrincipal(id) | None
       (un credential préfixé machine ne retombe JAMAIS sur les tokens users)
    3) sinon lookup token utilisateur exact       → UserPrincipal(username) | None

Aucun cache : chaque appel relit la base (clés et tokens peuvent être émis
ou régénérés entre deux requêtes).
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from scada.core.config import settings
from scada.core.logging import redact
from scada.core.security import is_machine_key
from scada.domain.policies import ADMIN, MachinePrincipal, Principal, UserPrincipal
from scada.infrastructure.persistence.repositories.machine_repository import MachineRepository
from scada.infrastructure.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def resolve(bearer: Optional[str], session: Session) -> Optional[Principal]:
    if not bearer:
        return None

    if bearer == settings.ADMIN_TOKEN:
        return ADMIN

    if is_machine_key(bearer):
        machine_id = MachineRepository(session).id_by_api_key(bearer)
        if machine_id is None:
            logger.info("Unknown machine key %s", redact(bearer))
            return None
        return MachinePrincipal(machine_id=machine_id)

    username = UserRepository(session).username_by_token(bearer)
    if username is None:
        logger.info("Unknown user token %s", redact(bearer))
        return None
    return UserPrincipal(username=username)
