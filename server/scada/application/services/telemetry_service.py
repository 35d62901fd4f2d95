from __future__ import annotations
"""
server/scada/application/services/telemetry_service.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Enregistrement de la télémétrie machine + lecture de l'historique.

record_telemetry() écrit, dans UNE seule unité de travail :
    - le statut courant de la machine (speed, message, is_online, last_update)
    - une ligne speed_history avec les mêmes valeurs et le même horodatage

Si l'une des deux écritures échoue, les deux sont annulées (rollback) :
un lecteur ne voit jamais un statut sans sa ligne d'historique, ni
l'inverse.

Sémantique :
    - pas d'idempotence : rejouer le même payload ajoute une ligne
    - dernier écrivain gagnant, dans l'ordre des commits ; aucun contrôle
      sur un horodatage fourni par la machine
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from scada.core.config import settings
from scada.core.utils.datetime import now_epoch
from scada.domain.errors import ConstraintViolation, NotFound, StoreFailure
from scada.infrastructure.persistence.database.models.speed_history import SpeedHistory
from scada.infrastructure.persistence.database.session import unit_of_work
from scada.infrastructure.persistence.repositories.machine_repository import MachineRepository
from scada.infrastructure.persistence.repositories.speed_history_repository import SpeedHistoryRepository

logger = logging.getLogger(__name__)


def record_telemetry(
    session: Session,
    machine_id: int,
    speed: float,
    message: Optional[str] = None,
) -> int:
    """
    Applique une mise à jour de télémétrie pour `machine_id`.

    Retour : horodatage (secondes epoch) partagé par le statut et l'historique.

    Exceptions :
      - NotFound si la machine n'existe plus (rien n'est écrit),
      - StoreFailure pour toute erreur de persistance (rollback complet).
    """
    text = message if message is not None else ""
    timestamp = now_epoch()

    machines = MachineRepository(session)
    history = SpeedHistoryRepository(session)

    try:
        with unit_of_work(session):
            if not machines.apply_telemetry(machine_id, speed=speed, message=text, timestamp=timestamp):
                raise NotFound("Machine not found")
            history.append(machine_id=machine_id, speed=speed, message=text, timestamp=timestamp)
    except SQLAlchemyError as exc:
        logger.error("Telemetry update failed for machine %s: %s", machine_id, exc)
        raise StoreFailure("Failed to update machine") from exc

    logger.debug("Telemetry machine=%s speed=%s ts=%s", machine_id, speed, timestamp)
    return timestamp


def resolve_history_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.HISTORY_DEFAULT_LIMIT
    if limit < 1 or limit > settings.HISTORY_MAX_LIMIT:
        raise ConstraintViolation(f"limit must be between 1 and {settings.HISTORY_MAX_LIMIT}")
    return limit


def machine_history(session: Session, machine_id: int, limit: Optional[int] = None) -> Sequence[SpeedHistory]:
    """Historique d'une machine, plus récent d'abord, borné par `limit`."""
    n = resolve_history_limit(limit)
    if not MachineRepository(session).exists(machine_id):
        raise NotFound("Machine not found")
    return SpeedHistoryRepository(session).latest(machine_id, n)
