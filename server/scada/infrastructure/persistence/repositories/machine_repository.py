from __future__ import annotations

"""server/scada/infrastructure/persistence/repositories/machine_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository pour les entités Machine.
- Le repo **reçoit** une Session SQLAlchemy fournie par l'appelant
  (endpoint via Depends(get_db) ou service via unit_of_work()).
- Il ne commit jamais : responsabilité de l'appelant.
"""

from typing import Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from scada.infrastructure.persistence.database.models.machine import Machine


class MachineRepository:
    """Accès de haut niveau aux Machines."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, machine_id: int) -> Optional[Machine]:
        return self.db.get(Machine, machine_id)

    def exists(self, machine_id: int) -> bool:
        return self.db.scalar(select(Machine.id).where(Machine.id == machine_id)) is not None

    def id_by_api_key(self, api_key: str) -> Optional[int]:
        """Égalité exacte sur api_key ; ne charge que l'id."""
        return self.db.scalar(select(Machine.id).where(Machine.api_key == api_key))

    def by_name(self, name: str) -> Optional[Machine]:
        return self.db.scalar(select(Machine).where(Machine.name == name))

    def by_code(self, code: str) -> Optional[Machine]:
        return self.db.scalar(select(Machine).where(Machine.code == code))

    def list_by_name(self) -> Sequence[Machine]:
        return self.db.scalars(select(Machine).order_by(Machine.name)).all()

    def create(
        self,
        *,
        name: str,
        code: str,
        api_key: str,
        location: Optional[str] = None,
        machine_type: Optional[str] = None,
    ) -> Machine:
        """
        Crée une Machine **sans commit**.
        `flush()` matérialise l'ID et déclenche les contraintes d'unicité
        (IntegrityError) immédiatement.
        """
        m = Machine(
            name=name,
            code=code,
            api_key=api_key,
            location=location,
            machine_type=machine_type,
        )
        self.db.add(m)
        self.db.flush()
        return m

    def apply_telemetry(
        self,
        machine_id: int,
        *,
        speed: float,
        message: str,
        timestamp: int,
    ) -> bool:
        """
        UPDATE du statut courant. Le verrou d'écriture pris ici sérialise les
        mises à jour concurrentes d'une même machine jusqu'au commit.
        Retourne False si la machine n'existe pas.
        """
        result = self.db.execute(
            update(Machine)
            .where(Machine.id == machine_id)
            .values(
                current_speed=speed,
                status_message=message,
                is_online=True,
                last_update=timestamp,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
