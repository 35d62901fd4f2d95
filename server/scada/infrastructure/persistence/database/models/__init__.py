from __future__ import annotations
"""server/scada/infrastructure/persistence/database/models/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~
Modèles ORM (register for Alembic / create_all).
"""

from .machine import Machine
from .user import User
from .speed_history import SpeedHistory
from .maintenance_comment import MaintenanceComment

__all__ = ["Machine", "User", "SpeedHistory", "MaintenanceComment"]
