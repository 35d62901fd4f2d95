from __future__ import annotations
"""
server/scada/infrastructure/persistence/database/base.py

Base ORM SQLAlchemy 2.x.

Les tables sont enregistrées dans Base.metadata à l'import du package
`scada.infrastructure.persistence.database.models` : tout appel à
`Base.metadata.create_all(...)` doit importer ce package avant (voir
`session.init_db` et le conftest des tests).
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base declarative pour tous les modèles."""
    pass


__all__ = ["Base"]
