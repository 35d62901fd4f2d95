from __future__ import annotations
"""server/scada/core/logging.py
~~~~~~~~~~~~~~~~~~~~~~~~
Configuration logs.
"""
import logging

from scada.core.config import settings


def setup_logging(level: int | str | None = None) -> None:
    if level is None:
        level = settings.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def redact(credential: str | None) -> str:
    """Forme abrégée d'un credential pour les logs (jamais la valeur complète)."""
    if not credential:
        return "<empty>"
    return f"{credential[:10]}…" if len(credential) > 10 else "***"
