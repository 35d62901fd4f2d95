from __future__ import annotations
"""
server/scada/domain/errors.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Taxonomie des erreurs métier.

Chaque erreur porte le code HTTP qui lui correspond ; la traduction en
réponse `{"error": "..."}` est faite une seule fois par les handlers
installés dans `scada.core.middleware`.

    AuthenticationFailure  → 401 (bearer absent ou inconnu)
    AuthorizationFailure   → 401 (type de principal non autorisé)
    ConstraintViolation    → 400 (unicité, modification interdite)
    NotFound               → 404
    StoreFailure           → 500 (toute autre erreur de persistance)
"""


class ScadaError(Exception):
    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationFailure(ScadaError):
    status_code = 401
    default_message = "Missing token"


class AuthorizationFailure(ScadaError):
    status_code = 401
    default_message = "Invalid token"


class ConstraintViolation(ScadaError):
    status_code = 400
    default_message = "Constraint violation"


class NotFound(ScadaError):
    status_code = 404
    default_message = "Not found"


class StoreFailure(ScadaError):
    status_code = 500
    default_message = "Database error"
