from __future__ import annotations
"""server/scada/application/services/registration_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Enregistrement et mise à jour des machines et des utilisateurs.

Chaque opération s'exécute dans une unité de travail : une violation
d'unicité (IntegrityError) annule tout et devient ConstraintViolation.
Pas de nouvel essai automatique, y compris sur une collision de clé émise.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from scada.core.config import settings
from scada.core.security import hash_password, mint_machine_key, mint_user_token
from scada.domain.errors import ConstraintViolation, NotFound
from scada.infrastructure.persistence.database.models.machine import Machine
from scada.infrastructure.persistence.database.models.user import USER_ROLES, User
from scada.infrastructure.persistence.database.session import unit_of_work
from scada.infrastructure.persistence.repositories.machine_repository import MachineRepository
from scada.infrastructure.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _machine_conflict_message(repo: MachineRepository, name: str, code: str, exclude_id: Optional[int] = None) -> str:
    """Message lisible après un rollback : quel champ unique est déjà pris ?"""
    by_code = repo.by_code(code)
    if by_code is not None and by_code.id != exclude_id:
        return "Machine code already exists"
    by_name = repo.by_name(name)
    if by_name is not None and by_name.id != exclude_id:
        return "Machine name already exists"
    return "Machine API key collision, retry"


def register_machine(
    session: Session,
    *,
    name: str,
    code: str,
    location: Optional[str] = None,
    machine_type: Optional[str] = None,
) -> Machine:
    """Crée une machine avec une API key neuve (admin uniquement)."""
    repo = MachineRepository(session)
    try:
        with unit_of_work(session):
            machine = repo.create(
                name=name,
                code=code,
                api_key=mint_machine_key(),
                location=location,
                machine_type=machine_type,
            )
    except IntegrityError as exc:
        message = _machine_conflict_message(repo, name, code)
        logger.info("Machine registration rejected (name=%s code=%s): %s", name, code, message)
        raise ConstraintViolation(message) from exc

    logger.info("Machine registered id=%s code=%s", machine.id, machine.code)
    return machine


def update_machine(
    session: Session,
    machine_id: int,
    *,
    name: Optional[str] = None,
    code: Optional[str] = None,
    location: Optional[str] = None,
    machine_type: Optional[str] = None,
    rotate_api_key: bool = False,
) -> Machine:
    """
    Met à jour l'identité d'une machine (jamais son statut de télémétrie).
    `rotate_api_key` émet une nouvelle clé ; l'ancienne cesse immédiatement
    d'être résolue.
    """
    repo = MachineRepository(session)
    machine = repo.get(machine_id)
    if machine is None:
        raise NotFound("Machine not found")

    new_name = name if name is not None else machine.name
    new_code = code if code is not None else machine.code
    try:
        with unit_of_work(session):
            machine.name = new_name
            machine.code = new_code
            if location is not None:
                machine.location = location
            if machine_type is not None:
                machine.machine_type = machine_type
            if rotate_api_key:
                machine.api_key = mint_machine_key()
            session.flush()
    except IntegrityError as exc:
        raise ConstraintViolation(_machine_conflict_message(repo, new_name, new_code, exclude_id=machine_id)) from exc

    if rotate_api_key:
        logger.info("Machine %s API key rotated", machine_id)
    return machine


def register_user(session: Session, *, username: str, password: str, role: str) -> User:
    """Crée un utilisateur avec un token neuf (admin uniquement)."""
    if role not in USER_ROLES:
        raise ConstraintViolation(f"Invalid role '{role}'")
    repo = UserRepository(session)
    try:
        with unit_of_work(session):
            user = repo.create(
                username=username,
                password_hash=hash_password(password),
                role=role,
                token=mint_user_token(),
            )
    except IntegrityError as exc:
        message = "Username already exists" if repo.by_username(username) else "User token collision, retry"
        logger.info("User registration rejected (username=%s): %s", username, message)
        raise ConstraintViolation(message) from exc

    logger.info("User registered id=%s username=%s role=%s", user.id, user.username, user.role)
    return user


def update_user(
    session: Session,
    user_id: int,
    *,
    role: Optional[str] = None,
    password: Optional[str] = None,
    rotate_token: bool = False,
) -> User:
    """Change rôle / mot de passe, régénère le token. L'admin intégré est intouchable."""
    repo = UserRepository(session)
    user = repo.get(user_id)
    if user is None:
        raise NotFound("User not found")
    if user.username == settings.ADMIN_USERNAME:
        raise ConstraintViolation("Built-in admin cannot be modified")
    if role is not None and role not in USER_ROLES:
        raise ConstraintViolation(f"Invalid role '{role}'")

    try:
        with unit_of_work(session):
            if role is not None:
                user.role = role
            if password is not None:
                user.password_hash = hash_password(password)
            if rotate_token:
                user.token = mint_user_token()
            session.flush()
    except IntegrityError as exc:
        raise ConstraintViolation("User token collision, retry") from exc

    if rotate_token:
        logger.info("User %s token rotated", user.username)
    return user
