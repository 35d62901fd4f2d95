from __future__ import annotations
"""server/scada/api/schemas/machine.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schémas machines (création, mise à jour, listing).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MachineCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    code: str = Field(min_length=1, max_length=64)
    location: Optional[str] = Field(default=None, max_length=255)
    machine_type: Optional[str] = Field(default=None, max_length=100)


class MachineUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    code: Optional[str] = Field(default=None, min_length=1, max_length=64)
    location: Optional[str] = Field(default=None, max_length=255)
    machine_type: Optional[str] = Field(default=None, max_length=100)
    rotate_api_key: bool = False


class MachineKeyOut(BaseModel):
    """Création / mise à jour (admin) : seules réponses qui portent l'API key."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str
    api_key: str
    location: Optional[str] = None
    machine_type: Optional[str] = None


class MachineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str
    location: Optional[str] = None
    machine_type: Optional[str] = None
    current_speed: float
    status_message: str
    is_online: bool
    last_update: int


class MachineListOut(BaseModel):
    machines: list[MachineOut]
