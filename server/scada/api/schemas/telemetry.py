from __future__ import annotations
"""server/scada/api/schemas/telemetry.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schémas télémétrie (mise à jour machine, historique).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpeedUpdateIn(BaseModel):
    speed: float = Field(allow_inf_nan=False)
    message: Optional[str] = None

    @field_validator("speed", mode="before")
    @classmethod
    def _no_bool_speed(cls, v):
        # JSON true/false ne sont pas des vitesses
        if isinstance(v, bool):
            raise ValueError("speed must be a number")
        return v


class UpdateOut(BaseModel):
    success: bool
    timestamp: int


class SpeedHistoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    speed: float
    message: Optional[str] = None
    timestamp: int


class HistoryOut(BaseModel):
    history: list[SpeedHistoryOut]
