from __future__ import annotations
"""server/scada/api/schemas/comment.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schémas commentaires de maintenance.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Priority = Literal["low", "normal", "high", "critical"]


class CommentIn(BaseModel):
    comment: str = Field(min_length=1)
    priority: Priority = "normal"


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    machine_id: int
    comment: str
    priority: Priority
    username: str
    created_at: int


class CommentListOut(BaseModel):
    comments: list[CommentOut]
