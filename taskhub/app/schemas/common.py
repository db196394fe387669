"""
Schemas shared by several route modules.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class RelationLink(BaseModel):
    """Body of the "connect existing rows" endpoints."""

    ids: list[uuid.UUID] = Field(min_length=1, max_length=500)


class Message(BaseModel):
    message: str
