"""
Activity Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ActivityCreate(BaseModel):
    action: str = Field(min_length=1, max_length=200)
    entity_type: str = Field(min_length=1, max_length=100)
    entity_id: uuid.UUID | None = None
    meta: dict[str, Any] | None = None
    user_id: uuid.UUID | None = None


class ActivityUpdate(BaseModel):
    action: str | None = Field(default=None, min_length=1, max_length=200)
    entity_type: str | None = Field(default=None, min_length=1, max_length=100)
    entity_id: uuid.UUID | None = None
    meta: dict[str, Any] | None = None
    user_id: uuid.UUID | None = None


class ActivityRead(BaseModel):
    id: uuid.UUID
    action: str
    entity_type: str
    entity_id: uuid.UUID | None
    meta: dict[str, Any] | None
    user_id: uuid.UUID | None
    created_at: datetime

    model_config = {"from_attributes": True}
