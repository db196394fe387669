"""
Attachment Pydantic schemas.
task_id on create is accepted but always overwritten by the route's task id.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class AttachmentCreate(BaseModel):
    filename: str = Field(min_length=1, max_length=500)
    file_url: str = Field(min_length=1, max_length=2000)
    mime_type: str = Field(default="application/octet-stream", max_length=200)
    file_size: int | None = Field(default=None, ge=0)
    task_id: uuid.UUID | None = None


class AttachmentUpdate(BaseModel):
    filename: str | None = Field(default=None, min_length=1, max_length=500)
    file_url: str | None = Field(default=None, min_length=1, max_length=2000)
    mime_type: str | None = Field(default=None, max_length=200)
    file_size: int | None = Field(default=None, ge=0)


class AttachmentRead(BaseModel):
    id: uuid.UUID
    filename: str
    file_url: str
    mime_type: str
    file_size: int | None
    task_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
