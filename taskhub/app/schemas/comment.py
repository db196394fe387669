"""
Comment Pydantic schemas.
mentions is a list of user ids connected to the comment.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    content: str = Field(min_length=1, max_length=10000)
    task_id: uuid.UUID | None = None
    mentions: list[uuid.UUID] | None = Field(default=None, max_length=100)


class CommentUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1, max_length=10000)
    task_id: uuid.UUID | None = None
    mentions: list[uuid.UUID] | None = Field(default=None, max_length=100)


class CommentRead(BaseModel):
    id: uuid.UUID
    content: str
    task_id: uuid.UUID | None
    author_id: uuid.UUID | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
