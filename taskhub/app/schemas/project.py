"""
Project Pydantic schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.task import TaskRead
from app.schemas.team import TeamRead


class ProjectCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=10000)
    organization_id: uuid.UUID
    teams: list[uuid.UUID] | None = Field(default=None, max_length=500)


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    organization_id: uuid.UUID | None = None
    teams: list[uuid.UUID] | None = Field(default=None, max_length=500)


class ProjectRead(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    organization_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectDetail(ProjectRead):
    """Project as embedded in an organization: teams with members, and tasks."""

    teams: list[TeamRead] = []
    tasks: list[TaskRead] = []
