"""
Organization Pydantic schemas.
OrganizationDetail is the fixed eager-loaded shape returned by GET /{id}.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.project import ProjectDetail
from app.schemas.task import TaskRead

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class OrganizationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    description: str | None = Field(default=None, max_length=10000)
    teams: list[uuid.UUID] | None = Field(default=None, max_length=500)


class OrganizationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, min_length=1, max_length=200, pattern=SLUG_PATTERN)
    description: str | None = None
    teams: list[uuid.UUID] | None = Field(default=None, max_length=500)


class OrganizationRead(BaseModel):
    id: uuid.UUID
    name: str
    slug: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class OrganizationDetail(OrganizationRead):
    tasks: list[TaskRead] = []
    projects: list[ProjectDetail] = []
