"""
Organization service.
get() returns the full structure: tasks, and projects with their teams
(members included) and tasks.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheGateway
from app.core.result import Err, NotFound, Ok, Result
from app.crud.organization import crud_organization
from app.models.organization import Organization
from app.models.task import Task
from app.models.team import Team
from app.schemas.organization import OrganizationRead
from app.services.base import EntityService


class OrganizationService(EntityService[Organization]):
    entity_name = "Organization"
    namespace = "organizations"
    read_schema = OrganizationRead
    relation_fields = ("teams",)
    # projects are removed with their organization
    invalidates = ("organizations", "tasks", "projects")

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_organization, cache)

    async def get(self, db: AsyncSession, id: uuid.UUID) -> Result[Organization]:
        organization = await crud_organization.get_with_structure(db, id)
        if organization is None:
            return Err(NotFound(self.entity_name))
        return Ok(organization)

    async def get_tasks(self, db: AsyncSession, id: uuid.UUID) -> Result[list[Task]]:
        tasks = await crud_organization.get_tasks(db, id)
        if tasks is None:
            return Err(NotFound(self.entity_name))
        return Ok(tasks)

    async def get_teams(self, db: AsyncSession, id: uuid.UUID) -> Result[list[Team]]:
        teams = await crud_organization.get_teams(db, id)
        if teams is None:
            return Err(NotFound(self.entity_name))
        return Ok(teams)

    async def add_tasks(
        self, db: AsyncSession, id: uuid.UUID, task_ids: list[uuid.UUID]
    ) -> Result[Organization]:
        result = await self.link(db, id, "tasks", task_ids)
        if isinstance(result, Err):
            return result
        return await self.get(db, id)

    async def add_teams(
        self, db: AsyncSession, id: uuid.UUID, team_ids: list[uuid.UUID]
    ) -> Result[Organization]:
        result = await self.link(db, id, "teams", team_ids)
        if isinstance(result, Err):
            return result
        return await self.get(db, id)
