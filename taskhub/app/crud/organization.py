"""
Organization CRUD operations.
get_with_structure loads the fixed nested shape returned by GET /organizations/{id}.
"""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.crud.base import CRUDBase
from app.models.organization import Organization
from app.models.project import Project
from app.models.task import Task
from app.models.team import Team


class CRUDOrganization(CRUDBase[Organization]):

    async def get_with_structure(
        self, db: AsyncSession, organization_id: uuid.UUID
    ) -> Organization | None:
        """
        Fetch an organization with its tasks, and its projects each with
        their teams (and the teams' members) and tasks.
        """
        result = await db.execute(
            select(Organization)
            .options(
                selectinload(Organization.tasks).selectinload(Task.tags),
                selectinload(Organization.projects).options(
                    selectinload(Project.teams).selectinload(Team.members),
                    selectinload(Project.tasks).selectinload(Task.tags),
                ),
            )
            .where(Organization.id == organization_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_tasks(
        self, db: AsyncSession, organization_id: uuid.UUID
    ) -> list[Task] | None:
        return await self.get_related(
            db,
            parent_id=organization_id,
            relation="tasks",
            options=[selectinload(Task.tags)],
        )

    async def get_teams(
        self, db: AsyncSession, organization_id: uuid.UUID
    ) -> list[Team] | None:
        return await self.get_related(
            db,
            parent_id=organization_id,
            relation="teams",
            options=[selectinload(Team.members)],
        )


crud_organization = CRUDOrganization(Organization)
