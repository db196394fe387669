"""
Organization routes.
GET /organizations/{id} returns the organization with its tasks and its
projects (teams with members, and tasks). Tasks and teams can be connected
to an existing organization by id.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import DBSession, OrganizationServiceDep, get_current_user
from app.core.exceptions import respond
from app.schemas.common import RelationLink
from app.schemas.organization import (
    OrganizationCreate,
    OrganizationDetail,
    OrganizationRead,
    OrganizationUpdate,
)
from app.schemas.task import TaskRead
from app.schemas.team import TeamRead

router = APIRouter(
    prefix="/organizations",
    tags=["Organizations"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[OrganizationRead], summary="List all organizations")
async def list_organizations(db: DBSession, service: OrganizationServiceDep):
    return respond(await service.list(db), OrganizationRead)


@router.get(
    "/{organization_id}",
    response_model=OrganizationDetail,
    summary="Get an organization with its projects, teams and tasks",
)
async def get_organization(
    organization_id: uuid.UUID, db: DBSession, service: OrganizationServiceDep
):
    return respond(await service.get(db, organization_id), OrganizationDetail)


@router.post(
    "/",
    response_model=OrganizationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an organization",
)
async def create_organization(
    organization_in: OrganizationCreate,
    db: DBSession,
    service: OrganizationServiceDep,
):
    return respond(await service.create(db, organization_in), OrganizationRead)


@router.put(
    "/{organization_id}",
    response_model=OrganizationRead,
    summary="Update an organization",
)
async def update_organization(
    organization_id: uuid.UUID,
    organization_in: OrganizationUpdate,
    db: DBSession,
    service: OrganizationServiceDep,
):
    return respond(
        await service.update(db, organization_id, organization_in), OrganizationRead
    )


@router.delete(
    "/{organization_id}",
    response_model=OrganizationRead,
    summary="Delete an organization",
)
async def delete_organization(
    organization_id: uuid.UUID, db: DBSession, service: OrganizationServiceDep
):
    return respond(await service.delete(db, organization_id), OrganizationRead)


# ── Relations ─────────────────────────────────────────────────────────────────

@router.get(
    "/{organization_id}/tasks",
    response_model=list[TaskRead],
    summary="List the tasks of an organization",
)
async def list_organization_tasks(
    organization_id: uuid.UUID, db: DBSession, service: OrganizationServiceDep
):
    return respond(await service.get_tasks(db, organization_id), TaskRead)


@router.post(
    "/{organization_id}/tasks",
    response_model=OrganizationDetail,
    summary="Connect existing tasks to an organization",
)
async def add_organization_tasks(
    organization_id: uuid.UUID,
    link: RelationLink,
    db: DBSession,
    service: OrganizationServiceDep,
):
    return respond(
        await service.add_tasks(db, organization_id, link.ids), OrganizationDetail
    )


@router.get(
    "/{organization_id}/teams",
    response_model=list[TeamRead],
    summary="List the teams of an organization",
)
async def list_organization_teams(
    organization_id: uuid.UUID, db: DBSession, service: OrganizationServiceDep
):
    return respond(await service.get_teams(db, organization_id), TeamRead)


@router.post(
    "/{organization_id}/teams",
    response_model=OrganizationDetail,
    summary="Connect existing teams to an organization",
)
async def add_organization_teams(
    organization_id: uuid.UUID,
    link: RelationLink,
    db: DBSession,
    service: OrganizationServiceDep,
):
    return respond(
        await service.add_teams(db, organization_id, link.ids), OrganizationDetail
    )
