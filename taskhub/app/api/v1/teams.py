"""
Team routes.
Members are set through the members id list on create and update.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import DBSession, TeamServiceDep, get_current_user
from app.core.exceptions import respond
from app.schemas.team import TeamCreate, TeamRead, TeamUpdate

router = APIRouter(
    prefix="/teams",
    tags=["Teams"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[TeamRead], summary="List all teams")
async def list_teams(db: DBSession, service: TeamServiceDep):
    return respond(await service.list(db), TeamRead)


@router.get("/{team_id}", response_model=TeamRead, summary="Get a team by ID")
async def get_team(team_id: uuid.UUID, db: DBSession, service: TeamServiceDep):
    return respond(await service.get(db, team_id), TeamRead)


@router.post(
    "/",
    response_model=TeamRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a team",
)
async def create_team(team_in: TeamCreate, db: DBSession, service: TeamServiceDep):
    return respond(await service.create(db, team_in), TeamRead)


@router.put("/{team_id}", response_model=TeamRead, summary="Update a team")
async def update_team(
    team_id: uuid.UUID,
    team_in: TeamUpdate,
    db: DBSession,
    service: TeamServiceDep,
):
    return respond(await service.update(db, team_id, team_in), TeamRead)


@router.delete("/{team_id}", response_model=TeamRead, summary="Delete a team")
async def delete_team(team_id: uuid.UUID, db: DBSession, service: TeamServiceDep):
    return respond(await service.delete(db, team_id), TeamRead)
