"""
Activity routes.
Plain CRUD over activity entries; auth events are recorded by the auth service.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import ActivityServiceDep, DBSession, get_current_user
from app.core.exceptions import respond
from app.schemas.activity import ActivityCreate, ActivityRead, ActivityUpdate

router = APIRouter(
    prefix="/activities",
    tags=["Activities"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[ActivityRead], summary="List all activities")
async def list_activities(db: DBSession, service: ActivityServiceDep):
    return respond(await service.list(db), ActivityRead)


@router.get("/{activity_id}", response_model=ActivityRead, summary="Get an activity by ID")
async def get_activity(
    activity_id: uuid.UUID, db: DBSession, service: ActivityServiceDep
):
    return respond(await service.get(db, activity_id), ActivityRead)


@router.post(
    "/",
    response_model=ActivityRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an activity entry",
)
async def create_activity(
    activity_in: ActivityCreate, db: DBSession, service: ActivityServiceDep
):
    return respond(await service.create(db, activity_in), ActivityRead)


@router.put("/{activity_id}", response_model=ActivityRead, summary="Update an activity entry")
async def update_activity(
    activity_id: uuid.UUID,
    activity_in: ActivityUpdate,
    db: DBSession,
    service: ActivityServiceDep,
):
    return respond(await service.update(db, activity_id, activity_in), ActivityRead)


@router.delete("/{activity_id}", response_model=ActivityRead, summary="Delete an activity entry")
async def delete_activity(
    activity_id: uuid.UUID, db: DBSession, service: ActivityServiceDep
):
    return respond(await service.delete(db, activity_id), ActivityRead)
