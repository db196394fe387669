"""
Tag routes.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import DBSession, TagServiceDep, get_current_user
from app.core.exceptions import respond
from app.schemas.tag import TagCreate, TagRead, TagUpdate

router = APIRouter(
    prefix="/tags",
    tags=["Tags"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[TagRead], summary="List all tags")
async def list_tags(db: DBSession, service: TagServiceDep):
    return respond(await service.list(db), TagRead)


@router.get("/{tag_id}", response_model=TagRead, summary="Get a tag by ID")
async def get_tag(tag_id: uuid.UUID, db: DBSession, service: TagServiceDep):
    return respond(await service.get(db, tag_id), TagRead)


@router.post(
    "/",
    response_model=TagRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tag",
)
async def create_tag(tag_in: TagCreate, db: DBSession, service: TagServiceDep):
    return respond(await service.create(db, tag_in), TagRead)


@router.put("/{tag_id}", response_model=TagRead, summary="Update a tag")
async def update_tag(
    tag_id: uuid.UUID,
    tag_in: TagUpdate,
    db: DBSession,
    service: TagServiceDep,
):
    return respond(await service.update(db, tag_id, tag_in), TagRead)


@router.delete("/{tag_id}", response_model=TagRead, summary="Delete a tag")
async def delete_tag(tag_id: uuid.UUID, db: DBSession, service: TagServiceDep):
    return respond(await service.delete(db, tag_id), TagRead)
