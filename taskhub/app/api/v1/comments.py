"""
Comment routes.
The author of a new comment is the authenticated user; mentioned users are
listed at /comments/{comment_id}/mentions.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import (
    CommentServiceDep,
    CurrentUser,
    DBSession,
    get_current_user,
)
from app.core.exceptions import respond
from app.schemas.comment import CommentCreate, CommentRead, CommentUpdate
from app.schemas.user import UserReadPublic

router = APIRouter(
    prefix="/comments",
    tags=["Comments"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[CommentRead], summary="List all comments")
async def list_comments(db: DBSession, service: CommentServiceDep):
    return respond(await service.list(db), CommentRead)


@router.get("/{comment_id}", response_model=CommentRead, summary="Get a comment by ID")
async def get_comment(comment_id: uuid.UUID, db: DBSession, service: CommentServiceDep):
    return respond(await service.get(db, comment_id), CommentRead)


@router.get(
    "/{comment_id}/mentions",
    response_model=list[UserReadPublic],
    summary="List the users mentioned by a comment",
)
async def get_comment_mentions(
    comment_id: uuid.UUID, db: DBSession, service: CommentServiceDep
):
    return respond(await service.get_mentions(db, comment_id), UserReadPublic)


@router.post(
    "/",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a comment",
)
async def create_comment(
    comment_in: CommentCreate,
    current_user: CurrentUser,
    db: DBSession,
    service: CommentServiceDep,
):
    return respond(
        await service.create(db, comment_in, author_id=current_user.id), CommentRead
    )


@router.put("/{comment_id}", response_model=CommentRead, summary="Update a comment")
async def update_comment(
    comment_id: uuid.UUID,
    comment_in: CommentUpdate,
    db: DBSession,
    service: CommentServiceDep,
):
    return respond(await service.update(db, comment_id, comment_in), CommentRead)


@router.delete("/{comment_id}", response_model=CommentRead, summary="Delete a comment")
async def delete_comment(
    comment_id: uuid.UUID, db: DBSession, service: CommentServiceDep
):
    return respond(await service.delete(db, comment_id), CommentRead)
