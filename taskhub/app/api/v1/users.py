"""
User routes.
CRUD on /users/; every route requires an authenticated user.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import DBSession, UserServiceDep, get_current_user
from app.core.exceptions import respond
from app.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[UserRead], summary="List all users")
async def list_users(db: DBSession, service: UserServiceDep):
    return respond(await service.list(db), UserRead)


@router.get("/{user_id}", response_model=UserRead, summary="Get a user by ID")
async def get_user(user_id: uuid.UUID, db: DBSession, service: UserServiceDep):
    return respond(await service.get(db, user_id), UserRead)


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(user_in: UserCreate, db: DBSession, service: UserServiceDep):
    return respond(await service.create(db, user_in), UserRead)


@router.put("/{user_id}", response_model=UserRead, summary="Update a user")
async def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    db: DBSession,
    service: UserServiceDep,
):
    return respond(await service.update(db, user_id, user_in), UserRead)


@router.delete("/{user_id}", response_model=UserRead, summary="Delete a user")
async def delete_user(user_id: uuid.UUID, db: DBSession, service: UserServiceDep):
    return respond(await service.delete(db, user_id), UserRead)
