"""
Aggregates all v1 API routers into a single APIRouter.
"""
from __future__ import annotations

from fastapi import APIRouter

from app.api.v1 import (
    activities,
    auth,
    comments,
    organizations,
    projects,
    tags,
    tasks,
    teams,
    users,
)
from app.schemas.common import Message

api_router = APIRouter()


@api_router.get("/ping", response_model=Message, tags=["Health"], summary="Health check")
async def ping() -> Message:
    return Message(message="pong")


api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(organizations.router)
api_router.include_router(projects.router)
api_router.include_router(teams.router)
api_router.include_router(tasks.router)
api_router.include_router(comments.router)
api_router.include_router(activities.router)
api_router.include_router(tags.router)
