"""
Project routes.
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import DBSession, ProjectServiceDep, get_current_user
from app.core.exceptions import respond
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[ProjectRead], summary="List all projects")
async def list_projects(db: DBSession, service: ProjectServiceDep):
    return respond(await service.list(db), ProjectRead)


@router.get("/{project_id}", response_model=ProjectRead, summary="Get a project by ID")
async def get_project(project_id: uuid.UUID, db: DBSession, service: ProjectServiceDep):
    return respond(await service.get(db, project_id), ProjectRead)


@router.post(
    "/",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
)
async def create_project(
    project_in: ProjectCreate, db: DBSession, service: ProjectServiceDep
):
    return respond(await service.create(db, project_in), ProjectRead)


@router.put("/{project_id}", response_model=ProjectRead, summary="Update a project")
async def update_project(
    project_id: uuid.UUID,
    project_in: ProjectUpdate,
    db: DBSession,
    service: ProjectServiceDep,
):
    return respond(await service.update(db, project_id, project_in), ProjectRead)


@router.delete("/{project_id}", response_model=ProjectRead, summary="Delete a project")
async def delete_project(
    project_id: uuid.UUID, db: DBSession, service: ProjectServiceDep
):
    return respond(await service.delete(db, project_id), ProjectRead)
