"""
Task routes.
CRUD on /tasks/ plus the attachment routes:
  GET|POST        /tasks/{task_id}/attachments
  GET|PUT|DELETE  /tasks/attachments/{attachment_id}
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from app.core.dependencies import (
    AttachmentServiceDep,
    DBSession,
    TaskServiceDep,
    get_current_user,
)
from app.core.exceptions import respond
from app.schemas.attachment import AttachmentCreate, AttachmentRead, AttachmentUpdate
from app.schemas.task import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/", response_model=list[TaskRead], summary="List all tasks")
async def list_tasks(db: DBSession, service: TaskServiceDep):
    return respond(await service.list(db), TaskRead)


@router.post(
    "/",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(task_in: TaskCreate, db: DBSession, service: TaskServiceDep):
    return respond(await service.create(db, task_in), TaskRead)


# ── Attachments ───────────────────────────────────────────────────────────────
# Registered before /{task_id} so "attachments" is never parsed as a task id.

@router.get(
    "/attachments/{attachment_id}",
    response_model=AttachmentRead,
    summary="Get a task attachment",
)
async def get_attachment(
    attachment_id: uuid.UUID, db: DBSession, service: AttachmentServiceDep
):
    return respond(await service.get(db, attachment_id), AttachmentRead)


@router.put(
    "/attachments/{attachment_id}",
    response_model=AttachmentRead,
    summary="Update a task attachment",
)
async def update_attachment(
    attachment_id: uuid.UUID,
    attachment_in: AttachmentUpdate,
    db: DBSession,
    service: AttachmentServiceDep,
):
    return respond(await service.update(db, attachment_id, attachment_in), AttachmentRead)


@router.delete(
    "/attachments/{attachment_id}",
    response_model=AttachmentRead,
    summary="Delete a task attachment",
)
async def delete_attachment(
    attachment_id: uuid.UUID, db: DBSession, service: AttachmentServiceDep
):
    return respond(await service.delete(db, attachment_id), AttachmentRead)


@router.get(
    "/{task_id}/attachments",
    response_model=list[AttachmentRead],
    summary="List the attachments of a task",
)
async def list_task_attachments(
    task_id: uuid.UUID, db: DBSession, service: AttachmentServiceDep
):
    return respond(await service.list_for_task(db, task_id), AttachmentRead)


@router.post(
    "/{task_id}/attachments",
    response_model=AttachmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Attach a file to a task",
)
async def create_task_attachment(
    task_id: uuid.UUID,
    attachment_in: AttachmentCreate,
    db: DBSession,
    service: AttachmentServiceDep,
):
    return respond(
        await service.create_for_task(db, task_id, attachment_in), AttachmentRead
    )


# ── Single task ───────────────────────────────────────────────────────────────

@router.get("/{task_id}", response_model=TaskRead, summary="Get a task by ID")
async def get_task(task_id: uuid.UUID, db: DBSession, service: TaskServiceDep):
    return respond(await service.get(db, task_id), TaskRead)


@router.put("/{task_id}", response_model=TaskRead, summary="Update a task")
async def update_task(
    task_id: uuid.UUID,
    task_in: TaskUpdate,
    db: DBSession,
    service: TaskServiceDep,
):
    return respond(await service.update(db, task_id, task_in), TaskRead)


@router.delete("/{task_id}", response_model=TaskRead, summary="Delete a task")
async def delete_task(task_id: uuid.UUID, db: DBSession, service: TaskServiceDep):
    return respond(await service.delete(db, task_id), TaskRead)
