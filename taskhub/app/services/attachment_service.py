"""
Task attachment service.
Attachments always belong to the task named in the URL.
"""
from __future__ import annotations

import uuid

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheGateway
from app.core.result import Err, NotFound, Ok, Result
from app.crud.attachment import crud_attachment
from app.crud.task import crud_task
from app.models.attachment import Attachment
from app.schemas.attachment import AttachmentRead
from app.services.base import EntityService


class AttachmentService(EntityService[Attachment]):
    entity_name = "Task attachment"
    namespace = "attachments"
    read_schema = AttachmentRead

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_attachment, cache)

    async def list_for_task(
        self, db: AsyncSession, task_id: uuid.UUID
    ) -> Result[list[Attachment]]:
        task = await crud_task.get(db, task_id, options=())
        if task is None:
            return Err(NotFound("Task"))
        return Ok(await crud_attachment.list_by_task(db, task_id=task_id))

    async def create_for_task(
        self, db: AsyncSession, task_id: uuid.UUID, payload: BaseModel
    ) -> Result[Attachment]:
        """Create an attachment; any task_id in the body is replaced by the path value."""
        return await self.create(db, payload, task_id=task_id)
