"""
Activity service.
Activities are plain CRUD rows; record() is the shortcut other services use
to write audit entries.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheGateway
from app.crud.activity import crud_activity
from app.models.activity import Activity
from app.schemas.activity import ActivityRead
from app.services.base import EntityService

logger = logging.getLogger(__name__)


class ActivityService(EntityService[Activity]):
    entity_name = "Activity"
    namespace = "activities"
    read_schema = ActivityRead

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_activity, cache)

    async def record(
        self,
        db: AsyncSession,
        *,
        user_id: uuid.UUID | None,
        action: str,
        entity_type: str,
        entity_id: uuid.UUID | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Activity:
        """
        Write an activity entry.
        Gateway errors propagate: the caller's request fails with them.
        """
        entry = await self.crud.create_from_dict(
            db,
            obj_in={
                "user_id": user_id,
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "meta": meta,
            },
        )
        logger.debug("Recorded activity %s on %s %s", action, entity_type, entity_id)
        await self._invalidate()
        return entry
