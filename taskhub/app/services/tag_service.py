"""
Tag service.
Tags are embedded in task reads, so tag writes also invalidate the task list.
"""
from __future__ import annotations

from app.core.cache import CacheGateway
from app.crud.tag import crud_tag
from app.models.tag import Tag
from app.schemas.tag import TagRead
from app.services.base import EntityService


class TagService(EntityService[Tag]):
    entity_name = "Tag"
    namespace = "tags"
    read_schema = TagRead
    invalidates = ("tags", "tasks")

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_tag, cache)
