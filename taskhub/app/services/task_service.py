"""
Task service.
Tags are connected by id; tag rows themselves are managed by the tag service.
"""
from __future__ import annotations

from app.core.cache import CacheGateway
from app.crud.task import crud_task
from app.models.task import Task
from app.schemas.task import TaskRead
from app.services.base import EntityService


class TaskService(EntityService[Task]):
    entity_name = "Task"
    namespace = "tasks"
    read_schema = TaskRead
    relation_fields = ("tags",)
    # comments and attachments are removed with their task
    invalidates = ("tasks", "comments", "attachments")

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_task, cache)
