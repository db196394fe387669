"""
Project service.
"""
from __future__ import annotations

from app.core.cache import CacheGateway
from app.crud.project import crud_project
from app.models.project import Project
from app.schemas.project import ProjectRead
from app.services.base import EntityService


class ProjectService(EntityService[Project]):
    entity_name = "Project"
    namespace = "projects"
    read_schema = ProjectRead
    relation_fields = ("teams",)
    # deleting a project detaches its tasks
    invalidates = ("projects", "tasks")

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_project, cache)
