"""
Application container.
Gateways and services are built once in create_application() and stored on
app.state; routes resolve them through app.core.dependencies.
"""
from __future__ import annotations

from dataclasses import dataclass

from app.core.cache import CacheGateway
from app.db.session import Database
from app.services.activity_service import ActivityService
from app.services.attachment_service import AttachmentService
from app.services.auth_service import AuthService
from app.services.comment_service import CommentService
from app.services.organization_service import OrganizationService
from app.services.project_service import ProjectService
from app.services.tag_service import TagService
from app.services.task_service import TaskService
from app.services.team_service import TeamService
from app.services.user_service import UserService


@dataclass
class Container:
    database: Database
    cache: CacheGateway
    organizations: OrganizationService
    projects: ProjectService
    teams: TeamService
    users: UserService
    tasks: TaskService
    attachments: AttachmentService
    comments: CommentService
    activities: ActivityService
    tags: TagService
    auth: AuthService

    @classmethod
    def build(cls, database: Database, cache: CacheGateway) -> "Container":
        users = UserService(cache)
        activities = ActivityService(cache)
        return cls(
            database=database,
            cache=cache,
            organizations=OrganizationService(cache),
            projects=ProjectService(cache),
            teams=TeamService(cache),
            users=users,
            tasks=TaskService(cache),
            attachments=AttachmentService(cache),
            comments=CommentService(cache),
            activities=activities,
            tags=TagService(cache),
            auth=AuthService(users, activities),
        )

    async def close(self) -> None:
        await self.cache.close()
        await self.database.dispose()
