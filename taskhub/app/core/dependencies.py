"""
FastAPI dependency injection functions.
Provides get_db, get_current_user, and one getter per service.
"""
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.container import Container
from app.core.exceptions import InvalidTokenException, UnauthorizedException
from app.core.security import decode_access_token
from app.crud.user import crud_user
from app.db.session import get_db
from app.models.user import User
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

# Re-export get_db so routes can import from one place
__all__ = ["get_db", "get_current_user", "DBSession", "CurrentUser"]

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


async def get_current_user(
    db: Annotated[AsyncSession, Depends(get_db)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> User:
    """
    Extract and validate the JWT access token from the Authorization header.
    Returns the authenticated User model.
    """
    if credentials is None:
        raise UnauthorizedException("Missing authentication token")

    token = credentials.credentials
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise InvalidTokenException("Invalid or expired access token")

    user_id_str = payload.get("sub")
    if not user_id_str:
        raise InvalidTokenException("Malformed token: missing subject")

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError:
        raise InvalidTokenException("Malformed token: invalid subject format")

    user = await crud_user.get(db, user_id)
    if user is None:
        raise UnauthorizedException("User not found")
    if not user.is_active:
        raise UnauthorizedException("User account is deactivated")

    return user


ContainerDep = Annotated[Container, Depends(get_container)]


def get_organization_service(container: ContainerDep) -> OrganizationService:
    return container.organizations


def get_project_service(container: ContainerDep) -> ProjectService:
    return container.projects


def get_team_service(container: ContainerDep) -> TeamService:
    return container.teams


def get_user_service(container: ContainerDep) -> UserService:
    return container.users


def get_task_service(container: ContainerDep) -> TaskService:
    return container.tasks


def get_attachment_service(container: ContainerDep) -> AttachmentService:
    return container.attachments


def get_comment_service(container: ContainerDep) -> CommentService:
    return container.comments


def get_activity_service(container: ContainerDep) -> ActivityService:
    return container.activities


def get_tag_service(container: ContainerDep) -> TagService:
    return container.tags


def get_auth_service(container: ContainerDep) -> AuthService:
    return container.auth


# Convenience type aliases for route signatures
DBSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
OrganizationServiceDep = Annotated[OrganizationService, Depends(get_organization_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TeamServiceDep = Annotated[TeamService, Depends(get_team_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
ActivityServiceDep = Annotated[ActivityService, Depends(get_activity_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
