"""
Authentication service.
Handles registration, login, token refresh, and logout.
Business logic lives here; routes only call these methods.
"""
from __future__ import annotations

import logging
import uuid

from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ConflictException,
    InvalidTokenException,
    UnauthorizedException,
)
from app.core.result import Err, Result
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    hash_token,
    verify_password,
)
from app.crud.user import crud_user
from app.models.user import User
from app.schemas.user import Token, UserCreate
from app.services.activity_service import ActivityService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, users: UserService, activities: ActivityService) -> None:
        self.users = users
        self.activities = activities

    async def register_user(
        self, db: AsyncSession, *, user_in: UserCreate
    ) -> Result[User]:
        """
        Register a new user.
        Email and username clashes are reported as 409 before the insert is attempted.
        """
        if await crud_user.get_by_email(db, user_in.email) is not None:
            raise ConflictException("A user with this email already exists")
        if await crud_user.get_by_username(db, user_in.username) is not None:
            raise ConflictException("A user with this username already exists")

        result = await self.users.create(db, user_in)
        if isinstance(result, Err):
            return result

        user = result.value
        await self.activities.record(
            db,
            user_id=user.id,
            action="user_registered",
            entity_type="user",
            entity_id=user.id,
            meta={"email": user.email, "username": user.username},
        )
        logger.info("Registered user %s", user.id)
        return result

    async def authenticate_user(
        self, db: AsyncSession, *, email: str, password: str
    ) -> Token:
        """
        Verify credentials and issue an access + refresh token pair.
        Stores the refresh token hash in the DB for rotation/revocation.
        """
        user = await crud_user.get_active_by_email(db, email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.info("Failed login attempt for %s", email)
            raise UnauthorizedException("Invalid email or password")

        access_token = create_access_token(str(user.id))
        refresh_token = create_refresh_token(str(user.id))

        await crud_user.set_refresh_token_hash(
            db, user=user, token_hash=hash_token(refresh_token)
        )
        await self.activities.record(
            db,
            user_id=user.id,
            action="user_login",
            entity_type="user",
            entity_id=user.id,
        )

        return Token(access_token=access_token, refresh_token=refresh_token)

    async def refresh_access_token(
        self, db: AsyncSession, *, refresh_token: str
    ) -> Token:
        """
        Validate the refresh token, issue a new access token,
        and rotate the refresh token.
        """
        try:
            payload = decode_refresh_token(refresh_token)
        except JWTError:
            raise InvalidTokenException("Invalid or expired refresh token")

        try:
            user_id = uuid.UUID(str(payload.get("sub")))
        except ValueError:
            raise InvalidTokenException("Malformed refresh token")

        user = await crud_user.get(db, user_id)
        if user is None or not user.is_active:
            raise UnauthorizedException("User not found or inactive")

        if user.refresh_token_hash != hash_token(refresh_token):
            raise InvalidTokenException("Refresh token has been revoked")

        new_access = create_access_token(str(user.id))
        new_refresh = create_refresh_token(str(user.id))

        await crud_user.set_refresh_token_hash(
            db, user=user, token_hash=hash_token(new_refresh)
        )

        return Token(access_token=new_access, refresh_token=new_refresh)

    async def logout(self, db: AsyncSession, *, user: User) -> None:
        """Invalidate the stored refresh token hash."""
        await crud_user.set_refresh_token_hash(db, user=user, token_hash=None)
        await self.activities.record(
            db,
            user_id=user.id,
            action="user_logout",
            entity_type="user",
            entity_id=user.id,
        )
