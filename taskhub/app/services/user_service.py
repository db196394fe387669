"""
User service.
Plain CRUD over users; the password field never reaches the database, only its hash.
"""
from __future__ import annotations

from typing import Any

from app.core.cache import CacheGateway
from app.core.security import hash_password
from app.crud.user import crud_user
from app.models.user import User
from app.schemas.user import UserRead
from app.services.base import EntityService


class UserService(EntityService[User]):
    entity_name = "User"
    namespace = "users"
    read_schema = UserRead
    # team reads embed members, and rows in other tables point at the user
    invalidates = ("users", "teams", "tasks", "comments", "activities")

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_user, cache)

    def _prepare(self, data: dict[str, Any]) -> dict[str, Any]:
        password = data.pop("password", None)
        if password is not None:
            data["hashed_password"] = hash_password(password)
        return data
