"""
Comment service.
The author is always the authenticated user; mentions are an explicit
many-to-many relation to users.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheGateway
from app.core.result import Err, NotFound, Ok, Result
from app.crud.comment import crud_comment
from app.models.comment import Comment
from app.models.user import User
from app.schemas.comment import CommentRead
from app.services.base import EntityService


class CommentService(EntityService[Comment]):
    entity_name = "Comment"
    namespace = "comments"
    read_schema = CommentRead
    relation_fields = ("mentions",)

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_comment, cache)

    async def get_mentions(
        self, db: AsyncSession, comment_id: uuid.UUID
    ) -> Result[list[User]]:
        users = await crud_comment.get_mentions(db, comment_id)
        if users is None:
            return Err(NotFound(self.entity_name))
        return Ok(users)
