"""
Comment CRUD operations.
"""
from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.comment import Comment
from app.models.user import User


class CRUDComment(CRUDBase[Comment]):

    async def get_mentions(
        self, db: AsyncSession, comment_id: uuid.UUID
    ) -> list[User] | None:
        """Users mentioned by the comment, or None when the comment is missing."""
        return await self.get_related(db, parent_id=comment_id, relation="mentions")


crud_comment = CRUDComment(Comment)
