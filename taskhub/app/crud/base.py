"""
Generic async CRUD base class.
All domain-specific CRUD classes extend CRUDBase and inherit these methods.

Writes run inside app.db.errors.atomic(), so every failure leaving this
layer is a GatewayError rather than a driver exception.
"""
from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import ORMOption

from app.db.base import Base
from app.db.errors import GatewayError, atomic, record_not_found

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """
    Generic CRUD operations for SQLAlchemy async ORM models.

    load_options are applied to every read so that relationships exposed by
    the read schemas are always loaded before the session is left behind.
    """

    load_options: Sequence[ORMOption] = ()

    def __init__(self, model: type[ModelType]) -> None:
        self.model = model

    async def get(
        self,
        db: AsyncSession,
        id: uuid.UUID,
        *,
        options: Sequence[ORMOption] | None = None,
    ) -> ModelType | None:
        """Fetch a single record by primary key, refreshing anything already in the session."""
        query = (
            select(self.model)
            .options(*(self.load_options if options is None else options))
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(self, db: AsyncSession) -> list[ModelType]:
        """Fetch every record, oldest first."""
        result = await db.execute(
            select(self.model)
            .options(*self.load_options)
            .order_by(self.model.created_at.asc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def create_from_dict(
        self,
        db: AsyncSession,
        *,
        obj_in: dict[str, Any],
        relations: dict[str, list[uuid.UUID]] | None = None,
    ) -> ModelType:
        """Create a new record from a plain dictionary, then connect relations by id."""
        async with atomic(db):
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            await db.flush()
            for relation, child_ids in (relations or {}).items():
                await self._connect(db, db_obj, relation, child_ids, replace=True)
            await db.flush()
        return await self._reload(db, db_obj.id)  # type: ignore[attr-defined]

    async def update_by_id(
        self,
        db: AsyncSession,
        *,
        id: uuid.UUID,
        obj_in: dict[str, Any],
        relations: dict[str, list[uuid.UUID]] | None = None,
    ) -> ModelType:
        """
        Overwrite the given fields of an existing record.
        Relation id lists replace the linked set.
        """
        async with atomic(db):
            db_obj = await self.get(db, id)
            if db_obj is None:
                raise record_not_found("Record to update not found.")
            for field, value in obj_in.items():
                setattr(db_obj, field, value)
            for relation, child_ids in (relations or {}).items():
                await self._connect(db, db_obj, relation, child_ids, replace=True)
            await db.flush()
        return await self._reload(db, id)

    async def remove(self, db: AsyncSession, *, id: uuid.UUID) -> ModelType:
        """Delete a record by primary key and return it as it was."""
        async with atomic(db):
            db_obj = await self.get(db, id)
            if db_obj is None:
                raise record_not_found("Record to delete does not exist.")
            await db.delete(db_obj)
            await db.flush()
        return db_obj

    async def link_by_ids(
        self,
        db: AsyncSession,
        *,
        parent_id: uuid.UUID,
        relation: str,
        child_ids: Sequence[uuid.UUID],
        replace: bool = False,
    ) -> ModelType:
        """
        Connect existing rows to `relation` of the parent by primary key.
        Rows already linked are left alone; with replace=True the linked set
        becomes exactly child_ids.
        """
        async with atomic(db):
            parent = await self.get(
                db, parent_id, options=[selectinload(getattr(self.model, relation))]
            )
            if parent is None:
                raise record_not_found("Record to update not found.")
            await self._connect(db, parent, relation, child_ids, replace=replace)
            await db.flush()
        return await self._reload(db, parent_id)

    async def get_related(
        self,
        db: AsyncSession,
        *,
        parent_id: uuid.UUID,
        relation: str,
        options: Sequence[ORMOption] = (),
    ) -> list[Any] | None:
        """Return the rows of one relation, or None when the parent is missing."""
        loader = selectinload(getattr(self.model, relation))
        if options:
            loader = loader.options(*options)
        parent = await self.get(db, parent_id, options=[loader])
        if parent is None:
            return None
        return list(getattr(parent, relation))

    # ── Private helpers ───────────────────────────────────────────────────────

    async def _connect(
        self,
        db: AsyncSession,
        parent: ModelType,
        relation: str,
        child_ids: Sequence[uuid.UUID],
        *,
        replace: bool,
    ) -> None:
        target = getattr(self.model, relation).property.mapper.class_
        wanted = list(dict.fromkeys(child_ids))
        children: list[Any] = []
        if wanted:
            result = await db.execute(select(target).where(target.id.in_(wanted)))
            children = list(result.scalars().all())
        if len(children) != len(wanted):
            raise GatewayError(
                "P2025",
                f"Expected {len(wanted)} records to be connected, found only {len(children)}.",
                meta={
                    "cause": (
                        f"Expected {len(wanted)} records to be connected, "
                        f"found only {len(children)}."
                    ),
                    "relation": relation,
                },
            )

        await db.refresh(parent, attribute_names=[relation])
        if replace:
            setattr(parent, relation, children)
            return
        collection = getattr(parent, relation)
        for child in children:
            if child not in collection:
                collection.append(child)

    async def _reload(self, db: AsyncSession, id: uuid.UUID) -> ModelType:
        db_obj = await self.get(db, id)
        if db_obj is None:
            raise record_not_found("Record to read back not found.")
        return db_obj
