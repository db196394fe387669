"""
Generic entity service.

A thin layer over the CRUD classes: every operation returns an explicit
Result instead of raising, and list() is read-through cached. Routes hand the
result to app.core.exceptions.respond().
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import CacheGateway
from app.core.result import Err, GatewayFailure, NotFound, Ok, Result
from app.crud.base import CRUDBase
from app.db.errors import GatewayError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class EntityService(Generic[ModelType]):
    """
    Subclasses set:
      entity_name     -- used in "<Entity> not found" and "Failed to <verb> <entity>"
      namespace       -- cache namespace of the list endpoint
      read_schema     -- schema the cached list is serialized with
      relation_fields -- payload keys holding id lists for many-to-many relations
      invalidates     -- cache namespaces a write can make stale
    """

    entity_name: str = "Record"
    namespace: str = "records"
    read_schema: type[BaseModel]
    relation_fields: tuple[str, ...] = ()
    invalidates: tuple[str, ...] = ()

    def __init__(self, crud: CRUDBase[Any], cache: CacheGateway) -> None:
        self.crud = crud
        self.cache = cache

    # ── Reads ─────────────────────────────────────────────────────────────────

    async def list(self, db: AsyncSession) -> Result[list[Any]]:
        key = f"{self.namespace}:list"
        cached = await self.cache.get_json(key)
        if cached is not None:
            return Ok(cached)

        rows = await self.crud.get_all(db)
        payload = [
            self.read_schema.model_validate(row).model_dump(mode="json") for row in rows
        ]
        await self.cache.set_json(key, payload)
        return Ok(payload)

    async def get(self, db: AsyncSession, id: uuid.UUID) -> Result[ModelType]:
        obj = await self.crud.get(db, id)
        if obj is None:
            return Err(NotFound(self.entity_name))
        return Ok(obj)

    # ── Writes ────────────────────────────────────────────────────────────────

    async def create(
        self, db: AsyncSession, payload: BaseModel, **overrides: Any
    ) -> Result[ModelType]:
        data = payload.model_dump()
        relations = self._split_relations(data)
        data.update(overrides)
        try:
            obj = await self.crud.create_from_dict(
                db, obj_in=self._prepare(data), relations=relations
            )
        except GatewayError as exc:
            return self._failure(exc, "create")
        await self._invalidate()
        return Ok(obj)

    async def update(
        self, db: AsyncSession, id: uuid.UUID, payload: BaseModel
    ) -> Result[ModelType]:
        data = payload.model_dump(exclude_unset=True)
        relations = self._split_relations(data)
        try:
            obj = await self.crud.update_by_id(
                db, id=id, obj_in=self._prepare(data), relations=relations
            )
        except GatewayError as exc:
            return self._failure(exc, "update")
        await self._invalidate()
        return Ok(obj)

    async def delete(self, db: AsyncSession, id: uuid.UUID) -> Result[ModelType]:
        try:
            obj = await self.crud.remove(db, id=id)
        except GatewayError as exc:
            return self._failure(exc, "delete")
        await self._invalidate()
        return Ok(obj)

    async def link(
        self,
        db: AsyncSession,
        id: uuid.UUID,
        relation: str,
        child_ids: list[uuid.UUID],
    ) -> Result[ModelType]:
        """Connect existing rows to one relation of the entity."""
        try:
            obj = await self.crud.link_by_ids(
                db, parent_id=id, relation=relation, child_ids=child_ids
            )
        except GatewayError as exc:
            return self._failure(exc, "update")
        await self._invalidate()
        return Ok(obj)

    # ── Hooks & helpers ───────────────────────────────────────────────────────

    def _prepare(self, data: dict[str, Any]) -> dict[str, Any]:
        """Adjust column values before they reach the gateway."""
        return data

    def _split_relations(self, data: dict[str, Any]) -> dict[str, list[uuid.UUID]]:
        relations: dict[str, list[uuid.UUID]] = {}
        for name in self.relation_fields:
            ids = data.pop(name, None)
            if ids is not None:
                relations[name] = ids
        return relations

    async def _invalidate(self) -> None:
        namespaces = self.invalidates or (self.namespace,)
        await self.cache.delete(*(f"{ns}:list" for ns in namespaces))

    def _failure(self, exc: GatewayError, verb: str) -> Err:
        operation = f"Failed to {verb} {self.entity_name.lower()}"
        if exc.is_known:
            logger.info("%s: %s (%s)", operation, exc.code, exc.message)
        else:
            logger.error("%s: %s", operation, exc.message)
        return Err(GatewayFailure.from_error(exc, operation))
