"""
Redis-backed cache gateway.

Values are stored as JSON strings. The cache is an optimisation only:
any Redis failure is logged and treated as a miss, so a cache outage never
fails a request.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis_async
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class CacheGateway:

    def __init__(
        self,
        client: redis_async.Redis | None,
        *,
        default_ttl: int = 60,
        prefix: str = "taskhub",
    ) -> None:
        self._client = client
        self._default_ttl = default_ttl
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str, *, default_ttl: int = 60) -> "CacheGateway":
        client = redis_async.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=2,
        )
        return cls(client, default_ttl=default_ttl)

    @classmethod
    def disabled(cls) -> "CacheGateway":
        return cls(None)

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def get_json(self, key: str) -> Any | None:
        if self._client is None:
            return None
        try:
            raw = await self._client.get(self._key(key))
        except RedisError as exc:
            logger.warning("Cache read failed for %s: %s", key, exc)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cache entry %s", key)
            return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> None:
        if self._client is None:
            return
        try:
            await self._client.set(
                self._key(key),
                json.dumps(value, default=str),
                ex=ttl or self._default_ttl,
            )
        except RedisError as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)

    async def delete(self, *keys: str) -> None:
        if self._client is None or not keys:
            return
        try:
            await self._client.delete(*(self._key(k) for k in keys))
        except RedisError as exc:
            logger.warning("Cache delete failed for %s: %s", ", ".join(keys), exc)

    async def ping(self) -> bool:
        if self._client is None:
            return False
        try:
            return bool(await self._client.ping())
        except RedisError as exc:
            logger.warning("Cache ping failed: %s", exc)
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
