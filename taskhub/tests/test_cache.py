"""
List caching tests.
Covers: read-through caching of list endpoints, invalidation on writes,
cross-namespace invalidation, and cache failures degrading to misses.
"""
from __future__ import annotations

import json

import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from app.core.cache import CacheGateway
from app.db.session import Database
from app.main import create_application

pytestmark = pytest.mark.asyncio


class _BrokenRedis:
    async def get(self, key: str) -> str:
        raise RedisConnectionError("connection refused")

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        raise RedisConnectionError("connection refused")

    async def delete(self, *keys: str) -> int:
        raise RedisConnectionError("connection refused")

    async def ping(self) -> bool:
        raise RedisConnectionError("connection refused")

    async def aclose(self) -> None:
        return None


class TestListCache:
    async def test_list_is_stored_with_ttl(
        self, client: AsyncClient, auth_headers: dict, redis_client, test_settings
    ) -> None:
        await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)
        response = await client.get("/api/v1/tags/", headers=auth_headers)
        assert response.status_code == 200

        cached = json.loads(redis_client.store["taskhub:tags:list"])
        assert [t["name"] for t in cached] == ["bug"]
        assert redis_client.ttls["taskhub:tags:list"] == test_settings.CACHE_TTL_SECONDS

    async def test_cached_list_is_served(
        self, client: AsyncClient, auth_headers: dict, redis_client
    ) -> None:
        await client.get("/api/v1/tags/", headers=auth_headers)
        # a value only the cache knows about proves the database was not read
        redis_client.store["taskhub:tags:list"] = json.dumps(
            [
                {
                    "id": "00000000-0000-0000-0000-000000000001",
                    "name": "from-cache",
                    "color": None,
                    "created_at": "2024-01-01T00:00:00Z",
                    "updated_at": "2024-01-01T00:00:00Z",
                }
            ]
        )
        response = await client.get("/api/v1/tags/", headers=auth_headers)
        assert [t["name"] for t in response.json()] == ["from-cache"]

    async def test_write_invalidates(
        self, client: AsyncClient, auth_headers: dict, redis_client
    ) -> None:
        await client.get("/api/v1/tags/", headers=auth_headers)
        assert "taskhub:tags:list" in redis_client.store

        await client.post("/api/v1/tags/", json={"name": "feature"}, headers=auth_headers)
        assert "taskhub:tags:list" not in redis_client.store

        response = await client.get("/api/v1/tags/", headers=auth_headers)
        assert [t["name"] for t in response.json()] == ["feature"]

    async def test_failed_write_keeps_cache(
        self, client: AsyncClient, auth_headers: dict, redis_client
    ) -> None:
        await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)
        await client.get("/api/v1/tags/", headers=auth_headers)

        duplicate = await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)
        assert duplicate.status_code == 400
        assert "taskhub:tags:list" in redis_client.store

    async def test_user_write_invalidates_teams(
        self, client: AsyncClient, auth_headers: dict, redis_client, registered_user: dict
    ) -> None:
        await client.post(
            "/api/v1/teams/",
            json={"name": "Core", "members": [registered_user["id"]]},
            headers=auth_headers,
        )
        await client.get("/api/v1/teams/", headers=auth_headers)
        assert "taskhub:teams:list" in redis_client.store

        await client.put(
            f"/api/v1/users/{registered_user['id']}",
            json={"full_name": "Renamed User"},
            headers=auth_headers,
        )
        assert "taskhub:teams:list" not in redis_client.store

        teams = await client.get("/api/v1/teams/", headers=auth_headers)
        assert teams.json()[0]["members"][0]["full_name"] == "Renamed User"


class TestCascadeInvalidation:
    async def test_task_delete_clears_comment_list(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        task = (
            await client.post(
                "/api/v1/tasks/", json={"title": "Short-lived"}, headers=auth_headers
            )
        ).json()
        comment = (
            await client.post(
                "/api/v1/comments/",
                json={"content": "hi", "task_id": task["id"]},
                headers=auth_headers,
            )
        ).json()
        listed = await client.get("/api/v1/comments/", headers=auth_headers)
        assert len(listed.json()) == 1

        await client.delete(f"/api/v1/tasks/{task['id']}", headers=auth_headers)

        gone = await client.get(f"/api/v1/comments/{comment['id']}", headers=auth_headers)
        assert gone.status_code == 404
        listed = await client.get("/api/v1/comments/", headers=auth_headers)
        assert listed.json() == []

    async def test_organization_delete_clears_project_list(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        org = (
            await client.post(
                "/api/v1/organizations/",
                json={"name": "Acme", "slug": "acme"},
                headers=auth_headers,
            )
        ).json()
        await client.post(
            "/api/v1/projects/",
            json={"name": "Rocket", "organization_id": org["id"]},
            headers=auth_headers,
        )
        listed = await client.get("/api/v1/projects/", headers=auth_headers)
        assert len(listed.json()) == 1

        await client.delete(f"/api/v1/organizations/{org['id']}", headers=auth_headers)

        listed = await client.get("/api/v1/projects/", headers=auth_headers)
        assert listed.json() == []

    async def test_project_delete_clears_task_list(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        org = (
            await client.post(
                "/api/v1/organizations/",
                json={"name": "Acme", "slug": "acme"},
                headers=auth_headers,
            )
        ).json()
        project = (
            await client.post(
                "/api/v1/projects/",
                json={"name": "Rocket", "organization_id": org["id"]},
                headers=auth_headers,
            )
        ).json()
        await client.post(
            "/api/v1/tasks/",
            json={"title": "Launch", "project_id": project["id"]},
            headers=auth_headers,
        )
        listed = await client.get("/api/v1/tasks/", headers=auth_headers)
        assert listed.json()[0]["project_id"] == project["id"]

        await client.delete(f"/api/v1/projects/{project['id']}", headers=auth_headers)

        listed = await client.get("/api/v1/tasks/", headers=auth_headers)
        assert listed.json()[0]["project_id"] is None

    async def test_user_delete_clears_referencing_lists(
        self, client: AsyncClient, auth_headers: dict, redis_client
    ) -> None:
        user = (
            await client.post(
                "/api/v1/users/",
                json={
                    "email": "leaving@example.com",
                    "username": "leaving",
                    "password": "LeavePass1",
                },
                headers=auth_headers,
            )
        ).json()
        task = (
            await client.post(
                "/api/v1/tasks/",
                json={"title": "Handover", "assignee_id": user["id"]},
                headers=auth_headers,
            )
        ).json()
        await client.post(
            "/api/v1/activities/",
            json={"action": "handover", "entity_type": "task", "user_id": user["id"]},
            headers=auth_headers,
        )
        for path in ("tasks", "comments", "activities"):
            await client.get(f"/api/v1/{path}/", headers=auth_headers)
            assert f"taskhub:{path}:list" in redis_client.store

        await client.delete(f"/api/v1/users/{user['id']}", headers=auth_headers)

        for path in ("tasks", "comments", "activities"):
            assert f"taskhub:{path}:list" not in redis_client.store
        tasks = await client.get("/api/v1/tasks/", headers=auth_headers)
        assert [t["assignee_id"] for t in tasks.json() if t["id"] == task["id"]] == [None]
        activities = await client.get("/api/v1/activities/", headers=auth_headers)
        handover = [a for a in activities.json() if a["action"] == "handover"]
        assert handover[0]["user_id"] is None


class TestCacheGateway:
    async def test_errors_are_misses(self, caplog) -> None:
        cache = CacheGateway(_BrokenRedis())  # type: ignore[arg-type]

        assert await cache.get_json("tags:list") is None
        await cache.set_json("tags:list", [])
        await cache.delete("tags:list")
        assert await cache.ping() is False
        assert "Cache read failed" in caplog.text

    async def test_disabled_cache(self) -> None:
        cache = CacheGateway.disabled()
        assert not cache.enabled
        await cache.set_json("tags:list", [1])
        assert await cache.get_json("tags:list") is None
        await cache.close()

    async def test_requests_survive_broken_cache(self, engine, test_settings) -> None:
        app = create_application(
            test_settings,
            database=Database(engine),
            cache=CacheGateway(_BrokenRedis()),  # type: ignore[arg-type]
        )
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            registered = await client.post(
                "/api/v1/auth/register",
                json={"email": "cache@example.com", "username": "cacheuser", "password": "Cache1Pass"},
            )
            assert registered.status_code == 201
            login = await client.post(
                "/api/v1/auth/login",
                json={"email": "cache@example.com", "password": "Cache1Pass"},
            )
            headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

            await client.post("/api/v1/tags/", json={"name": "bug"}, headers=headers)
            response = await client.get("/api/v1/tags/", headers=headers)

        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["bug"]
