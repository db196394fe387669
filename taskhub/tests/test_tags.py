"""
Tag endpoint tests.
"""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestTags:
    async def test_create_and_get(self, client: AsyncClient, auth_headers: dict) -> None:
        created = await client.post(
            "/api/v1/tags/", json={"name": "bug", "color": "#ff0000"}, headers=auth_headers
        )
        assert created.status_code == 201
        tag = created.json()
        assert tag["color"] == "#ff0000"

        fetched = await client.get(f"/api/v1/tags/{tag['id']}", headers=auth_headers)
        assert fetched.json() == tag

    async def test_invalid_color(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.post(
            "/api/v1/tags/", json={"name": "bug", "color": "red"}, headers=auth_headers
        )
        assert response.status_code == 422

    async def test_duplicate_name(self, client: AsyncClient, auth_headers: dict) -> None:
        await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)
        response = await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Duplicate entry"

    async def test_rename_shows_on_tasks(self, client: AsyncClient, auth_headers: dict) -> None:
        tag = (await client.post("/api/v1/tags/", json={"name": "bug"}, headers=auth_headers)).json()
        await client.post(
            "/api/v1/tasks/", json={"title": "Fix it", "tags": [tag["id"]]}, headers=auth_headers
        )
        before = await client.get("/api/v1/tasks/", headers=auth_headers)
        assert before.json()[0]["tags"][0]["name"] == "bug"

        await client.put(f"/api/v1/tags/{tag['id']}", json={"name": "defect"}, headers=auth_headers)

        after = await client.get("/api/v1/tasks/", headers=auth_headers)
        assert after.json()[0]["tags"][0]["name"] == "defect"

    async def test_delete_missing(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.delete(f"/api/v1/tags/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "P2025"
