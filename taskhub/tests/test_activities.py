"""
Activity endpoint tests.
"""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestActivities:
    async def test_crud_cycle(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        entity_id = str(uuid.uuid4())
        created = await client.post(
            "/api/v1/activities/",
            json={
                "action": "task_exported",
                "entity_type": "task",
                "entity_id": entity_id,
                "meta": {"format": "csv", "rows": 12},
                "user_id": registered_user["id"],
            },
            headers=auth_headers,
        )
        assert created.status_code == 201
        activity = created.json()
        assert activity["meta"] == {"format": "csv", "rows": 12}
        assert activity["entity_id"] == entity_id

        updated = await client.put(
            f"/api/v1/activities/{activity['id']}",
            json={"meta": {"format": "xlsx"}},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["meta"] == {"format": "xlsx"}
        assert updated.json()["action"] == "task_exported"

        deleted = await client.delete(
            f"/api/v1/activities/{activity['id']}", headers=auth_headers
        )
        assert deleted.status_code == 200

        missing = await client.get(f"/api/v1/activities/{activity['id']}", headers=auth_headers)
        assert missing.json() == {"message": "Activity not found"}

    async def test_unknown_user(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.post(
            "/api/v1/activities/",
            json={"action": "x", "entity_type": "task", "user_id": str(uuid.uuid4())},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "P2003"
