"""
Comment endpoint tests.
Covers: author assignment, mentions as an explicit user relation, CRUD.
"""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _user(client: AsyncClient, headers: dict, username: str) -> dict:
    response = await client.post(
        "/api/v1/users/",
        json={
            "email": f"{username}@example.com",
            "username": username,
            "password": "Mention1Pass",
            "full_name": username.title(),
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestComments:
    async def test_author_is_current_user(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        response = await client.post(
            "/api/v1/comments/",
            json={"content": "Looks good"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["author_id"] == registered_user["id"]

    async def test_comment_on_task(self, client: AsyncClient, auth_headers: dict) -> None:
        task = await client.post("/api/v1/tasks/", json={"title": "Review"}, headers=auth_headers)
        task_id = task.json()["id"]

        response = await client.post(
            "/api/v1/comments/",
            json={"content": "On it", "task_id": task_id},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["task_id"] == task_id

    async def test_update_and_delete(self, client: AsyncClient, auth_headers: dict) -> None:
        created = await client.post(
            "/api/v1/comments/", json={"content": "Draft"}, headers=auth_headers
        )
        comment_id = created.json()["id"]

        updated = await client.put(
            f"/api/v1/comments/{comment_id}", json={"content": "Final"}, headers=auth_headers
        )
        assert updated.status_code == 200
        assert updated.json()["content"] == "Final"

        deleted = await client.delete(f"/api/v1/comments/{comment_id}", headers=auth_headers)
        assert deleted.status_code == 200

        missing = await client.get(f"/api/v1/comments/{comment_id}", headers=auth_headers)
        assert missing.status_code == 404
        assert missing.json() == {"message": "Comment not found"}


class TestMentions:
    async def test_mentions_are_listed(self, client: AsyncClient, auth_headers: dict) -> None:
        alice = await _user(client, auth_headers, "alice")
        bob = await _user(client, auth_headers, "bob")

        created = await client.post(
            "/api/v1/comments/",
            json={"content": "cc alice and bob", "mentions": [alice["id"], bob["id"]]},
            headers=auth_headers,
        )
        assert created.status_code == 201

        response = await client.get(
            f"/api/v1/comments/{created.json()['id']}/mentions", headers=auth_headers
        )
        assert response.status_code == 200
        assert sorted(u["username"] for u in response.json()) == ["alice", "bob"]
        assert all(set(u) == {"id", "username", "full_name"} for u in response.json())

    async def test_update_replaces_mentions(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        alice = await _user(client, auth_headers, "alice")
        bob = await _user(client, auth_headers, "bob")
        created = await client.post(
            "/api/v1/comments/",
            json={"content": "cc alice", "mentions": [alice["id"]]},
            headers=auth_headers,
        )
        comment_id = created.json()["id"]

        await client.put(
            f"/api/v1/comments/{comment_id}",
            json={"mentions": [bob["id"]]},
            headers=auth_headers,
        )

        response = await client.get(
            f"/api/v1/comments/{comment_id}/mentions", headers=auth_headers
        )
        assert [u["username"] for u in response.json()] == ["bob"]

    async def test_unknown_user_mentioned(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        response = await client.post(
            "/api/v1/comments/",
            json={"content": "cc ghost", "mentions": [str(uuid.uuid4())]},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["code"] == "P2025"

    async def test_mentions_of_missing_comment(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        response = await client.get(
            f"/api/v1/comments/{uuid.uuid4()}/mentions", headers=auth_headers
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Comment not found"}
