"""
User endpoint tests.
"""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestUsers:
    async def test_create_hashes_password(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        response = await client.post(
            "/api/v1/users/",
            json={
                "email": "second@example.com",
                "username": "second",
                "password": "Second1Pass",
            },
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert "password" not in data
        assert "hashed_password" not in data

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "second@example.com", "password": "Second1Pass"},
        )
        assert login.status_code == 200

    async def test_duplicate_email(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        response = await client.post(
            "/api/v1/users/",
            json={
                "email": registered_user["email"],
                "username": "someoneelse",
                "password": "Second1Pass",
            },
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Duplicate entry", "code": "P2002"}

    async def test_update_password(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        response = await client.put(
            f"/api/v1/users/{registered_user['id']}",
            json={"password": "Changed1Pass"},
            headers=auth_headers,
        )
        assert response.status_code == 200

        old = await client.post(
            "/api/v1/auth/login",
            json={"email": registered_user["email"], "password": "TestPass1"},
        )
        assert old.status_code == 401
        new = await client.post(
            "/api/v1/auth/login",
            json={"email": registered_user["email"], "password": "Changed1Pass"},
        )
        assert new.status_code == 200

    async def test_deactivated_user_is_locked_out(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        await client.put(
            f"/api/v1/users/{registered_user['id']}",
            json={"is_active": False},
            headers=auth_headers,
        )
        response = await client.get("/api/v1/users/", headers=auth_headers)
        assert response.status_code == 401
        assert response.json()["message"] == "User account is deactivated"

    async def test_get_missing_user(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.get(f"/api/v1/users/{uuid.uuid4()}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}
