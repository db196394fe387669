"""
Organization endpoint tests.
Covers: CRUD, the nested structure returned by GET /organizations/{id},
connecting tasks and teams by id, and unique slug handling.
"""
from __future__ import annotations

import uuid
from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _post(client: AsyncClient, headers: dict, path: str, payload: dict[str, Any]) -> dict:
    response = await client.post(path, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def _organization(client: AsyncClient, headers: dict, slug: str = "acme", **kwargs) -> dict:
    return await _post(
        client,
        headers,
        "/api/v1/organizations/",
        {"name": slug.title(), "slug": slug, **kwargs},
    )


class TestOrganizationCrud:
    async def test_create_and_get(self, client: AsyncClient, auth_headers: dict) -> None:
        created = await _organization(client, auth_headers, description="Widgets")
        assert created["slug"] == "acme"

        response = await client.get(
            f"/api/v1/organizations/{created['id']}", headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Acme"
        assert data["description"] == "Widgets"
        assert data["tasks"] == []
        assert data["projects"] == []

    async def test_get_missing(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.get(
            f"/api/v1/organizations/{uuid.uuid4()}", headers=auth_headers
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Organization not found"}

    async def test_duplicate_slug(self, client: AsyncClient, auth_headers: dict) -> None:
        await _organization(client, auth_headers)
        response = await client.post(
            "/api/v1/organizations/",
            json={"name": "Acme Again", "slug": "acme"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Duplicate entry", "code": "P2002"}

    async def test_invalid_slug(self, client: AsyncClient, auth_headers: dict) -> None:
        response = await client.post(
            "/api/v1/organizations/",
            json={"name": "Bad", "slug": "Not A Slug"},
            headers=auth_headers,
        )
        assert response.status_code == 422

    async def test_update_and_delete(self, client: AsyncClient, auth_headers: dict) -> None:
        created = await _organization(client, auth_headers)

        updated = await client.put(
            f"/api/v1/organizations/{created['id']}",
            json={"name": "Acme Corp"},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Acme Corp"
        assert updated.json()["slug"] == "acme"

        deleted = await client.delete(
            f"/api/v1/organizations/{created['id']}", headers=auth_headers
        )
        assert deleted.status_code == 200
        assert deleted.json()["id"] == created["id"]

        listing = await client.get("/api/v1/organizations/", headers=auth_headers)
        assert listing.json() == []


class TestOrganizationStructure:
    async def test_nested_shape(
        self, client: AsyncClient, auth_headers: dict, registered_user: dict
    ) -> None:
        org = await _organization(client, auth_headers)
        team = await _post(
            client,
            auth_headers,
            "/api/v1/teams/",
            {"name": "Platform", "members": [registered_user["id"]]},
        )
        project = await _post(
            client,
            auth_headers,
            "/api/v1/projects/",
            {"name": "Launch", "organization_id": org["id"], "teams": [team["id"]]},
        )
        await _post(
            client,
            auth_headers,
            "/api/v1/tasks/",
            {"title": "Org task", "organization_id": org["id"]},
        )
        await _post(
            client,
            auth_headers,
            "/api/v1/tasks/",
            {"title": "Project task", "project_id": project["id"]},
        )

        response = await client.get(f"/api/v1/organizations/{org['id']}", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()

        assert [t["title"] for t in data["tasks"]] == ["Org task"]
        assert len(data["projects"]) == 1
        embedded = data["projects"][0]
        assert embedded["name"] == "Launch"
        assert [t["title"] for t in embedded["tasks"]] == ["Project task"]
        assert [t["name"] for t in embedded["teams"]] == ["Platform"]
        assert embedded["teams"][0]["members"] == [
            {
                "id": registered_user["id"],
                "username": registered_user["username"],
                "full_name": registered_user["full_name"],
            }
        ]

    async def test_deleting_organization_removes_projects(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        org = await _organization(client, auth_headers)
        project = await _post(
            client,
            auth_headers,
            "/api/v1/projects/",
            {"name": "Launch", "organization_id": org["id"]},
        )

        await client.delete(f"/api/v1/organizations/{org['id']}", headers=auth_headers)

        response = await client.get(f"/api/v1/projects/{project['id']}", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": "Project not found"}


class TestOrganizationLinks:
    async def test_connect_tasks(self, client: AsyncClient, auth_headers: dict) -> None:
        org = await _organization(client, auth_headers)
        task = await _post(client, auth_headers, "/api/v1/tasks/", {"title": "Loose"})

        response = await client.post(
            f"/api/v1/organizations/{org['id']}/tasks",
            json={"ids": [task["id"]]},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert [t["id"] for t in response.json()["tasks"]] == [task["id"]]

        tasks = await client.get(f"/api/v1/organizations/{org['id']}/tasks", headers=auth_headers)
        assert tasks.status_code == 200
        assert tasks.json()[0]["organization_id"] == org["id"]

    async def test_connect_teams_keeps_existing(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        first = await _post(client, auth_headers, "/api/v1/teams/", {"name": "First"})
        second = await _post(client, auth_headers, "/api/v1/teams/", {"name": "Second"})
        org = await _organization(client, auth_headers, teams=[first["id"]])

        response = await client.post(
            f"/api/v1/organizations/{org['id']}/teams",
            json={"ids": [second["id"], first["id"]]},
            headers=auth_headers,
        )
        assert response.status_code == 200

        teams = await client.get(f"/api/v1/organizations/{org['id']}/teams", headers=auth_headers)
        assert sorted(t["name"] for t in teams.json()) == ["First", "Second"]

    async def test_connect_missing_rows(self, client: AsyncClient, auth_headers: dict) -> None:
        org = await _organization(client, auth_headers)
        team = await _post(client, auth_headers, "/api/v1/teams/", {"name": "Real"})

        response = await client.post(
            f"/api/v1/organizations/{org['id']}/teams",
            json={"ids": [team["id"], str(uuid.uuid4())]},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json() == {
            "message": "Expected 2 records to be connected, found only 1.",
            "code": "P2025",
        }

        teams = await client.get(f"/api/v1/organizations/{org['id']}/teams", headers=auth_headers)
        assert teams.json() == []

    async def test_connect_to_missing_organization(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        task = await _post(client, auth_headers, "/api/v1/tasks/", {"title": "Loose"})
        response = await client.post(
            f"/api/v1/organizations/{uuid.uuid4()}/tasks",
            json={"ids": [task["id"]]},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json() == {
            "message": "Record to update not found.",
            "code": "P2025",
        }

    async def test_relations_of_missing_organization(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        response = await client.get(
            f"/api/v1/organizations/{uuid.uuid4()}/teams", headers=auth_headers
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Organization not found"}

    async def test_empty_id_list_rejected(
        self, client: AsyncClient, auth_headers: dict
    ) -> None:
        org = await _organization(client, auth_headers)
        response = await client.post(
            f"/api/v1/organizations/{org['id']}/teams",
            json={"ids": []},
            headers=auth_headers,
        )
        assert response.status_code == 422
