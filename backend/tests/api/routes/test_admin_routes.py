"""Tests for /api/v1/admin routes."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

ADMIN = {"X-User-Id": "3"}
AUTHOR = {"X-User-Id": "1"}


@pytest.mark.anyio
async def test_admin_routes_forbidden_for_non_admin(client: AsyncClient):
    response = await client.get("/api/v1/admin/papers", headers=AUTHOR)
    assert response.status_code == 403
    assert response.json()["detail"] == "Admin access required"


@pytest.mark.anyio
async def test_list_all_papers_with_stats(client: AsyncClient):
    response = await client.get("/api/v1/admin/papers", headers=ADMIN)
    assert response.status_code == 200

    data = response.json()
    assert len(data["papers"]) == 4
    assert data["stats"] == {"submitted": 1, "under_review": 1, "published": 2, "rejected": 0}


@pytest.mark.anyio
async def test_reviewer_search(client: AsyncClient):
    response = await client.get("/api/v1/admin/reviewers", headers=ADMIN, params={"q": "stanford"})
    reviewers = response.json()
    assert [r["id"] for r in reviewers] == [2]
    assert "password" not in reviewers[0]

    response = await client.get("/api/v1/admin/reviewers", headers=ADMIN, params={"q": "oxford"})
    assert response.json() == []


@pytest.mark.anyio
async def test_assign_reviewer(client: AsyncClient):
    response = await client.post(
        "/api/v1/admin/papers/4/reviewers", headers=ADMIN, json={"reviewer_id": 2}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "error": None}

    paper = (await client.get("/api/v1/papers/4")).json()
    assert paper["assigned_reviewers"] == [2]
    assert paper["status"] == "submitted"


@pytest.mark.anyio
async def test_assign_reviewer_unknown_paper(client: AsyncClient):
    response = await client.post(
        "/api/v1/admin/papers/999/reviewers", headers=ADMIN, json={"reviewer_id": 2}
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Paper not found"


@pytest.mark.anyio
async def test_publish_paper(client: AsyncClient):
    response = await client.post("/api/v1/admin/papers/3/publish", headers=ADMIN)
    assert response.status_code == 200

    paper = (await client.get("/api/v1/papers/3")).json()
    assert paper["status"] == "published"
    assert paper["doi"] == "10.1000/example.2024.003"

    browse = await client.get("/api/v1/papers")
    assert [p["id"] for p in browse.json()] == [1, 2, 3]


@pytest.mark.anyio
async def test_publish_unknown_paper(client: AsyncClient):
    response = await client.post("/api/v1/admin/papers/50/publish", headers=ADMIN)
    assert response.status_code == 404
