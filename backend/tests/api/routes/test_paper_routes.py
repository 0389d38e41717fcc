"""Tests for /api/v1/papers and the author dashboard."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

AUTHOR = {"X-User-Id": "1"}
REVIEWER = {"X-User-Id": "2"}


@pytest.mark.anyio
async def test_browse_returns_published_only(client: AsyncClient):
    response = await client.get("/api/v1/papers")
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [1, 2]


@pytest.mark.anyio
async def test_browse_search_and_category(client: AsyncClient):
    response = await client.get("/api/v1/papers", params={"q": "cryptography"})
    assert [p["id"] for p in response.json()] == [2]

    response = await client.get("/api/v1/papers", params={"category": "Environmental Science"})
    assert response.json() == []


@pytest.mark.anyio
async def test_categories(client: AsyncClient):
    response = await client.get("/api/v1/papers/categories")
    assert response.json() == ["all", "Computer Science"]


@pytest.mark.anyio
async def test_get_paper(client: AsyncClient):
    response = await client.get("/api/v1/papers/3")
    assert response.status_code == 200
    assert response.json()["assigned_reviewers"] == [2]

    missing = await client.get("/api/v1/papers/404")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Paper not found"


@pytest.mark.anyio
async def test_paper_reviews(client: AsyncClient):
    response = await client.get("/api/v1/papers/3/reviews")
    assert [r["id"] for r in response.json()] == [1]


@pytest.mark.anyio
async def test_submit_paper(client: AsyncClient):
    response = await client.post(
        "/api/v1/papers",
        headers=AUTHOR,
        json={
            "title": "Graph Neural Networks for Protein Folding",
            "authors": ["Dr. Sarah Johnson"],
            "abstract": "...",
            "keywords": ["GNN"],
            "category": "Computational Biology",
            "word_count": 6400,
            "status": "published",
        },
    )
    assert response.status_code == 201

    paper = response.json()["paper"]
    assert paper["id"] == 5
    assert paper["status"] == "submitted"
    assert paper["submitted_by"] == 1
    assert paper["payment_status"] == "pending"


@pytest.mark.anyio
async def test_submit_requires_author(client: AsyncClient):
    body = {"title": "T", "authors": ["A"]}

    assert (await client.post("/api/v1/papers", json=body)).status_code == 401
    assert (await client.post("/api/v1/papers", json=body, headers=REVIEWER)).status_code == 403
    assert (
        await client.post("/api/v1/papers", json=body, headers={"X-User-Id": "99"})
    ).status_code == 401


@pytest.mark.anyio
async def test_author_dashboard_tracks_submission_and_payment(client: AsyncClient):
    await client.post(
        "/api/v1/papers",
        headers=AUTHOR,
        json={"title": "Solo Work", "authors": ["Someone Else"]},
    )

    dashboard = (await client.get("/api/v1/dashboard/author", headers=AUTHOR)).json()
    assert [p["id"] for p in dashboard["papers"]] == [1, 4, 5]
    assert dashboard["stats"]["published"] == 1
    assert dashboard["stats"]["submitted"] == 2
    assert [p["id"] for p in dashboard["pending_payment"]] == [4, 5]

    paid = await client.post("/api/v1/papers/5/payment", headers=AUTHOR)
    assert paid.status_code == 200
    assert paid.json()["paper"]["payment_status"] == "paid"

    dashboard = (await client.get("/api/v1/dashboard/author", headers=AUTHOR)).json()
    assert [p["id"] for p in dashboard["pending_payment"]] == [4]


@pytest.mark.anyio
async def test_submit_ignores_client_fee_fields(client: AsyncClient):
    response = await client.post(
        "/api/v1/papers",
        headers=AUTHOR,
        json={
            "title": "Free Ride",
            "authors": ["Dr. Sarah Johnson"],
            "submission_fee": 0,
            "payment_status": "paid",
        },
    )
    assert response.status_code == 201

    paper = response.json()["paper"]
    assert paper["submission_fee"] == 150
    assert paper["payment_status"] == "pending"


@pytest.mark.anyio
async def test_payment_unknown_paper(client: AsyncClient):
    response = await client.post("/api/v1/papers/77/payment", headers=AUTHOR)
    assert response.status_code == 404


@pytest.mark.anyio
async def test_payment_limited_to_own_papers(client: AsyncClient):
    registered = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "other@example.com",
            "password": "secret1",
            "name": "Dr. Other Author",
            "affiliation": "Elsewhere",
        },
    )
    other = {"X-User-Id": str(registered.json()["user"]["id"])}

    response = await client.post("/api/v1/papers/4/payment", headers=other)
    assert response.status_code == 404
    assert response.json()["detail"] == "Paper not found"

    paper = (await client.get("/api/v1/papers/4")).json()
    assert paper["payment_status"] == "pending"

    own = await client.post("/api/v1/papers/4/payment", headers=AUTHOR)
    assert own.status_code == 200
    assert own.json()["paper"]["payment_status"] == "paid"
