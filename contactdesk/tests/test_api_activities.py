"""Test activity API routes."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def contact_id(client: AsyncClient) -> str:
    response = await client.post(
        "/api/contacts", json={"name": "Linus", "email": "linus@example.com"}
    )
    return response.json()["id"]


@pytest.mark.asyncio
async def test_create_activity(client: AsyncClient, contact_id: str):
    response = await client.post(
        "/api/activities",
        json={
            "contactId": contact_id,
            "type": "meeting",
            "title": "Quarterly review",
            "scheduledAt": "2026-03-20T15:00:00",
        },
    )
    assert response.status_code == 201
    body = response.json()
    assert body["contactId"] == contact_id
    assert body["scheduledAt"] == "2026-03-20T15:00:00"
    assert body["completedAt"] is None
    assert body["description"] is None
    assert "createdAt" in body


@pytest.mark.asyncio
async def test_create_activity_missing_fields(client: AsyncClient):
    response = await client.post("/api/activities", json={"type": "call"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid activity data"
    assert {tuple(err["loc"]) for err in body["errors"]} == {("contactId",), ("title",)}


@pytest.mark.asyncio
async def test_create_activity_bad_timestamp(client: AsyncClient, contact_id: str):
    response = await client.post(
        "/api/activities",
        json={"contactId": contact_id, "type": "call", "title": "x", "completedAt": "soon"},
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["loc"] == ["completedAt"]


@pytest.mark.asyncio
async def test_create_activity_unknown_contact(client: AsyncClient):
    response = await client.post(
        "/api/activities",
        json={"contactId": "missing", "type": "call", "title": "Ghost call"},
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["loc"] == ["contactId"]


@pytest.mark.asyncio
async def test_list_activities(client: AsyncClient, contact_id: str, clock):
    other = (await client.post(
        "/api/contacts", json={"name": "Ken", "email": "ken@example.com"}
    )).json()["id"]

    for cid, title in [(contact_id, "First"), (other, "Second"), (contact_id, "Third")]:
        clock.advance(minutes=1)
        await client.post(
            "/api/activities", json={"contactId": cid, "type": "email", "title": title}
        )

    everything = (await client.get("/api/activities")).json()
    assert [a["title"] for a in everything] == ["Third", "Second", "First"]

    mine = (await client.get("/api/activities", params={"contactId": contact_id})).json()
    assert [a["title"] for a in mine] == ["Third", "First"]
