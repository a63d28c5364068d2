import uuid
from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient


def event_payload(**overrides):
    start = datetime(2026, 9, 12, 9, 0, tzinfo=timezone.utc)
    payload = {
        "name": "Autumn Makers Fair",
        "description": "Workshops and stalls",
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(days=1)).isoformat(),
        "location": "Civic Center",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient, registered_organizer: dict, auth_headers: dict):
    response = await client.post("/api/v1/events", json=event_payload(), headers=auth_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Autumn Makers Fair"
    assert data["owner_id"] == registered_organizer["organizer"]["id"]


@pytest.mark.asyncio
async def test_create_event_end_before_start(client: AsyncClient, auth_headers: dict):
    payload = event_payload(
        start_date="2026-09-12T09:00:00+00:00",
        end_date="2026-09-11T09:00:00+00:00",
    )
    response = await client.post("/api/v1/events", json=payload, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_events_only_returns_own(client: AsyncClient, auth_headers: dict, past_event: dict):
    other = await client.post(
        "/api/v1/auth/register",
        json={"full_name": "Lee Park", "email": "lee@riverside.org", "password": "password123"},
    )
    other_headers = {"Authorization": f"Bearer {other.json()['access_token']}"}
    await client.post("/api/v1/events", json=event_payload(name="Lee's Gala"), headers=other_headers)

    response = await client.get("/api/v1/events", headers=auth_headers)
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [past_event["id"]]


@pytest.mark.asyncio
async def test_get_event(client: AsyncClient, auth_headers: dict, past_event: dict):
    response = await client.get(f"/api/v1/events/{past_event['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Harbor Tech Summit"


@pytest.mark.asyncio
async def test_get_unknown_event(client: AsyncClient, auth_headers: dict):
    response = await client.get(f"/api/v1/events/{uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_events_require_auth(client: AsyncClient):
    response = await client.get("/api/v1/events")
    assert response.status_code in (401, 403)
