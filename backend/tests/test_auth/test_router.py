import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import update

from app.organizers.models import Organizer


async def deactivate(session_factory, organizer_id: str):
    async with session_factory() as session:
        await session.execute(
            update(Organizer).where(Organizer.id == uuid.UUID(organizer_id)).values(is_active=False)
        )
        await session.commit()


@pytest.mark.asyncio
async def test_register_success(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "full_name": "Sam Okafor",
            "organization": "Lakeside Festivals",
            "email": "sam@lakeside.org",
            "password": "password123",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["organizer"]["full_name"] == "Sam Okafor"
    assert data["organizer"]["email"] == "sam@lakeside.org"
    assert data["organizer"]["role"] == "organizer"
    assert "access_token" in data
    assert "refresh_token" in data


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient):
    payload = {
        "full_name": "Dup Organizer",
        "email": "dup@test.com",
        "password": "password123",
    }
    await client.post("/api/v1/auth/register", json=payload)
    response = await client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_invalid_password_too_short(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "full_name": "Short Pass",
            "email": "short@test.com",
            "password": "abc",
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, registered_organizer: dict):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "dana@harborevents.com", "password": "securepass123"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["organizer"]["full_name"] == "Dana Reyes"
    assert "access_token" in data


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, registered_organizer: dict):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "dana@harborevents.com", "password": "wrongpass"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_nonexistent_email(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@test.com", "password": "password123"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_with_valid_token(client: AsyncClient, auth_headers: dict):
    response = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["full_name"] == "Dana Reyes"
    assert data["organization"] == "Harbor Events"


@pytest.mark.asyncio
async def test_me_without_token(client: AsyncClient):
    response = await client.get("/api/v1/auth/me")
    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_me_rejects_refresh_token(client: AsyncClient, registered_organizer: dict):
    headers = {"Authorization": f"Bearer {registered_organizer['refresh_token']}"}
    response = await client.get("/api/v1/auth/me", headers=headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_refresh_token(client: AsyncClient, registered_organizer: dict):
    refresh_token = registered_organizer["refresh_token"]
    response = await client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": refresh_token},
    )
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert "refresh_token" in data


@pytest.mark.asyncio
async def test_refresh_with_invalid_token(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": "invalid-token"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_register_duplicate_email_ignores_case(client: AsyncClient, registered_organizer: dict):
    response = await client.post(
        "/api/v1/auth/register",
        json={"full_name": "Dana Again", "email": "Dana@HarborEvents.com", "password": "password123"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(client: AsyncClient, registered_organizer: dict):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "DANA@harborevents.com", "password": "securepass123"},
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


@pytest.mark.asyncio
async def test_inactive_organizer_cannot_login_or_refresh(
    client: AsyncClient, registered_organizer: dict, session_factory,
):
    await deactivate(session_factory, registered_organizer["organizer"]["id"])

    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "dana@harborevents.com", "password": "securepass123"},
    )
    assert login.status_code == 401

    refresh = await client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": registered_organizer["refresh_token"]},
    )
    assert refresh.status_code == 401


@pytest.mark.asyncio
async def test_refresh_rejects_access_token(client: AsyncClient, registered_organizer: dict):
    response = await client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": registered_organizer["access_token"]},
    )
    assert response.status_code == 401
