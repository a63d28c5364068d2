from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import get_db, get_session_factory
from app.main import create_app
from app.models.base import Base

TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

engine = create_async_engine(TEST_DATABASE_URL, echo=False)
test_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(autouse=True)
async def setup_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_db():
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client():
    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def registered_organizer(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "full_name": "Dana Reyes",
            "organization": "Harbor Events",
            "email": "dana@harborevents.com",
            "password": "securepass123",
        },
    )
    return response.json()


@pytest_asyncio.fixture
async def auth_headers(registered_organizer: dict):
    token = registered_organizer["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def seed_records():
    """Persist ORM rows (feedback, alerts, ...) straight into the test database."""

    async def _seed(*rows):
        async with test_session_factory() as session:
            session.add_all(rows)
            await session.commit()

    return _seed


@pytest_asyncio.fixture
async def past_event(client: AsyncClient, auth_headers: dict) -> dict:
    """A two-day event that ended two days ago."""
    end = datetime.now(timezone.utc) - timedelta(days=2)
    start = end - timedelta(days=2)
    response = await client.post(
        "/api/v1/events",
        json={
            "name": "Harbor Tech Summit",
            "description": "Two days of talks and workshops",
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "location": "Pier 9 Convention Hall",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def upcoming_event(client: AsyncClient, auth_headers: dict) -> dict:
    """An event that started yesterday and ends in three days."""
    now = datetime.now(timezone.utc)
    response = await client.post(
        "/api/v1/events",
        json={
            "name": "Riverside Music Week",
            "description": "Outdoor concerts",
            "start_date": (now - timedelta(days=1)).isoformat(),
            "end_date": (now + timedelta(days=3)).isoformat(),
            "location": "Riverside Park",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def session_factory():
    return test_session_factory
