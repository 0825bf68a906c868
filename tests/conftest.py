"""Shared fixtures: in-memory SQLite database and an ASGI test client."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JANITOR_ENABLED", "false")

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models import Court, User

# Fixed clock for service tests
T0 = datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


async def make_user(db, name):
    user = User(name=name, email=f"{name.lower()}@example.com")
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def make_court(db, name="Jericho Beach"):
    court = Court(name=name, latitude=49.273685, longitude=-123.199509)
    db.add(court)
    await db.commit()
    await db.refresh(court)
    return court


@pytest.fixture
async def alice(db):
    return await make_user(db, "Alice")


@pytest.fixture
async def bob(db):
    return await make_user(db, "Bob")


@pytest.fixture
async def dave(db):
    return await make_user(db, "Dave")


@pytest.fixture
async def court(db):
    return await make_court(db)


@pytest.fixture
async def client(session_factory):
    """API client whose requests use the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def as_user(user_id):
    """Headers identifying the caller."""
    return {"X-User-Id": str(user_id)}
