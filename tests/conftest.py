"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Foreign keys are enforced (PRAGMA foreign_keys=ON): FK rejection and
      ON DELETE CASCADE behave as on PostgreSQL
    - get_db dependency overridden to use the test database

Design Decisions:
    - StaticPool: one shared connection, so every session sees the same :memory: DB
"""

import os

os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from matchfeed.db.base import Base
from matchfeed.infrastructure.database import get_db
from matchfeed.main import app
import matchfeed.models  # noqa: F401


def _enable_sqlite_fks(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_fks)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


MATCH_BODY = {
    "sport": "football",
    "homeTeam": "A",
    "awayTeam": "B",
    "startTime": "2026-01-01T10:00:00Z",
}

COMMENTARY_BODY = {
    "sequence": 1,
    "eventType": "goal",
    "actor": "J. Smith",
    "team": "A",
    "message": "Smith scores from the edge of the box",
}


@pytest.fixture
def make_match(client):
    """POST a match and return its data payload."""
    async def _make(**overrides):
        res = await client.post("/matches", json={**MATCH_BODY, **overrides})
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make


@pytest.fixture
def make_commentary(client):
    """POST a commentary entry for a match and return its data payload."""
    async def _make(match_id, **overrides):
        res = await client.post(
            f"/matches/{match_id}/commentary",
            json={**COMMENTARY_BODY, **overrides},
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make
