"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's db_manager is the test manager for the duration of a client fixture

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, sufficient
      for route and store tests (PostgreSQL-specific features not exercised)
    - Env defaults set before importing the app: get_settings() runs at import
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from task_api.db.base import Base  # noqa: E402
from task_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from task_api.infrastructure.task_store import SqlTaskStore  # noqa: E402
from task_api.main import app  # noqa: E402
import task_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def store(db_manager):
    return SqlTaskStore(db_manager)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the test database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None
