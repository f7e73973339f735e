"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never reach a real PostgreSQL server

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.infrastructure.schema_init import initialize_schema  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    """Manager over the test engine, tables not yet created."""
    return DatabaseSessionManager(test_engine, max_connections=5)


@pytest.fixture
async def seeded_db(db_manager):
    """Manager whose database went through the startup schema bootstrap."""
    await initialize_schema(db_manager)
    return db_manager
