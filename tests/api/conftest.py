"""API test fixtures — FastAPI app wired to the test database.

Invariants:
    - app.state.db_manager points at the test manager for the duration of a test
    - Lifespan is not run: the fixtures perform the schema bootstrap themselves
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


async def _client_for(manager):
    app.state.db_manager = manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.db_manager = None


@pytest.fixture
async def client(seeded_db):
    """Client over a bootstrapped database (four seed projects)."""
    async for c in _client_for(seeded_db):
        yield c


@pytest.fixture
async def broken_client(db_manager):
    """Client over a database with no tables: every query fails in the driver."""
    async for c in _client_for(db_manager):
        yield c
