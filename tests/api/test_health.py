"""Health probes — liveness always up, readiness tracks the database."""

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from app.infrastructure.database import DatabaseSessionManager
from app.main import app


async def test_liveness_returns_200(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_returns_ready_with_reachable_db(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_returns_503_when_db_unreachable(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/missing-dir/app.db",
    )
    app.state.db_manager = DatabaseSessionManager(engine)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            res = await c.get("/api/health/ready")
    finally:
        app.state.db_manager = None
        await engine.dispose()
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
