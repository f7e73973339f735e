"""Agency Site API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiError → structured JSON responses
    - Schema bootstrap completes before the first request is accepted;
      a bootstrap failure aborts startup
    - The connection pool is created once in lifespan and disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Pool handle lives on app.state (not a module global) so tests inject their own
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import contacts, health, projects
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.infrastructure.schema_init import initialize_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager.from_settings(settings)
    try:
        await initialize_schema(manager)
    except Exception:
        logger.critical("Database initialization failed, refusing to start", exc_info=True)
        await manager.dispose()
        raise
    app.state.db_manager = manager
    logger.info("Agency Site API started")
    try:
        yield
    finally:
        logger.info("Agency Site API shutting down")
        await manager.dispose()
        app.state.db_manager = None


app = FastAPI(
    title="Agency Site API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(contacts.router)

register_error_handlers(app)
