"""Database Session Manager — bounded async connection pool with scoped acquisition.

Invariants:
    - At most max_connections sessions are borrowed at once
    - A borrowed slot is released whether the statement succeeds or fails
    - Every session commits on clean exit and rolls back on exception
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - queue_limit == 0 means unbounded waiters; wait_for_connections=False fails fast

Design Decisions:
    - Manager is stored on app.state and resolved per request (get_db_manager),
      so tests inject a manager built around their own engine
    - Slot accounting runs on the event loop thread only: plain counters, no locks
    - expire_on_commit=False: handlers serialize rows after the transaction closes
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from app.config import Settings
from app.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with bounded pooling, rollback, and health checks."""

    def __init__(
        self,
        engine: AsyncEngine,
        max_connections: int = 10,
        queue_limit: int = 0,
        wait_for_connections: bool = True,
    ):
        self.engine = engine
        self.max_connections = max_connections
        self.queue_limit = queue_limit
        self.wait_for_connections = wait_for_connections
        self._slots = asyncio.Semaphore(max_connections)
        self._borrowed = 0
        self._waiting = 0
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseSessionManager":
        engine = create_async_engine(
            settings.database_url,
            pool_size=settings.database_max_connections,
            max_overflow=0,
            pool_timeout=settings.database_pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        return cls(
            engine,
            max_connections=settings.database_max_connections,
            queue_limit=settings.database_queue_limit,
            wait_for_connections=settings.database_wait_for_connections,
        )

    @property
    def borrowed(self) -> int:
        return self._borrowed

    @property
    def waiting(self) -> int:
        return self._waiting

    @asynccontextmanager
    async def _connection_slot(self) -> AsyncGenerator[None, None]:
        """Borrow one of max_connections slots, queueing per pool policy."""
        if self._borrowed >= self.max_connections:
            if not self.wait_for_connections:
                raise DatabaseError("No connection available", "acquire")
            if self.queue_limit and self._waiting >= self.queue_limit:
                raise DatabaseError("Connection queue limit reached", "acquire")
        self._waiting += 1
        try:
            await self._slots.acquire()
        finally:
            self._waiting -= 1
        self._borrowed += 1
        try:
            yield
        finally:
            self._borrowed -= 1
            self._slots.release()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional session: commit on success, rollback on exception."""
        async with self._connection_slot():
            session = self._session_factory()
            try:
                yield session
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.error(f"DB integrity error: {e}")
                raise DatabaseError("Integrity constraint violated", "commit") from e
            except OperationalError as e:
                await session.rollback()
                logger.error(f"DB operational error: {e}")
                raise DatabaseError("Connection or operational error", "execute") from e
            except DBAPIError as e:
                await session.rollback()
                logger.error(f"DB driver error: {e}")
                raise DatabaseError("Database driver error", "query") from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"SQLAlchemy error: {e}")
                raise DatabaseError("Database operation failed", "unknown") from e
            finally:
                await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency — the process-wide manager created in lifespan."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
