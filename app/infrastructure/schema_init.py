"""Schema Initializer — creates tables and seeds default projects before traffic is served.

Invariants:
    - Every step is idempotent: CREATE IF NOT EXISTS, seed only when projects is empty
    - Seed rows are inserted in SEED_PROJECTS order
    - Any failure propagates to the caller (lifespan), which aborts startup
"""

import logging

from sqlalchemy import func, insert, select

from app.core.seed_data import SEED_PROJECTS
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.models import Contact, Project

logger = logging.getLogger(__name__)


async def initialize_schema(db: DatabaseSessionManager) -> int:
    """Create projects/contacts if absent and seed projects. Returns rows seeded."""
    tables = [Project.__table__, Contact.__table__]
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=tables, checkfirst=True)

    async with db.session() as session:
        count = await session.scalar(select(func.count()).select_from(Project))
        if count:
            logger.info(f"Projects table already populated ({count} rows), skipping seed")
            return 0
        for row in SEED_PROJECTS:
            await session.execute(insert(Project).values(**row))

    logger.info(f"Seeded {len(SEED_PROJECTS)} projects")
    return len(SEED_PROJECTS)
