"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, bg_remover.configs
System role: Database schema initialization

Usage:
    python -m bg_remover.boundary.db.create_tables
"""

import asyncio
import logging

from bg_remover.boundary.db.base import Base
from bg_remover.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    from bg_remover.configs import get_settings
    from bg_remover.observability.logger import configure_logging

    configure_logging(get_settings().log_level)
    asyncio.run(create_all_tables())
