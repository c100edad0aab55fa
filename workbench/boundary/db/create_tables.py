"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, workbench.configs
System role: Database schema initialization

Usage:
    python -m workbench.boundary.db.create_tables [--reset]
"""

import argparse
import asyncio
import logging

from workbench.boundary.db.base import Base
from workbench.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
import workbench.boundary.db.models  # noqa: F401

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


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All database tables dropped")


async def _main(reset: bool) -> None:
    if reset:
        await drop_all_tables()
    await create_all_tables()
    await get_async_engine().dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create workbench database tables")
    parser.add_argument(
        "--reset", action="store_true", help="Drop every table before creating"
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main(args.reset))
