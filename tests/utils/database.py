"""Database utilities for testing.

This module provides helper functions for building the test engine and
creating/dropping the schema from the ORM metadata.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from noisy_students.db.postgres.session import Base

# Import all models to ensure they are registered with Base.metadata
# This allows Base.metadata.create_all() and Base.metadata.drop_all() to work properly
from noisy_students.features.noisy_students import models  # noqa: F401


def create_test_engine(database_url: str) -> AsyncEngine:
    """Create an async engine for the test database.

    In-memory SQLite needs a single shared connection, otherwise every
    session would see its own empty database.

    Args:
        database_url: SQLAlchemy URL of the test database
    """
    engine_kwargs: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        engine_kwargs["poolclass"] = StaticPool
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    return create_async_engine(database_url, echo=False, **engine_kwargs)


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create all tables registered on Base.metadata.

    Args:
        engine: Engine bound to the test database
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop all tables registered on Base.metadata.

    Args:
        engine: Engine bound to the test database
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
