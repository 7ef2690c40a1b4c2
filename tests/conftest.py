"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- Test settings with testing mode enabled
- SQLAlchemy engine and session factory management
- The noisy student repository wired to the test database

The test database defaults to in-memory SQLite. Point TEST_DATABASE_URL at
a PostgreSQL database (postgresql+asyncpg://...) to run against Postgres.
"""

import os

os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from noisy_students.core.settings import Settings, get_settings  # noqa: E402
from noisy_students.features.noisy_students.repositories import (  # noqa: E402
    SqlAlchemyNoisyStudentRepository,
)
from tests.utils.database import (  # noqa: E402
    create_all_tables,
    create_test_engine,
    drop_all_tables,
)


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled."""
    settings = get_settings()
    settings.testing = True
    return settings


@pytest_asyncio.fixture(scope="function")
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Provide SQLAlchemy async engine for tests.

    Creates a fresh engine and schema for each test, so ids start at 1.
    """
    engine = create_test_engine(test_settings.database_url)
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def get_db_session(
    async_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Provide a session factory usable as ``async with get_db_session()``."""
    return async_sessionmaker(async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    get_db_session: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for arranging and inspecting rows directly."""
    async with get_db_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def noisy_student_repository(
    get_db_session: async_sessionmaker[AsyncSession],
) -> SqlAlchemyNoisyStudentRepository:
    """Repository bound to the test database."""
    return SqlAlchemyNoisyStudentRepository(get_db_session=get_db_session)
