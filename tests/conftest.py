"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, authenticated users, job payloads
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone

import pytest

from bg_remover.models.auth import AuthenticatedUser


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from bg_remover.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def alice() -> AuthenticatedUser:
    """Authenticated user owning the jobs under test."""
    return AuthenticatedUser(id="user-alice")


@pytest.fixture
def bob() -> AuthenticatedUser:
    """A second, unrelated user."""
    return AuthenticatedUser(id="user-bob")


@pytest.fixture
def completed_at() -> datetime:
    """Fixed completion timestamp."""
    return datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)

