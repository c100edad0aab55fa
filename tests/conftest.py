"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, seeded users/workspaces, fake text generator
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from workbench.boundary.db.base import Base
    import workbench.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_user(test_async_db):
    """Persist a user to own workspaces and reminders."""
    from workbench.boundary.db.CRUD.user_crud import user_crud

    return await user_crud.create(
        test_async_db, username="ada", password_hash="not-a-real-hash"
    )


@pytest.fixture
async def other_user(test_async_db):
    """Persist a second user for ownership checks."""
    from workbench.boundary.db.CRUD.user_crud import user_crud

    return await user_crud.create(
        test_async_db, username="grace", password_hash="not-a-real-hash"
    )


@pytest.fixture
async def test_workspace(test_async_db, test_user):
    """Persist a workspace owned by test_user."""
    from workbench.boundary.db.CRUD.workspace_crud import workspace_crud

    return await workspace_crud.create(
        test_async_db,
        user_id=test_user.id,
        name="Algorithms",
        panel_states={"coder": True, "artist": True, "tutor": True},
    )


@pytest.fixture
def mock_generator():
    """
    Create mock TextGenerator for testing.

    Returns:
        AsyncMock: Generator whose agenerate returns a canned reply
    """
    generator = AsyncMock()
    generator.agenerate = AsyncMock(return_value="Generated reply")
    return generator


@pytest.fixture
def user_id():
    """Generate a test user ID."""
    return uuid.uuid4()


@pytest.fixture
def workspace_id():
    """Generate a test workspace ID."""
    return uuid.uuid4()
