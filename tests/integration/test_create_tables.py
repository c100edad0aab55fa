"""Tests for schema creation and teardown helpers."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from workbench.boundary.db import create_tables


@pytest.fixture
async def sqlite_engine(monkeypatch):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(create_tables, "get_async_engine", lambda: engine)
    yield engine
    await engine.dispose()


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync: inspect(sync).get_table_names()))


async def test_create_all_tables_registers_every_model(sqlite_engine) -> None:
    await create_tables.create_all_tables()

    assert {"users", "workspaces", "messages", "diagrams", "reminders"} <= (
        await _table_names(sqlite_engine)
    )


async def test_create_all_tables_is_idempotent(sqlite_engine) -> None:
    await create_tables.create_all_tables()
    await create_tables.create_all_tables()

    assert "workspaces" in await _table_names(sqlite_engine)


async def test_drop_all_tables_removes_schema(sqlite_engine) -> None:
    await create_tables.create_all_tables()

    await create_tables.drop_all_tables()

    assert await _table_names(sqlite_engine) == set()
