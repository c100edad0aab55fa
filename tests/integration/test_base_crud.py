"""
Test suite for BaseCRUD generic database operations.

Runs against in-memory SQLite through the shared test_async_db fixture,
using the workspace table as the concrete model.

System role: Verification of generic database layer foundation
"""

import uuid

import pytest

from workbench.boundary.db.CRUD.base_crud import BaseCRUD
from workbench.boundary.db.models import WorkspaceModel


@pytest.fixture
def base_crud() -> BaseCRUD[WorkspaceModel]:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(WorkspaceModel)


async def _create(base_crud, session, user_id, name="Workspace"):
    return await base_crud.create(
        session, user_id=user_id, name=name, panel_states={"coder": True}
    )


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    async def test_create_assigns_id_and_timestamps(
        self, base_crud, test_async_db, test_user
    ) -> None:
        workspace = await _create(base_crud, test_async_db, test_user.id)

        assert isinstance(workspace.id, uuid.UUID)
        assert workspace.created_at is not None
        assert workspace.updated_at is not None


class TestBaseCRUDRead:
    """Test suite for get_by_id() and get_many()."""

    async def test_get_by_id_returns_instance(
        self, base_crud, test_async_db, test_user
    ) -> None:
        workspace = await _create(base_crud, test_async_db, test_user.id)

        assert await base_crud.get_by_id(test_async_db, workspace.id) is workspace

    async def test_get_by_id_returns_none_when_missing(
        self, base_crud, test_async_db
    ) -> None:
        assert await base_crud.get_by_id(test_async_db, uuid.uuid4()) is None

    async def test_get_many_filters_orders_and_pages(
        self, base_crud, test_async_db, test_user
    ) -> None:
        for name in ("b", "a", "c"):
            await _create(base_crud, test_async_db, test_user.id, name=name)

        rows = await base_crud.get_many(
            test_async_db,
            WorkspaceModel.name != "c",
            order_by=(WorkspaceModel.name,),
        )
        assert [r.name for r in rows] == ["a", "b"]

        page = await base_crud.get_many(
            test_async_db, order_by=(WorkspaceModel.name,), limit=1, offset=1
        )
        assert [r.name for r in page] == ["b"]


class TestBaseCRUDUpdate:
    """Test suite for update() and update_by_id()."""

    async def test_update_applies_changes(
        self, base_crud, test_async_db, test_user
    ) -> None:
        workspace = await _create(base_crud, test_async_db, test_user.id)

        updated = await base_crud.update(test_async_db, workspace, name="Renamed")

        assert updated.name == "Renamed"

    async def test_update_by_id_returns_none_when_missing(
        self, base_crud, test_async_db
    ) -> None:
        assert await base_crud.update_by_id(test_async_db, uuid.uuid4(), name="x") is None


class TestBaseCRUDDelete:
    """Test suite for delete() and delete_by_id()."""

    async def test_delete_by_id_removes_row(
        self, base_crud, test_async_db, test_user
    ) -> None:
        workspace = await _create(base_crud, test_async_db, test_user.id)

        assert await base_crud.delete_by_id(test_async_db, workspace.id) is True
        assert await base_crud.get_by_id(test_async_db, workspace.id) is None

    async def test_delete_by_id_returns_false_when_missing(
        self, base_crud, test_async_db
    ) -> None:
        assert await base_crud.delete_by_id(test_async_db, uuid.uuid4()) is False
