"""Tests for WorkspaceService against in-memory SQLite."""

import uuid

import pytest

from workbench.application.services.workspace_service import WorkspaceService
from workbench.boundary.db.CRUD.message_crud import message_crud
from workbench.boundary.db.models import MessageRole, PanelType
from workbench.core.exceptions import ValidationError, WorkspaceNotFoundError


@pytest.fixture
def workspace_service(test_async_db) -> WorkspaceService:
    return WorkspaceService(db=test_async_db)


class TestCreateWorkspace:
    async def test_defaults_all_panels_visible(self, workspace_service, test_user) -> None:
        workspace = await workspace_service.create_workspace(test_user.id, "Graphs")

        assert workspace.name == "Graphs"
        assert workspace.panel_states == {"coder": True, "artist": True, "tutor": True}

    async def test_merges_partial_panel_states(self, workspace_service, test_user) -> None:
        workspace = await workspace_service.create_workspace(
            test_user.id, "Graphs", {"artist": False}
        )

        assert workspace.panel_states == {"coder": True, "artist": False, "tutor": True}

    async def test_rejects_unknown_panel(self, workspace_service, test_user) -> None:
        with pytest.raises(ValidationError):
            await workspace_service.create_workspace(test_user.id, "Graphs", {"painter": True})


class TestUpdateWorkspace:
    async def test_renames_and_toggles(self, workspace_service, test_user, test_workspace) -> None:
        updated = await workspace_service.update_workspace(
            test_user.id, test_workspace.id, name="Renamed", panel_states={"tutor": False}
        )

        assert updated.name == "Renamed"
        assert updated.panel_states == {"coder": True, "artist": True, "tutor": False}

    async def test_other_users_workspace_is_not_found(
        self, workspace_service, other_user, test_workspace
    ) -> None:
        with pytest.raises(WorkspaceNotFoundError):
            await workspace_service.update_workspace(
                other_user.id, test_workspace.id, name="Hijacked"
            )


class TestDeleteWorkspace:
    async def test_delete_removes_from_listing(
        self, workspace_service, test_user, test_workspace
    ) -> None:
        await workspace_service.delete_workspace(test_user.id, test_workspace.id)

        assert await workspace_service.list_workspaces(test_user.id) == []

    async def test_delete_missing_workspace(self, workspace_service, test_user) -> None:
        with pytest.raises(WorkspaceNotFoundError):
            await workspace_service.delete_workspace(test_user.id, uuid.uuid4())


async def test_list_messages_returns_panel_history(
    workspace_service, test_async_db, test_user, test_workspace
) -> None:
    await message_crud.create_message(
        test_async_db, test_workspace.id, PanelType.TUTOR, MessageRole.USER, "explain recursion"
    )

    messages = await workspace_service.list_messages(
        test_user.id, test_workspace.id, PanelType.TUTOR
    )

    assert len(messages) == 1
    assert messages[0].content == "explain recursion"
    assert messages[0].panel_type is PanelType.TUTOR
