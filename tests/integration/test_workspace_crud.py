"""
Integration tests for workspace, message and user CRUD.

System role: Verification of workspace-scoped persistence
"""

import uuid

from workbench.boundary.db.CRUD import (
    diagram_crud,
    message_crud,
    user_crud,
    workspace_crud,
)
from workbench.boundary.db.models import MessageRole, PanelType


async def test_get_by_username(test_async_db, test_user) -> None:
    assert await user_crud.get_by_username(test_async_db, "ada") is test_user
    assert await user_crud.get_by_username(test_async_db, "nobody") is None


async def test_get_owned_checks_owner(test_async_db, test_workspace, test_user, other_user) -> None:
    assert await workspace_crud.get_owned(test_async_db, test_workspace.id, test_user.id) is test_workspace
    assert await workspace_crud.get_owned(test_async_db, test_workspace.id, other_user.id) is None
    assert await workspace_crud.get_owned(test_async_db, uuid.uuid4(), test_user.id) is None


async def test_get_by_user_id_only_returns_own_workspaces(
    test_async_db, test_workspace, test_user, other_user
) -> None:
    await workspace_crud.create(
        test_async_db, user_id=other_user.id, name="Theirs", panel_states={}
    )

    workspaces = await workspace_crud.get_by_user_id(test_async_db, test_user.id)

    assert [w.id for w in workspaces] == [test_workspace.id]


async def test_messages_are_split_by_panel_and_ordered(test_async_db, test_workspace) -> None:
    await message_crud.create_message(
        test_async_db, test_workspace.id, PanelType.CODER, MessageRole.USER, "first"
    )
    await message_crud.create_message(
        test_async_db, test_workspace.id, PanelType.TUTOR, MessageRole.USER, "tutor"
    )
    await message_crud.create_message(
        test_async_db, test_workspace.id, PanelType.CODER, MessageRole.ASSISTANT, "second"
    )

    coder = await message_crud.get_by_workspace_and_panel(
        test_async_db, test_workspace.id, PanelType.CODER
    )

    assert [m.content for m in coder] == ["first", "second"]
    assert [m.role for m in coder] == ["user", "assistant"]
    assert all(m.panel_type == "coder" for m in coder)


async def test_deleting_workspace_cascades(test_async_db, test_workspace) -> None:
    message = await message_crud.create_message(
        test_async_db, test_workspace.id, PanelType.CODER, MessageRole.USER, "hi"
    )
    diagram = await diagram_crud.create_diagram(
        test_async_db, test_workspace.id, "flow", "graph TD\nA-->B"
    )

    await workspace_crud.delete(test_async_db, test_workspace)

    assert await message_crud.get_by_id(test_async_db, message.id) is None
    assert await diagram_crud.get_by_id(test_async_db, diagram.id) is None
