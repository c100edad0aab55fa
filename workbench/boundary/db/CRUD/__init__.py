"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from workbench.boundary.db.CRUD import workspace_crud, diagram_crud

    # Use singleton instances
    workspace = await workspace_crud.get_owned(db, workspace_id, user_id)

    # Or instantiate classes directly for custom behavior
    from workbench.boundary.db.CRUD import DiagramCRUD
    custom_crud = DiagramCRUD()
"""

from workbench.boundary.db.CRUD.base_crud import BaseCRUD
from workbench.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from workbench.boundary.db.CRUD.workspace_crud import WorkspaceCRUD, workspace_crud
from workbench.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from workbench.boundary.db.CRUD.diagram_crud import DiagramCRUD, diagram_crud
from workbench.boundary.db.CRUD.reminder_crud import ReminderCRUD, reminder_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "WorkspaceCRUD",
    "workspace_crud",
    "MessageCRUD",
    "message_crud",
    "DiagramCRUD",
    "diagram_crud",
    "ReminderCRUD",
    "reminder_crud",
]
