"""State management modules."""

from .board import BoardView, TaskBoard
from .filtering import derive_filter_view
from .flow import DeleteConfirmOpen, FlowState, FormOpen, Idle, UiFlowController
from .form import CreateIntent, FormDraft, FormField, FormMode, FormState, UpdateIntent
from .tasks import IdPolicy, Task, TaskPatch, TaskStore

__all__ = [
    "BoardView",
    "TaskBoard",
    "derive_filter_view",
    "DeleteConfirmOpen",
    "FlowState",
    "FormOpen",
    "Idle",
    "UiFlowController",
    "CreateIntent",
    "FormDraft",
    "FormField",
    "FormMode",
    "FormState",
    "UpdateIntent",
    "IdPolicy",
    "Task",
    "TaskPatch",
    "TaskStore",
]
