"""Interactive mode widgets."""

from .confirm_delete_modal import ConfirmDeleteModal
from .search_bar import SearchBar
from .task_form_modal import TaskFormModal
from .task_list import TaskListWidget
from .top_bar import TopBar

__all__ = [
    "ConfirmDeleteModal",
    "SearchBar",
    "TaskFormModal",
    "TaskListWidget",
    "TopBar",
]
