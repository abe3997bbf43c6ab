"""Textual application for the task board."""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from .widgets import (
    ConfirmDeleteModal,
    SearchBar,
    TaskFormModal,
    TaskListWidget,
    TopBar,
)
from ..errors import TaskBoardError
from ..state.board import BoardView, TaskBoard
from ..state.tasks import Task


class TaskBoardApp(App):
    """Single-view task manager TUI."""

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }

    #search-bar {
        padding: 1 1 0 1;
    }

    #task-list-widget {
        border: tall $primary;
        padding: 0 1;
    }

    Footer {
        background: $primary;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "add_task", "Add Task"),
        Binding("ctrl+l", "clear_filter", "Clear Filters"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, board: TaskBoard, board_title: str = "Task List", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.board = board
        self.board_title = board_title

    def compose(self) -> ComposeResult:
        yield TopBar(title=self.board_title, id="top-bar")

        self.search_bar = SearchBar(id="search-bar")
        self.task_list = TaskListWidget(id="task-list-widget")

        yield self.search_bar
        yield self.task_list
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.board_title
        self.board.subscribe(self.render_board)
        self.render_board(self.board.view())

    def on_unmount(self) -> None:
        self.board.unsubscribe(self.render_board)

    def render_board(self, view: BoardView) -> None:
        """Redraw the list and search bar from a board snapshot."""
        self.task_list.update_tasks(list(view.tasks), total=view.total)
        self.search_bar.sync(view.search_query)

    # ------------------------------------------------------------------ #
    # Widget messages
    # ------------------------------------------------------------------ #
    def on_top_bar_add_task_requested(self, event: TopBar.AddTaskRequested) -> None:
        self.action_add_task()

    def on_task_list_widget_edit_requested(self, event: TaskListWidget.EditRequested) -> None:
        """Open the form prefilled with the selected task."""
        if not self._run_intent(self.board.open_edit, event.task_id):
            return
        self.push_screen(TaskFormModal(self.board), self._on_form_closed)

    def on_task_list_widget_delete_requested(self, event: TaskListWidget.DeleteRequested) -> None:
        """Ask for confirmation before deleting."""
        if not self._run_intent(self.board.request_delete, event.task_id):
            return
        self.push_screen(ConfirmDeleteModal(self.board), self._on_delete_closed)

    def on_search_bar_query_changed(self, event: SearchBar.QueryChanged) -> None:
        self.board.set_search_query(event.query)

    def on_search_bar_filter_cleared(self, event: SearchBar.FilterCleared) -> None:
        self.action_clear_filter()

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #
    def action_add_task(self) -> None:
        """Show the task form in create mode."""
        if not self._run_intent(self.board.open_create):
            return
        self.push_screen(TaskFormModal(self.board), self._on_form_closed)

    def action_clear_filter(self) -> None:
        self.board.clear_filter()

    def check_action(self, action: str, parameters: tuple) -> bool | None:
        # No new modal may open on top of another.
        if action == "add_task" and not self.board.flow.is_idle:
            return False
        return True

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _run_intent(self, intent, *args) -> bool:
        try:
            intent(*args)
        except TaskBoardError as exc:
            self.notify(escape(str(exc)), severity="error")
            return False
        return True

    def _on_form_closed(self, task: Optional[Task]) -> None:
        if task is not None:
            self.notify(f"Saved task {task.id}: {escape(task.title)}")

    def _on_delete_closed(self, task_id: Optional[int]) -> None:
        if task_id is not None:
            self.notify(f"Deleted task {task_id}")
