"""Task list widget: one card per visible task."""

from __future__ import annotations

from typing import List

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Static

from ...state.tasks import Task


class TaskActionButton(Button):
    """Button that remembers which task it acts on."""

    def __init__(self, label: str, task_id: int, action: str, **kwargs) -> None:
        super().__init__(label, classes=f"{action}-button", **kwargs)
        self.task_id = task_id
        self.task_action = action


class TaskCard(Vertical):
    """Displays a single task with edit and delete buttons."""

    DEFAULT_CSS = """
    TaskCard {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin: 0 0 1 0;
    }

    TaskCard .task-actions {
        height: auto;
        align-horizontal: right;
    }

    TaskCard Button {
        min-width: 10;
        margin-left: 1;
    }

    TaskCard .task-title {
        text-style: bold;
    }

    TaskCard .task-responsible {
        color: $text-muted;
    }
    """

    def __init__(self, task: Task, **kwargs) -> None:
        super().__init__(**kwargs)
        self.task_item = task

    def compose(self) -> ComposeResult:
        task = self.task_item
        with Horizontal(classes="task-actions"):
            yield TaskActionButton("Edit", task.id, "edit", variant="default")
            yield TaskActionButton("Delete", task.id, "delete", variant="error")
        title = Text()
        title.append(f"[{task.id}] ", style="dim")
        title.append(task.title)
        yield Static(title, classes="task-title")
        yield Static(Text(task.description) if task.description else Text("No description", style="italic dim"), classes="task-description")
        yield Static(self._format_responsible(task), classes="task-responsible")

    @staticmethod
    def _format_responsible(task: Task) -> Text:
        text = Text("Responsible:", style="dim")
        if not task.responsible:
            text.append(" none", style="italic dim")
        for member in task.responsible:
            text.append(f"\n  • {member}")
        return text


class TaskListWidget(Widget):
    """Widget displaying the filtered task list."""

    DEFAULT_CSS = """
    TaskListWidget {
        height: 1fr;
    }

    TaskListWidget VerticalScroll {
        height: 1fr;
    }

    TaskListWidget #task-list-empty {
        color: $text-muted;
        padding: 1 2;
    }
    """

    tasks: List[Task] = reactive([], layout=True)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Tasks"

    def compose(self) -> ComposeResult:
        yield VerticalScroll(id="task-list-view")

    async def watch_tasks(self, tasks: List[Task]) -> None:
        container = self.query_one("#task-list-view", VerticalScroll)
        await container.remove_children()
        if not tasks:
            await container.mount(Static("No tasks to show.", id="task-list-empty"))
            return
        await container.mount_all([TaskCard(task) for task in tasks])

    def update_tasks(self, tasks: List[Task], total: int | None = None) -> None:
        self.tasks = list(tasks)
        if total is not None and total != len(tasks):
            self.border_title = f"Tasks ({len(tasks)} of {total})"
        else:
            self.border_title = f"Tasks ({len(tasks)})"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Turn card button presses into edit/delete requests."""
        button = event.button
        if not isinstance(button, TaskActionButton):
            return
        event.stop()
        if button.task_action == "edit":
            self.post_message(self.EditRequested(button.task_id))
        elif button.task_action == "delete":
            self.post_message(self.DeleteRequested(button.task_id))

    class EditRequested(Message):
        """Message sent when a task's edit button is pressed."""

        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    class DeleteRequested(Message):
        """Message sent when a task's delete button is pressed."""

        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id
