"""Top bar widget with the board title and the add-task button."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static


class TopBar(Widget):
    """Top bar with title and an "Add task" button."""

    DEFAULT_CSS = """
    TopBar {
        height: auto;
        dock: top;
        background: $panel;
    }

    TopBar Horizontal {
        height: auto;
        background: $primary;
        padding: 0 1;
    }

    TopBar #title-status {
        width: 1fr;
        height: 3;
        content-align: left middle;
        text-style: bold;
        color: $text;
    }

    TopBar #add-task-button {
        min-width: 16;
    }
    """

    def __init__(self, title: str = "Task List", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.board_title = title

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static(self.board_title, id="title-status")
            yield Button("+ Add task", variant="primary", id="add-task-button")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task-button":
            self.post_message(self.AddTaskRequested())
            event.stop()

    class AddTaskRequested(Message):
        """Message sent when the add-task button is pressed."""
