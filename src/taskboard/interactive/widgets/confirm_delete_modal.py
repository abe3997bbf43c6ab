"""Modal asking the user to confirm a task deletion."""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from ...state.board import TaskBoard


class ConfirmDeleteModal(ModalScreen[Optional[int]]):
    """Second step of a delete. Dismisses with the deleted id, or None."""

    DEFAULT_CSS = """
    ConfirmDeleteModal {
        align: center middle;
    }

    ConfirmDeleteModal > Vertical {
        width: 60;
        height: auto;
        background: $panel;
        border: thick $error;
        padding: 1 2;
    }

    ConfirmDeleteModal Label {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    ConfirmDeleteModal Static {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
        margin-bottom: 1;
    }

    ConfirmDeleteModal Grid {
        width: 100%;
        height: auto;
        grid-size: 2;
        grid-gutter: 1;
    }

    ConfirmDeleteModal Button {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, board: TaskBoard) -> None:
        super().__init__()
        self.board = board

    def compose(self) -> ComposeResult:
        target = self.board.delete_target
        task = self.board.store.get(target) if target is not None else None
        with Vertical():
            yield Label("Are you sure you want to delete this task?")
            yield Static(task.title if task else "", id="delete-target-title", markup=False)
            with Grid():
                yield Button("Delete", variant="error", id="confirm-delete-button")
                yield Button("Cancel", variant="default", id="cancel-button")

    def on_mount(self) -> None:
        self.query_one("#cancel-button", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm-delete-button":
            self.dismiss(self.board.confirm_delete())
        elif event.button.id == "cancel-button":
            self._cancel()

    def action_cancel(self) -> None:
        self._cancel()

    def _cancel(self) -> None:
        if self.board.delete_target is not None:
            self.board.cancel_modal()
        self.dismiss(None)
