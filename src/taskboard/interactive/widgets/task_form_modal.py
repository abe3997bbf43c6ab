"""Modal for creating or editing a task."""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static, TextArea

from ...errors import TaskBoardError, ValidationError
from ...state.board import TaskBoard
from ...state.form import FormField, FormMode
from ...state.tasks import Task


class RemoveMemberButton(Button):
    """Button that unassigns one member from the draft."""

    def __init__(self, member: str) -> None:
        super().__init__("Remove", variant="error", classes="remove-member-button")
        self.member = member


class ResponsibleRow(Horizontal):
    """One assigned member with its remove button."""

    def __init__(self, member: str) -> None:
        super().__init__(classes="responsible-row")
        self.member = member

    def compose(self) -> ComposeResult:
        yield Static(self.member, classes="responsible-name", markup=False)
        yield RemoveMemberButton(self.member)


class TaskFormModal(ModalScreen[Optional[Task]]):
    """Modal dialog holding the task draft.

    Every edit goes straight to the board's form state; the modal only
    mirrors it. Dismisses with the saved task, or None when cancelled.
    """

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > VerticalScroll {
        width: 80;
        height: auto;
        max-height: 90%;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    TaskFormModal #form-heading {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    TaskFormModal .field-label {
        color: $text-muted;
    }

    TaskFormModal Input {
        width: 100%;
        margin-bottom: 1;
    }

    TaskFormModal TextArea {
        width: 100%;
        height: 6;
        border: round $primary;
        margin-bottom: 1;
    }

    TaskFormModal #responsible-list {
        height: auto;
    }

    TaskFormModal .responsible-row {
        height: auto;
    }

    TaskFormModal .responsible-name {
        width: 1fr;
        content-align: left middle;
        height: 3;
    }

    TaskFormModal Select {
        margin-bottom: 1;
    }

    TaskFormModal Grid {
        width: 100%;
        height: auto;
        grid-size: 2;
        grid-gutter: 1;
    }

    TaskFormModal Grid Button {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(self, board: TaskBoard) -> None:
        super().__init__()
        self.board = board

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        draft = self.board.form.draft
        heading = "Edit Task" if self.board.form.mode is FormMode.EDIT else "Add Task"
        with VerticalScroll():
            yield Label(heading, id="form-heading")
            yield Label("Title", classes="field-label")
            yield Input(value=draft.title if draft else "", placeholder="Required", id="title-input")
            yield Label("Description", classes="field-label")
            yield TextArea(draft.description if draft else "", id="description-input")
            yield Label("Responsible", classes="field-label")
            with Vertical(id="responsible-list"):
                for member in draft.responsible if draft else []:
                    yield ResponsibleRow(member)
            yield Select(
                [(member, member) for member in self.board.roster],
                prompt="Select responsible",
                id="responsible-select",
            )
            with Grid(id="form-actions"):
                yield Button("Save", variant="success", id="save-button")
                yield Button("Cancel", variant="error", id="cancel-button")

    def on_mount(self) -> None:
        """Focus the title input when mounted."""
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "title-input" and self.board.form_is_open:
            self.board.set_field(FormField.TITLE, event.value)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == "description-input" and self.board.form_is_open:
            self.board.set_field(FormField.DESCRIPTION, event.text_area.text)

    async def on_select_changed(self, event: Select.Changed) -> None:
        member = event.value
        if not isinstance(member, str) or not self.board.form_is_open:
            return
        try:
            self.board.add_responsible(member)
        except TaskBoardError as exc:
            self.notify(escape(str(exc)), severity="error")
            return
        await self._refresh_responsible()
        event.select.clear()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if isinstance(event.button, RemoveMemberButton):
            self.board.remove_responsible(event.button.member)
            await self._refresh_responsible()
        elif event.button.id == "save-button":
            self._save()
        elif event.button.id == "cancel-button":
            self._cancel()

    def action_save(self) -> None:
        self._save()

    def action_cancel(self) -> None:
        self._cancel()

    async def _refresh_responsible(self) -> None:
        container = self.query_one("#responsible-list", Vertical)
        await container.remove_children()
        draft = self.board.form.draft
        if draft is not None:
            await container.mount_all([ResponsibleRow(member) for member in draft.responsible])

    def _save(self) -> None:
        try:
            task = self.board.submit_form()
        except ValidationError as exc:
            self.notify(escape(str(exc)), title="Cannot save task", severity="error")
            self.query_one("#title-input", Input).focus()
            return
        except TaskBoardError as exc:
            self.notify(escape(str(exc)), title="Cannot save task", severity="error")
            self._cancel()
            return
        self.dismiss(task)

    def _cancel(self) -> None:
        if self.board.form_is_open:
            self.board.cancel_modal()
        self.dismiss(None)
