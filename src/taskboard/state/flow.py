"""Modal flow: which dialog is open and what each user action commits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import InvalidTransition, TaskNotFound
from .form import CreateIntent, FormMode, FormState
from .tasks import Task, TaskPatch, TaskStore


@dataclass(frozen=True)
class Idle:
    def __str__(self) -> str:
        return "idle"


@dataclass(frozen=True)
class FormOpen:
    mode: FormMode

    def __str__(self) -> str:
        return f"{self.mode.value} form is open"


@dataclass(frozen=True)
class DeleteConfirmOpen:
    task_id: int

    def __str__(self) -> str:
        return f"delete confirmation for task {self.task_id} is open"


FlowState = Union[Idle, FormOpen, DeleteConfirmOpen]

IDLE = Idle()


class UiFlowController:
    """State machine over Idle, FormOpen and DeleteConfirmOpen.

    The current state is a single value, so two modals can never be open at
    once. Events that do not apply to the current state raise
    ``InvalidTransition`` and change nothing.
    """

    def __init__(self, store: TaskStore, form: FormState) -> None:
        self.store = store
        self.form = form
        self.state: FlowState = IDLE

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    def _expect(self, state_type: type, event: str) -> None:
        if not isinstance(self.state, state_type):
            raise InvalidTransition(self.state, event)

    def open_create(self) -> None:
        self._expect(Idle, "open the create form")
        self.form.open_for_create()
        self.state = FormOpen(FormMode.CREATE)

    def open_edit(self, task_id: int) -> None:
        self._expect(Idle, "open the edit form")
        task = self.store.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        self.form.open_for_edit(task)
        self.state = FormOpen(FormMode.EDIT)

    def submit(self) -> Task:
        """Commit the draft and close the form."""
        self._expect(FormOpen, "submit the form")
        intent = self.form.submit()
        if isinstance(intent, CreateIntent):
            task = self.store.create(intent.draft)
        else:
            task = self.store.update(intent.task_id, TaskPatch.from_draft(intent.draft))
        self.form.discard()
        self.state = IDLE
        return task

    def request_delete(self, task_id: int) -> None:
        self._expect(Idle, "request a delete")
        if self.store.get(task_id) is None:
            raise TaskNotFound(task_id)
        self.state = DeleteConfirmOpen(task_id)

    def confirm_delete(self) -> int:
        """Delete the pending task and return its id."""
        self._expect(DeleteConfirmOpen, "confirm a delete")
        task_id = self.state.task_id
        self.store.delete(task_id)
        self.state = IDLE
        return task_id

    def cancel(self) -> None:
        """Close whichever modal is open without committing anything."""
        if self.is_idle:
            raise InvalidTransition(self.state, "cancel")
        if isinstance(self.state, FormOpen):
            self.form.discard()
        self.state = IDLE
