"""Draft state for the create/edit task form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

from ..errors import FormNotOpen, UnknownMember, ValidationError
from .tasks import Task


class FormField(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"


class FormMode(Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class FormDraft:
    """The in-progress values of the task form."""

    title: str = ""
    description: str = ""
    responsible: List[str] = field(default_factory=list)

    @classmethod
    def from_task(cls, task: Task) -> "FormDraft":
        return cls(
            title=task.title,
            description=task.description,
            responsible=list(task.responsible),
        )

    def copy(self) -> "FormDraft":
        return FormDraft(self.title, self.description, list(self.responsible))


@dataclass(frozen=True)
class CreateIntent:
    draft: FormDraft


@dataclass(frozen=True)
class UpdateIntent:
    task_id: int
    draft: FormDraft


Intent = Union[CreateIntent, UpdateIntent]


class FormState:
    """Owns the draft and the edit target while a form is open."""

    def __init__(self, roster: Sequence[str]) -> None:
        self.roster = tuple(roster)
        self.draft: Optional[FormDraft] = None
        self.edit_target: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    @property
    def mode(self) -> Optional[FormMode]:
        if self.draft is None:
            return None
        return FormMode.CREATE if self.edit_target is None else FormMode.EDIT

    def _require_draft(self) -> FormDraft:
        if self.draft is None:
            raise FormNotOpen()
        return self.draft

    def open_for_create(self) -> None:
        self.draft = FormDraft()
        self.edit_target = None

    def open_for_edit(self, task: Task) -> None:
        self.draft = FormDraft.from_task(task)
        self.edit_target = task.id

    def set_field(self, name: Union[FormField, str], value: str) -> None:
        """Set ``title`` or ``description`` on the draft."""
        draft = self._require_draft()
        try:
            form_field = FormField(name)
        except ValueError:
            raise ValidationError(f"Unknown form field: {name}") from None
        if form_field is FormField.TITLE:
            draft.title = value
        else:
            draft.description = value

    def add_responsible(self, member: str) -> bool:
        """Assign ``member``. Returns False if already assigned."""
        draft = self._require_draft()
        if member not in self.roster:
            raise UnknownMember(member)
        if member in draft.responsible:
            return False
        draft.responsible.append(member)
        return True

    def remove_responsible(self, member: str) -> bool:
        """Unassign ``member``. Returns False if it was not assigned."""
        draft = self._require_draft()
        if member not in draft.responsible:
            return False
        draft.responsible.remove(member)
        return True

    def submit(self) -> Intent:
        """Validate the draft and describe the commit it calls for."""
        draft = self._require_draft()
        if not draft.title.strip():
            raise ValidationError("Title is required")
        if self.edit_target is None:
            return CreateIntent(draft.copy())
        return UpdateIntent(self.edit_target, draft.copy())

    def discard(self) -> None:
        self.draft = None
        self.edit_target = None
