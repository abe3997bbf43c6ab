"""Task store: the ordered collection of committed tasks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from ..errors import TaskNotFound

if TYPE_CHECKING:
    from ..utils.logger import Logger
    from .form import FormDraft


class IdPolicy(Enum):
    COUNTER = "counter"
    LENGTH_PLUS_ONE = "length-plus-one"


class Task:
    """Represents a single committed task."""

    def __init__(
        self,
        id: int,
        title: str,
        description: str = "",
        responsible: Iterable[str] = (),
    ) -> None:
        self.id = id
        self.title = title
        self.description = description
        self.responsible = tuple(responsible)

    def __repr__(self) -> str:
        return f"Task(id={self.id!r}, title={self.title!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # Fields are mutable inside the store, so tasks are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "responsible": list(self.responsible),
        }

    @staticmethod
    def from_dict(data: Dict) -> "Task":
        """Create from dictionary."""
        return Task(
            id=int(data["id"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            responsible=data.get("responsible", ()),
        )

    def copy(self) -> "Task":
        return Task(self.id, self.title, self.description, self.responsible)


@dataclass(frozen=True)
class TaskPatch:
    """Partial update for a task. ``None`` fields are left untouched."""

    title: Optional[str] = None
    description: Optional[str] = None
    responsible: Optional[Sequence[str]] = None

    @classmethod
    def from_draft(cls, draft: "FormDraft") -> "TaskPatch":
        return cls(
            title=draft.title,
            description=draft.description,
            responsible=tuple(draft.responsible),
        )


class TaskStore:
    """Holds tasks in insertion order; the only place task mutations happen."""

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        id_policy: IdPolicy = IdPolicy.COUNTER,
        logger: Optional["Logger"] = None,
    ) -> None:
        self.id_policy = id_policy
        self.logger = logger
        self._tasks: List[Task] = [task.copy() for task in tasks]
        self._last_id = max((task.id for task in self._tasks), default=0)
        self.version = 0

    def __len__(self) -> int:
        return len(self._tasks)

    def _next_id(self) -> int:
        if self.id_policy is IdPolicy.LENGTH_PLUS_ONE:
            # Legacy rule: can collide with a surviving id after a delete.
            return len(self._tasks) + 1
        self._last_id += 1
        return self._last_id

    def _matching(self, task_id: int) -> List[Task]:
        # More than one match only happens under the legacy id policy.
        return [task for task in self._tasks if task.id == task_id]

    def _touch(self) -> None:
        self.version += 1

    def create(self, draft: "FormDraft") -> Task:
        """Append a new task built from ``draft``."""
        task_id = self._next_id()
        duplicate = self.get(task_id) is not None
        task = Task(
            id=task_id,
            title=draft.title,
            description=draft.description,
            responsible=draft.responsible,
        )
        self._tasks.append(task)
        self._last_id = max(self._last_id, task_id)
        self._touch()
        if self.logger:
            if duplicate:
                self.logger.log_duplicate_id(task)
            self.logger.log_task_created(task)
        return task.copy()

    def get(self, task_id: int) -> Optional[Task]:
        """Get a copy of the first task with ``task_id``, or None."""
        task = next((t for t in self._tasks if t.id == task_id), None)
        return task.copy() if task else None

    def update(self, task_id: int, patch: TaskPatch) -> Task:
        """Apply ``patch`` in place to every task with ``task_id``.

        Positions are kept. Returns the first updated task.
        """
        matches = self._matching(task_id)
        if not matches:
            raise TaskNotFound(task_id)
        for task in matches:
            if patch.title is not None:
                task.title = patch.title
            if patch.description is not None:
                task.description = patch.description
            if patch.responsible is not None:
                task.responsible = tuple(patch.responsible)
        self._touch()
        if self.logger:
            for task in matches:
                self.logger.log_task_updated(task)
        return matches[0].copy()

    def delete(self, task_id: int) -> bool:
        """Delete every task with ``task_id``. Returns False when none had it."""
        removed = self._matching(task_id)
        if not removed:
            return False
        self._tasks = [task for task in self._tasks if task.id != task_id]
        self._touch()
        if self.logger:
            for task in removed:
                self.logger.log_task_deleted(task)
        return True

    def list(self) -> List[Task]:
        """Snapshot of all tasks in insertion order."""
        return [task.copy() for task in self._tasks]
