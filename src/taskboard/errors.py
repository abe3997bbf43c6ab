"""Exceptions raised by the task board state model."""

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for every error the board raises."""


class TaskNotFound(TaskBoardError):
    """Raised when an operation references a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class ValidationError(TaskBoardError):
    """Raised when a draft cannot be committed or edited as requested."""


class UnknownMember(ValidationError):
    """Raised when a member outside the roster is assigned to a draft."""

    def __init__(self, member: str) -> None:
        super().__init__(f"'{member}' is not on the team roster")
        self.member = member


class FormNotOpen(TaskBoardError):
    """Raised when a draft operation runs while no form is open."""

    def __init__(self) -> None:
        super().__init__("No task form is open")


class InvalidTransition(TaskBoardError):
    """Raised when a flow event is not allowed in the current flow state."""

    def __init__(self, state: object, event: str) -> None:
        super().__init__(f"Cannot {event} while {state}")
        self.state = state
        self.event = event


class ConfigError(TaskBoardError):
    """Raised for malformed configuration values."""
