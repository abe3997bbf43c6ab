"""Taskboard - single-view terminal task manager."""

__version__ = "0.1.0"
__author__ = "Taskboard Contributors"

from .config import Config
from .errors import TaskBoardError, TaskNotFound, ValidationError
from .state.board import TaskBoard
from .state.tasks import Task, TaskStore

__all__ = ["Config", "TaskBoardError", "TaskNotFound", "ValidationError", "TaskBoard", "Task", "TaskStore"]
