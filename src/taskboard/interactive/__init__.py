"""Textual front end for the task board."""

from .app import TaskBoardApp

__all__ = ["TaskBoardApp"]
