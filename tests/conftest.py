from __future__ import annotations

from typing import List

import pytest

from taskboard.state.board import TaskBoard
from taskboard.state.tasks import Task

ROSTER = ["Usuario 1", "Usuario 2", "Usuario 3"]


@pytest.fixture()
def roster() -> List[str]:
    return list(ROSTER)


@pytest.fixture()
def seed_tasks() -> List[Task]:
    """The two tasks a fresh board starts with."""
    return [
        Task(1, "Tarea 1", "Descripción de la tarea 1", ["Usuario 1"]),
        Task(2, "Tarea 2", "Descripción de la tarea 2", ["Usuario 2", "Usuario 3"]),
    ]


@pytest.fixture()
def board(roster: List[str], seed_tasks: List[Task]) -> TaskBoard:
    return TaskBoard(roster, seed_tasks)
