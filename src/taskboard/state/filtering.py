"""Derived, read-only view of the task list."""

from __future__ import annotations

from typing import Iterable, List

from .tasks import Task


def derive_filter_view(tasks: Iterable[Task], query: str) -> List[Task]:
    """Tasks whose title contains ``query`` (case-insensitive), in order.

    A blank query returns every task.
    """
    if not query.strip():
        return list(tasks)
    needle = query.lower()
    return [task for task in tasks if needle in task.title.lower()]
