"""Task event logger."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..state.tasks import Task


class Logger:
    """Appends task events as JSON lines to ``<log_dir>/tasks.log``.

    A logger built without a directory records nothing.
    """

    def __init__(self, log_dir: Optional[Path] = None) -> None:
        self.log_dir = log_dir
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def enabled(self) -> bool:
        return self.log_dir is not None

    @property
    def path(self) -> Optional[Path]:
        return self.log_dir / "tasks.log" if self.log_dir is not None else None

    def _write(self, payload: dict) -> None:
        if self.log_dir is None:
            return
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), **payload}
        with self.path.open("a", encoding="utf-8") as fp:
            fp.write(json.dumps(entry, ensure_ascii=False) + "\n")

    def log_task_created(self, task: Task) -> None:
        self._write({"event": "created", **task.to_dict()})

    def log_task_updated(self, task: Task) -> None:
        self._write({"event": "updated", **task.to_dict()})

    def log_task_deleted(self, task: Task) -> None:
        self._write({"event": "deleted", "task_id": task.id, "title": task.title})

    def log_duplicate_id(self, task: Task) -> None:
        self._write({"event": "duplicate_id", "task_id": task.id, "title": task.title})
