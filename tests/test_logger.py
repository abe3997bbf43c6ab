import json
from pathlib import Path

from taskboard.state.tasks import TaskPatch, TaskStore
from taskboard.utils.logger import Logger

from .helpers import make_draft


def _events(logger: Logger):
    return [json.loads(line) for line in logger.path.read_text(encoding="utf-8").splitlines()]


def test_store_mutations_are_logged(tmp_path: Path) -> None:
    logger = Logger(tmp_path / "logs")
    store = TaskStore(logger=logger)

    task = store.create(make_draft("Tarea", responsible=["Usuario 1"]))
    store.update(task.id, TaskPatch(title="Tarea editada"))
    store.delete(task.id)
    store.delete(task.id)

    entries = _events(logger)
    assert [entry["event"] for entry in entries] == ["created", "updated", "deleted"]
    assert entries[0]["responsible"] == ["Usuario 1"]
    assert entries[1]["title"] == "Tarea editada"
    assert entries[2]["task_id"] == task.id
    assert all("timestamp" in entry for entry in entries)


def test_logger_without_dir_is_inert(tmp_path: Path) -> None:
    logger = Logger()
    store = TaskStore(logger=logger)

    store.create(make_draft("Tarea"))

    assert not logger.enabled
    assert logger.path is None
    assert list(tmp_path.iterdir()) == []
