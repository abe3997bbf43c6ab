from pathlib import Path

import pytest

from taskboard.config import ConfigLoader
from taskboard.errors import ConfigError, InvalidTransition, ValidationError
from taskboard.state.board import BoardView, TaskBoard
from taskboard.state.flow import DeleteConfirmOpen, FormOpen, Idle
from taskboard.state.form import FormField, FormMode
from taskboard.state.tasks import IdPolicy, Task

from .helpers import make_draft


def _titles(view: BoardView):
    return [task.title for task in view.tasks]


def test_initial_view(board) -> None:
    view = board.view()

    assert _titles(view) == ["Tarea 1", "Tarea 2"]
    assert view.total == 2
    assert view.modal == Idle()
    assert view.draft is None
    assert view.form_mode is None
    assert view.delete_target is None
    assert view.search_query == ""
    assert view.roster == ("Usuario 1", "Usuario 2", "Usuario 3")


def test_create_flow_notifies_and_recomputes(board) -> None:
    views = []
    board.subscribe(views.append)

    board.open_create()
    board.set_field(FormField.TITLE, "Tarea 3")
    board.add_responsible("Usuario 1")
    board.add_responsible("Usuario 1")
    task = board.submit_form()

    assert task.id == 3
    assert views[0].modal == FormOpen(FormMode.CREATE)
    assert views[1].draft.title == "Tarea 3"
    assert views[-1].modal == Idle()
    assert _titles(views[-1]) == ["Tarea 1", "Tarea 2", "Tarea 3"]
    # The duplicate add changed nothing, so no extra frame was pushed.
    assert len(views) == 4


def test_edit_scenario_updates_only_target(board, seed_tasks) -> None:
    board.open_edit(2)
    assert board.view().draft.title == "Tarea 2"

    board.set_field("title", "New")
    board.submit_form()

    tasks = board.store.list()
    assert [task.id for task in tasks] == [1, 2]
    assert tasks[0] == seed_tasks[0]
    assert tasks[1].title == "New"


def test_search_filters_and_clears(board) -> None:
    board.set_search_query("tarea 1")
    assert _titles(board.view()) == ["Tarea 1"]

    board.clear_filter()
    view = board.view()
    assert view.search_query == ""
    assert _titles(view) == ["Tarea 1", "Tarea 2"]


def test_filter_follows_store_mutations(board) -> None:
    board.set_search_query("tarea")
    board.open_create()
    board.set_field("title", "Otra tarea")
    board.submit_form()
    board.open_create()
    board.set_field("title", "Unrelated")
    board.submit_form()

    assert _titles(board.view()) == ["Tarea 1", "Tarea 2", "Otra tarea"]
    assert board.view().total == 4

    board.request_delete(1)
    board.confirm_delete()

    assert _titles(board.view()) == ["Tarea 2", "Otra tarea"]


def test_delete_needs_confirmation(board, seed_tasks) -> None:
    board.request_delete(1)
    view = board.view()
    assert view.modal == DeleteConfirmOpen(1)
    assert view.delete_target == 1
    assert board.delete_target == 1

    board.cancel_modal()

    assert board.view().modal == Idle()
    assert board.store.list() == seed_tasks


def test_view_draft_is_a_copy(board) -> None:
    board.open_create()
    view = board.view()
    view.draft.responsible.append("Usuario 1")

    assert board.form.draft.responsible == []


def test_rejected_submit_keeps_form(board) -> None:
    board.open_create()

    with pytest.raises(ValidationError):
        board.submit_form()

    assert board.form_is_open
    assert board.view().total == 2


def test_invalid_transition_does_not_notify(board) -> None:
    views = []
    board.subscribe(views.append)
    board.open_create()

    with pytest.raises(InvalidTransition):
        board.request_delete(1)

    assert len(views) == 1


def test_unsubscribe(board) -> None:
    views = []
    board.subscribe(views.append)
    board.unsubscribe(views.append)

    board.set_search_query("x")

    assert views == []


def test_visible_tasks_cache_tracks_store_version(board) -> None:
    first = board.visible_tasks()
    board.store.create(make_draft("Direct"))

    assert len(board.visible_tasks()) == len(first) + 1


def test_seed_tasks_must_use_roster(roster) -> None:
    with pytest.raises(ConfigError):
        TaskBoard(roster, [Task(1, "Task", responsible=["Nobody"])])


def test_seed_tasks_need_unique_ids(roster) -> None:
    with pytest.raises(ConfigError):
        TaskBoard(roster, [Task(1, "A"), Task(1, "B")])


def test_from_config(tmp_path: Path) -> None:
    config = ConfigLoader(global_dir=tmp_path / "global", project_dir=tmp_path / "project", environ={})

    board = TaskBoard.from_config(config)
    empty = TaskBoard.from_config(config, seed=False)

    assert _titles(board.view()) == ["Tarea 1", "Tarea 2"]
    assert board.store.id_policy is IdPolicy.COUNTER
    assert empty.view().tasks == ()
    assert empty.roster == ("Usuario 1", "Usuario 2", "Usuario 3")


def test_views_compare_by_value_and_are_unhashable(board) -> None:
    assert board.view() == board.view()
    with pytest.raises(TypeError):
        hash(board.view())
