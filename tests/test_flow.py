import pytest

from taskboard.errors import InvalidTransition, TaskNotFound, ValidationError
from taskboard.state.flow import DeleteConfirmOpen, FormOpen, Idle, UiFlowController
from taskboard.state.form import FormMode, FormState
from taskboard.state.tasks import TaskStore


@pytest.fixture()
def flow(roster, seed_tasks) -> UiFlowController:
    return UiFlowController(TaskStore(seed_tasks), FormState(roster))


def _open_modals(flow: UiFlowController) -> int:
    return sum(isinstance(flow.state, cls) for cls in (FormOpen, DeleteConfirmOpen))


def test_starts_idle(flow) -> None:
    assert flow.state == Idle()
    assert flow.is_idle


def test_create_round_trip(flow) -> None:
    flow.open_create()
    assert flow.state == FormOpen(FormMode.CREATE)

    flow.form.set_field("title", "Tarea 3")
    flow.form.add_responsible("Usuario 2")
    task = flow.submit()

    assert flow.is_idle
    assert flow.form.draft is None
    assert task.id == 3
    assert [t.title for t in flow.store.list()] == ["Tarea 1", "Tarea 2", "Tarea 3"]
    assert flow.store.get(3).responsible == ("Usuario 2",)


def test_edit_updates_only_target(flow, seed_tasks) -> None:
    flow.open_edit(2)
    assert flow.state == FormOpen(FormMode.EDIT)

    flow.form.set_field("title", "New")
    flow.submit()

    tasks = flow.store.list()
    assert [t.id for t in tasks] == [1, 2]
    assert tasks[0] == seed_tasks[0]
    assert tasks[1].title == "New"
    assert tasks[1].description == seed_tasks[1].description
    assert tasks[1].responsible == seed_tasks[1].responsible


def test_editing_draft_does_not_touch_committed_task(flow) -> None:
    flow.open_edit(2)
    flow.form.remove_responsible("Usuario 2")
    flow.form.set_field("title", "Draft only")

    assert flow.store.get(2).responsible == ("Usuario 2", "Usuario 3")
    flow.cancel()
    assert flow.store.get(2).title == "Tarea 2"


def test_cancel_form_discards_draft(flow) -> None:
    flow.open_create()
    flow.form.set_field("title", "Throwaway")

    flow.cancel()

    assert flow.is_idle
    assert flow.form.draft is None
    assert len(flow.store) == 2


def test_invalid_submit_keeps_form_open(flow) -> None:
    flow.open_create()

    with pytest.raises(ValidationError):
        flow.submit()

    assert flow.state == FormOpen(FormMode.CREATE)
    assert flow.form.is_open
    assert len(flow.store) == 2


def test_request_delete_then_cancel_leaves_store(flow, seed_tasks) -> None:
    flow.request_delete(1)
    assert flow.state == DeleteConfirmOpen(1)

    flow.cancel()

    assert flow.is_idle
    assert flow.store.list() == seed_tasks


def test_confirm_delete_removes_task(flow) -> None:
    flow.request_delete(1)

    assert flow.confirm_delete() == 1

    assert flow.is_idle
    assert [t.id for t in flow.store.list()] == [2]


def test_missing_targets_raise_and_stay_idle(flow) -> None:
    with pytest.raises(TaskNotFound):
        flow.open_edit(99)
    with pytest.raises(TaskNotFound):
        flow.request_delete(99)

    assert flow.is_idle
    assert flow.form.draft is None


def test_no_direct_path_between_modals(flow) -> None:
    flow.open_create()
    with pytest.raises(InvalidTransition):
        flow.request_delete(1)
    with pytest.raises(InvalidTransition):
        flow.confirm_delete()
    with pytest.raises(InvalidTransition):
        flow.open_edit(1)
    assert flow.state == FormOpen(FormMode.CREATE)
    flow.cancel()

    flow.request_delete(2)
    with pytest.raises(InvalidTransition):
        flow.open_create()
    with pytest.raises(InvalidTransition):
        flow.submit()
    assert flow.state == DeleteConfirmOpen(2)


def test_idle_rejects_closing_events(flow) -> None:
    for event in (flow.cancel, flow.submit, flow.confirm_delete):
        with pytest.raises(InvalidTransition):
            event()
    assert flow.is_idle


def test_at_most_one_modal_over_a_session(flow) -> None:
    steps = [
        flow.open_create,
        lambda: flow.form.set_field("title", "A"),
        flow.submit,
        lambda: flow.request_delete(1),
        flow.open_create,
        flow.cancel,
        lambda: flow.open_edit(2),
        lambda: flow.request_delete(2),
        flow.cancel,
        lambda: flow.request_delete(3),
        flow.confirm_delete,
    ]
    for step in steps:
        try:
            step()
        except InvalidTransition:
            pass
        assert _open_modals(flow) <= 1

    assert [t.id for t in flow.store.list()] == [1, 2]
