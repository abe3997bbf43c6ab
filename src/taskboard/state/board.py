"""Coordinator that wires the store, form and flow to a rendering front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple, Union

from ..errors import ConfigError
from .filtering import derive_filter_view
from .flow import DeleteConfirmOpen, FlowState, FormOpen, UiFlowController
from .form import FormDraft, FormField, FormMode, FormState
from .tasks import IdPolicy, Task, TaskStore

if TYPE_CHECKING:
    from ..config import ConfigLoader
    from ..utils.logger import Logger


@dataclass(frozen=True)
class BoardView:
    """Everything the front end needs to draw one frame."""

    tasks: Tuple[Task, ...]
    total: int
    modal: FlowState
    draft: Optional[FormDraft]
    form_mode: Optional[FormMode]
    delete_target: Optional[int]
    search_query: str
    roster: Tuple[str, ...]

    # Compared field by field; holds unhashable tasks.
    __hash__ = None  # type: ignore[assignment]


Listener = Callable[[BoardView], None]


class TaskBoard:
    """Accepts user intents and keeps the filtered view in sync.

    Every intent runs to completion, then the view is recomputed and
    listeners are told if anything visible changed.
    """

    def __init__(
        self,
        roster: Sequence[str],
        tasks: Sequence[Task] = (),
        id_policy: IdPolicy = IdPolicy.COUNTER,
        logger: Optional["Logger"] = None,
    ) -> None:
        self.roster = tuple(roster)
        _check_seed_tasks(tasks, self.roster)
        self.store = TaskStore(tasks, id_policy=id_policy, logger=logger)
        self.form = FormState(self.roster)
        self.flow = UiFlowController(self.store, self.form)
        self.search_query = ""
        self._listeners: List[Listener] = []
        self._cache_key: Optional[Tuple[int, str]] = None
        self._visible: List[Task] = []
        self._last_view: Optional[BoardView] = None

    @classmethod
    def from_config(
        cls,
        config: "ConfigLoader",
        seed: bool = True,
        logger: Optional["Logger"] = None,
    ) -> "TaskBoard":
        return cls(
            roster=config.team_members(),
            tasks=config.seed_tasks() if seed else (),
            id_policy=config.id_policy(),
            logger=logger,
        )

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def visible_tasks(self) -> List[Task]:
        key = (self.store.version, self.search_query)
        if key != self._cache_key:
            self._visible = derive_filter_view(self.store.list(), self.search_query)
            self._cache_key = key
        return list(self._visible)

    def view(self) -> BoardView:
        modal = self.flow.state
        draft = self.form.draft.copy() if self.form.draft is not None else None
        return BoardView(
            tasks=tuple(self.visible_tasks()),
            total=len(self.store),
            modal=modal,
            draft=draft,
            form_mode=self.form.mode,
            delete_target=modal.task_id if isinstance(modal, DeleteConfirmOpen) else None,
            search_query=self.search_query,
            roster=self.roster,
        )

    def _changed(self) -> None:
        view = self.view()
        if view == self._last_view:
            return
        self._last_view = view
        for listener in list(self._listeners):
            listener(view)

    # ------------------------------------------------------------------ #
    # Intents
    # ------------------------------------------------------------------ #
    def open_create(self) -> None:
        self.flow.open_create()
        self._changed()

    def open_edit(self, task_id: int) -> None:
        self.flow.open_edit(task_id)
        self._changed()

    def request_delete(self, task_id: int) -> None:
        self.flow.request_delete(task_id)
        self._changed()

    def cancel_modal(self) -> None:
        self.flow.cancel()
        self._changed()

    def submit_form(self) -> Task:
        task = self.flow.submit()
        self._changed()
        return task

    def confirm_delete(self) -> int:
        task_id = self.flow.confirm_delete()
        self._changed()
        return task_id

    def set_field(self, name: Union[FormField, str], value: str) -> None:
        self.form.set_field(name, value)
        self._changed()

    def add_responsible(self, member: str) -> bool:
        added = self.form.add_responsible(member)
        self._changed()
        return added

    def remove_responsible(self, member: str) -> bool:
        removed = self.form.remove_responsible(member)
        self._changed()
        return removed

    def set_search_query(self, text: str) -> None:
        self.search_query = text
        self._changed()

    def clear_filter(self) -> None:
        self.set_search_query("")

    @property
    def form_is_open(self) -> bool:
        return isinstance(self.flow.state, FormOpen)

    @property
    def delete_target(self) -> Optional[int]:
        state = self.flow.state
        return state.task_id if isinstance(state, DeleteConfirmOpen) else None


def _check_seed_tasks(tasks: Sequence[Task], roster: Tuple[str, ...]) -> None:
    seen = set()
    for task in tasks:
        if task.id in seen:
            raise ConfigError(f"Duplicate seed task id: {task.id}")
        seen.add(task.id)
        if not task.title.strip():
            raise ConfigError(f"Seed task {task.id} has no title")
        unknown = [m for m in task.responsible if m not in roster]
        if unknown:
            raise ConfigError(f"Seed task {task.id} references unknown members: {', '.join(unknown)}")
        if len(set(task.responsible)) != len(task.responsible):
            raise ConfigError(f"Seed task {task.id} lists a member twice")
