"""Task list client: listing, the create/edit modal, and deletion.

Architecture:
    ClientState - the cached task list and the modal state
    TaskListClient - actions triggered from the page, dispatched by name

Every mutation is followed by a full reload from the server; the client
never patches its cached list in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from taskreload.api import TaskApi
from taskreload.errors import NetworkError, ServerError, TaskClientError, ValidationError
from taskreload.models import Task, TaskDraft, TaskFilter
from taskreload.notifications import Notifier
from taskreload.render import render_tasks
from taskreload.view import FormValues, TaskView

logger = logging.getLogger(__name__)

CREATE_TITLE = "Новая задача"
EDIT_TITLE = "Редактировать задачу"
DELETE_CONFIRMATION = "Вы уверены, что хотите удалить эту задачу?"
TITLE_REQUIRED = "Название задачи обязательно"
TASKS_UNAVAILABLE = "Ошибка: список задач недоступен"


class ModalState(Enum):
    """States of the shared task form."""

    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


@dataclass
class ClientState:
    """Everything the client remembers between actions."""

    tasks: list[Task] = field(default_factory=list)
    editing_task_id: int | None = None
    modal: ModalState = ModalState.CLOSED


class TaskListClient:
    """Drives a ``TaskView`` from the TaskReload API.

    Failures never escape an action: each one is reported as a notification
    and leaves the client ready for the next action.
    """

    def __init__(
        self,
        api: TaskApi,
        view: TaskView,
        notifier: Notifier | None = None,
        state: ClientState | None = None,
    ) -> None:
        self.api = api
        self.view = view
        self.notifier = notifier or Notifier()
        self.state = state or ClientState()
        self._actions: dict[str, Callable[..., Any]] = {
            "filter": self.load_tasks,
            "refresh": self.load_tasks,
            "open-create": self.open_create_modal,
            "edit": self.edit_task,
            "delete": self.delete_task,
            "close": self.close_modal,
            "submit": self.submit_form,
            "click-outside": self.click_outside,
        }

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def fetch_tasks(self, status: str | None = None, priority: str | None = None) -> list[Task]:
        """Replace the cached list with the server's, for the given filters.

        On failure the cached list is cleared rather than left stale.
        """
        task_filter = TaskFilter(status=status or None, priority=priority or None)
        try:
            self.state.tasks = self.api.list_tasks(task_filter)
        except (NetworkError, ServerError) as e:
            self.notifier.notify(f"Ошибка загрузки задач: {e}", "error")
            self.state.tasks = []

        self.render()
        return self.state.tasks

    def load_tasks(self) -> list[Task]:
        """Fetch with the filters currently selected on the page."""
        return self.fetch_tasks(self.view.status_filter(), self.view.priority_filter())

    def render(self) -> str:
        """Rebuild the task container from the cached list."""
        if not isinstance(self.state.tasks, list):
            self.state.tasks = []
        html = render_tasks(self.state.tasks)
        self.view.show_tasks(html)
        return html

    # -------------------------------------------------------------------------
    # Modal
    # -------------------------------------------------------------------------

    def open_create_modal(self) -> None:
        self.state.editing_task_id = None
        self.view.set_modal_title(CREATE_TITLE)
        self.view.reset_form()
        self.view.show_modal()
        self.state.modal = ModalState.CREATE

    def edit_task(self, task_id: int) -> None:
        """Open the modal filled from a cached task.

        Unknown ids are ignored.
        """
        if not isinstance(self.state.tasks, list):
            self.notifier.notify(TASKS_UNAVAILABLE, "error")
            return

        task = self._find_task(task_id)
        if task is None:
            logger.debug("edit_task: no cached task with id %s", task_id)
            return

        self.state.editing_task_id = task_id
        self.view.set_modal_title(EDIT_TITLE)
        self.view.fill_form(
            FormValues(
                title=task.title,
                description=task.description or "",
                status=task.status,
                priority=task.priority,
            )
        )
        self.view.show_modal()
        self.state.modal = ModalState.EDIT

    def close_modal(self) -> None:
        self.view.hide_modal()
        self.state.editing_task_id = None
        self.state.modal = ModalState.CLOSED

    def click_outside(self) -> None:
        """A click on the backdrop closes an open modal."""
        if self.state.modal is not ModalState.CLOSED:
            self.close_modal()

    def submit_form(self) -> Task | None:
        """Create or update a task from the form.

        Returns the task the server sent back, or None when the submission
        was rejected or failed. On failure the modal stays open with the
        entered values.
        """
        try:
            draft = self._read_draft()
        except ValidationError as e:
            self.notifier.notify(str(e), "error")
            return None

        editing_id = self.state.editing_task_id
        try:
            if editing_id is not None:
                envelope = self.api.update_task(editing_id, draft)
            else:
                envelope = self.api.create_task(draft)
        except TaskClientError as e:
            self.notifier.notify(f"Ошибка: {e}", "error")
            return None

        if editing_id is not None:
            self.notifier.notify("Задача обновлена успешно", "success")
        else:
            self.notifier.notify("Задача создана успешно", "success")

        self.close_modal()
        self.load_tasks()
        return _task_or_none(envelope.data)

    # -------------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------------

    def delete_task(self, task_id: int) -> bool:
        """Delete a task after the user confirms. Returns True if deleted."""
        if not isinstance(self.state.tasks, list):
            self.notifier.notify(TASKS_UNAVAILABLE, "error")
            return False

        if not self.view.confirm(DELETE_CONFIRMATION):
            return False

        try:
            self.api.delete_task(task_id)
        except TaskClientError as e:
            self.notifier.notify(f"Ошибка удаления: {e}", "error")
            return False

        self.notifier.notify("Задача удалена успешно", "success")
        self.load_tasks()
        return True

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: str, *args: Any) -> Any:
        """Run a page action by name, e.g. ``dispatch("edit", 5)``."""
        handler = self._actions[action]
        logger.debug("dispatch %s%r", action, args)
        return handler(*args)

    @property
    def actions(self) -> list[str]:
        return list(self._actions)

    def _find_task(self, task_id: int) -> Task | None:
        for task in self.state.tasks:
            if task.id == task_id:
                return task
        return None

    def _read_draft(self) -> TaskDraft:
        values = self.view.read_form()
        title = values.title.strip()
        if not title:
            raise ValidationError(TITLE_REQUIRED)
        return TaskDraft(
            title=title,
            description=values.description.strip(),
            status=values.status,
            priority=values.priority,
        )


def _task_or_none(data: Any) -> Task | None:
    if not isinstance(data, dict):
        return None
    try:
        return Task.model_validate(data)
    except ValueError:
        return None
