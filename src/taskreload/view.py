"""View binding between the client and the page it drives.

The client never touches markup directly. Everything it reads or writes on
the page goes through a ``TaskView``: the two filter selects, the task
container, and the modal with its form.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol

from taskreload.models import DEFAULT_PRIORITY, DEFAULT_STATUS

# Element ids of the host page.
ELEMENT_IDS = {
    "status_filter": "statusFilter",
    "priority_filter": "priorityFilter",
    "container": "tasksContainer",
    "modal": "taskModal",
    "modal_title": "modalTitle",
    "form": "taskForm",
    "title": "taskTitle",
    "description": "taskDescription",
    "status": "taskStatus",
    "priority": "taskPriority",
}


@dataclass
class FormValues:
    """Raw contents of the task form."""

    title: str = ""
    description: str = ""
    status: str = DEFAULT_STATUS
    priority: str = DEFAULT_PRIORITY


class TaskView(Protocol):
    """Named accessors for the page elements the client uses."""

    def status_filter(self) -> str: ...

    def priority_filter(self) -> str: ...

    def show_tasks(self, html: str) -> None: ...

    def set_modal_title(self, text: str) -> None: ...

    def show_modal(self) -> None: ...

    def hide_modal(self) -> None: ...

    def read_form(self) -> FormValues: ...

    def fill_form(self, values: FormValues) -> None: ...

    def reset_form(self) -> None: ...

    def confirm(self, message: str) -> bool: ...


def _always_confirm(message: str) -> bool:
    return True


@dataclass
class MemoryView:
    """In-process page state, used by the CLI and in tests."""

    status: str = ""
    priority: str = ""
    container_html: str = ""
    modal_title: str = ""
    modal_visible: bool = False
    form: FormValues = field(default_factory=FormValues)
    confirmer: Callable[[str], bool] = _always_confirm
    confirmations: list[str] = field(default_factory=list)

    def status_filter(self) -> str:
        return self.status

    def priority_filter(self) -> str:
        return self.priority

    def show_tasks(self, html: str) -> None:
        self.container_html = html

    def set_modal_title(self, text: str) -> None:
        self.modal_title = text

    def show_modal(self) -> None:
        self.modal_visible = True

    def hide_modal(self) -> None:
        self.modal_visible = False

    def read_form(self) -> FormValues:
        return replace(self.form)

    def fill_form(self, values: FormValues) -> None:
        self.form = replace(values)

    def reset_form(self) -> None:
        self.form = FormValues()

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirmer(message)
