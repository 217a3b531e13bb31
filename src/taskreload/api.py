"""HTTP access to the TaskReload REST API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import pydantic
import requests

from taskreload.config import ApiConfig
from taskreload.errors import NetworkError, ServerError
from taskreload.models import Envelope, Task, TaskDraft, TaskFilter

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"
UNKNOWN_ERROR = "Неизвестная ошибка"
MALFORMED_RESPONSE = "Некорректный ответ сервера"

_task_list = pydantic.TypeAdapter(list[Task])


def build_query(task_filter: TaskFilter | None) -> str:
    """Build the query string for a listing, empty when nothing is selected."""
    if task_filter is None:
        return ""
    params = task_filter.query_params()
    if not params:
        return ""
    return "?" + urlencode(params)


def task_path(task_id: int) -> str:
    """Resource path of a single task."""
    return f"{TASKS_PATH}/{task_id}"


class TaskApi:
    """Blocking client for ``/api/tasks``.

    Every call returns the decoded envelope of a successful response or
    raises ``NetworkError``/``ServerError``.
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or ApiConfig()
        self.session = session or requests.Session()

    def list_tasks(self, task_filter: TaskFilter | None = None) -> list[Task]:
        """Fetch the task collection.

        A ``data`` value that is not a list is read as an empty collection.
        """
        envelope = self._request("GET", TASKS_PATH + build_query(task_filter))
        if not isinstance(envelope.data, list):
            logger.warning("Task list payload is %s, treating as empty", type(envelope.data).__name__)
            return []
        try:
            tasks = _task_list.validate_python(envelope.data)
        except pydantic.ValidationError as e:
            logger.warning("Task list payload failed validation: %s", e)
            raise ServerError(MALFORMED_RESPONSE) from e
        logger.debug("Loaded %d tasks", len(tasks))
        return tasks

    def get_task(self, task_id: int) -> Task:
        """Fetch a single task."""
        envelope = self._request("GET", task_path(task_id))
        try:
            return Task.model_validate(envelope.data)
        except pydantic.ValidationError as e:
            raise ServerError(MALFORMED_RESPONSE) from e

    def create_task(self, draft: TaskDraft) -> Envelope:
        return self._request("POST", TASKS_PATH, json=draft.model_dump())

    def update_task(self, task_id: int, draft: TaskDraft) -> Envelope:
        return self._request("PUT", task_path(task_id), json=draft.model_dump())

    def delete_task(self, task_id: int) -> Envelope:
        return self._request("DELETE", task_path(task_id))

    def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Envelope:
        url = self.config.base_url.rstrip("/") + path
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(
                method,
                url,
                json=json,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise NetworkError(str(e)) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)

        try:
            envelope = Envelope.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as e:
            raise ServerError(f"HTTP {response.status_code}", response.status_code) from e

        if not envelope.success:
            raise ServerError(envelope.error or UNKNOWN_ERROR, response.status_code)

        return envelope
