"""Shared fixtures for taskreload tests."""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from taskreload.api import TaskApi
from taskreload.client import TaskListClient
from taskreload.config import ApiConfig
from taskreload.notifications import Notifier
from taskreload.view import MemoryView

BASE_URL = "http://tasks.test"


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def sample_tasks_data() -> list[dict[str, Any]]:
    """Task records as the server sends them."""
    return [
        {
            "id": 5,
            "title": "Write report",
            "description": "Quarterly numbers",
            "status": "in_progress",
            "priority": "medium",
            "created_at": "2026-10-19T11:00:00Z",
            "updated_at": "2026-10-19T11:30:00Z",
        },
        {
            "id": 7,
            "title": "Call plumber",
            "description": "",
            "status": "pending",
            "priority": "high",
            "created_at": "2026-03-02T18:05:00Z",
            "updated_at": "2026-03-02T18:05:00Z",
        },
    ]


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Build a fake ``requests.Response`` carrying a JSON body."""

    def _make(payload: Any = None, status_code: int = 200, invalid_json: bool = False) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        if invalid_json:
            response.json.side_effect = ValueError("Expecting value")
        else:
            response.json.return_value = payload
        return response

    return _make


@pytest.fixture
def session() -> MagicMock:
    """Fake HTTP session; queue responses on ``session.request.side_effect``."""
    return MagicMock()


@pytest.fixture
def api(session: MagicMock) -> TaskApi:
    return TaskApi(ApiConfig(base_url=BASE_URL, timeout_seconds=5), session=session)


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def notifier(console_output: io.StringIO) -> Notifier:
    """Notifier writing to a buffer with a clock frozen at zero."""
    return Notifier(Console(file=console_output, width=120), duration=3.0, clock=lambda: 0.0)


@pytest.fixture
def view() -> MemoryView:
    return MemoryView()


@pytest.fixture
def client(api: TaskApi, view: MemoryView, notifier: Notifier) -> TaskListClient:
    return TaskListClient(api=api, view=view, notifier=notifier)


@pytest.fixture
def requested(session: MagicMock) -> Callable[[], list[tuple[str, str]]]:
    """(method, url) of every request the session has received so far."""

    def _requested() -> list[tuple[str, str]]:
        return [(c.args[0], c.args[1]) for c in session.request.call_args_list]

    return _requested
