"""Tests for taskreload.models module."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskreload.models import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    Envelope,
    Task,
    TaskDraft,
    TaskFilter,
)


class TestTask:
    """Tests for Task model."""

    def test_from_server_payload(self, sample_tasks_data: list[dict]) -> None:
        """Test parsing a task as the server sends it."""
        task = Task.model_validate(sample_tasks_data[0])
        assert task.id == 5
        assert task.title == "Write report"
        assert task.status == "in_progress"
        assert task.created_at == datetime(2026, 10, 19, 11, 0, tzinfo=timezone.utc)

    def test_defaults(self) -> None:
        """Test optional fields get their defaults."""
        task = Task(id=1, title="Minimal")
        assert task.description == ""
        assert task.status == DEFAULT_STATUS == "pending"
        assert task.priority == DEFAULT_PRIORITY == "medium"
        assert task.created_at is None

    def test_null_description(self) -> None:
        """Test a JSON null description reads as empty."""
        task = Task.model_validate({"id": 1, "title": "T", "description": None})
        assert task.description == ""

    def test_unknown_values_preserved(self) -> None:
        """Test unknown enum values and extra fields survive."""
        task = Task.model_validate(
            {"id": 1, "title": "T", "status": "blocked", "priority": "urgent", "owner": "kim"}
        )
        assert task.status == "blocked"
        assert task.priority == "urgent"
        assert task.model_dump()["owner"] == "kim"

    def test_missing_id_rejected(self) -> None:
        """Test that a task without an id is rejected."""
        with pytest.raises(Exception):
            Task.model_validate({"title": "No id"})


class TestTaskDraft:
    """Tests for TaskDraft model."""

    def test_body_shape(self) -> None:
        """Test the request body has exactly the four form fields."""
        draft = TaskDraft(title="Buy milk", priority="low")
        assert draft.model_dump() == {
            "title": "Buy milk",
            "description": "",
            "status": "pending",
            "priority": "low",
        }


class TestEnvelope:
    """Tests for Envelope model."""

    def test_failure_envelope(self) -> None:
        envelope = Envelope.model_validate({"success": False, "error": "Задача не найдена"})
        assert envelope.success is False
        assert envelope.error == "Задача не найдена"
        assert envelope.data is None

    def test_list_envelope(self) -> None:
        envelope = Envelope.model_validate(
            {"success": True, "data": [], "total": 0, "message": "Задачи получены успешно"}
        )
        assert envelope.success is True
        assert envelope.data == []
        assert envelope.total == 0


class TestTaskFilter:
    """Tests for TaskFilter.query_params."""

    def test_no_filters(self) -> None:
        assert TaskFilter().query_params() == []

    def test_empty_strings_ignored(self) -> None:
        assert TaskFilter(status="", priority="").query_params() == []

    def test_status_only(self) -> None:
        assert TaskFilter(status="completed").query_params() == [("status", "completed")]

    def test_priority_only(self) -> None:
        assert TaskFilter(priority="high").query_params() == [("priority", "high")]

    def test_both_status_first(self) -> None:
        assert TaskFilter(priority="low", status="pending").query_params() == [
            ("status", "pending"),
            ("priority", "low"),
        ]
