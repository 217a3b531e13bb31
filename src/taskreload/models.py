"""Task records and the response envelope of the TaskReload API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

STATUSES = ("pending", "in_progress", "completed", "cancelled")
PRIORITIES = ("low", "medium", "high")

DEFAULT_STATUS = "pending"
DEFAULT_PRIORITY = "medium"


class Task(BaseModel):
    """A task as stored by the server.

    Status and priority are kept as plain strings so values the server adds
    later still load and display.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    description: str = ""
    status: str = DEFAULT_STATUS
    priority: str = DEFAULT_PRIORITY
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value


class TaskDraft(BaseModel):
    """Request body for creating or updating a task."""

    title: str
    description: str = ""
    status: str = DEFAULT_STATUS
    priority: str = DEFAULT_PRIORITY


class Envelope(BaseModel):
    """The ``{success, data?, error?}`` wrapper of every API response."""

    success: bool = False
    data: Any = None
    error: str | None = None
    message: str | None = None
    total: int | None = None


class TaskFilter(BaseModel):
    """Optional status/priority selection for listing tasks."""

    status: str | None = None
    priority: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        """Return the non-empty filters, status first."""
        params: list[tuple[str, str]] = []
        if self.status:
            params.append(("status", self.status))
        if self.priority:
            params.append(("priority", self.priority))
        return params
