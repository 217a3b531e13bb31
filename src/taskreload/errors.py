"""Error types raised by the taskreload client."""

from __future__ import annotations


class TaskClientError(Exception):
    """Base class for failures of a single client action."""


class NetworkError(TaskClientError):
    """The request never produced a response (refused, timed out, reset)."""


class ServerError(TaskClientError):
    """The server answered with ``success: false`` or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(TaskClientError):
    """The form was rejected locally before any request was sent."""
