"""Transient notifications reporting the outcome of an action."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Literal

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)

NotificationKind = Literal["success", "error", "info"]

_STYLES = {
    "success": "green",
    "error": "red",
    "info": "cyan",
}


@dataclass
class Toast:
    """A notification shown for a fixed duration."""

    message: str
    kind: NotificationKind
    shown_at: float
    duration: float

    def expired(self, now: float) -> bool:
        return now >= self.shown_at + self.duration


class Notifier:
    """Shows toasts and forgets them once their duration has passed.

    Expired toasts are dropped whenever a toast is shown or the live set is
    read, so nothing has to be scheduled to remove them. Only the most
    recent ``history_limit`` toasts are kept in ``history``.
    """

    def __init__(
        self,
        console: Console | None = None,
        duration: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
        history_limit: int = 100,
    ) -> None:
        self.console = console or Console()
        self.duration = duration
        self.clock = clock
        self.history_limit = history_limit
        self.history: list[Toast] = []
        self._live: list[Toast] = []

    def notify(
        self,
        message: str,
        kind: NotificationKind = "info",
        duration: float | None = None,
    ) -> Toast:
        """Show a message and return its toast."""
        toast = Toast(
            message=message,
            kind=kind,
            shown_at=self.clock(),
            duration=self.duration if duration is None else duration,
        )
        self.active()
        self._live.append(toast)
        self.history.append(toast)
        del self.history[: -self.history_limit]

        if kind == "error":
            logger.info("Error notification: %s", message)
        else:
            logger.debug("Notification (%s): %s", kind, message)

        style = _STYLES.get(kind, "white")
        self.console.print(Text(message, style=style))
        return toast

    def dismiss(self, toast: Toast) -> None:
        """Remove a toast before its duration ends."""
        if toast in self._live:
            self._live.remove(toast)

    def active(self) -> list[Toast]:
        """Toasts still on screen."""
        now = self.clock()
        self._live = [t for t in self._live if not t.expired(now)]
        return list(self._live)

    @property
    def last(self) -> Toast | None:
        return self.history[-1] if self.history else None

    @contextmanager
    def toast(
        self,
        message: str,
        kind: NotificationKind = "info",
        duration: float | None = None,
    ) -> Iterator[Toast]:
        """Show a toast for the length of a block; it is dismissed on exit."""
        shown = self.notify(message, kind, duration)
        try:
            yield shown
        finally:
            self.dismiss(shown)
