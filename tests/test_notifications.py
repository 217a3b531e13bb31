"""Tests for taskreload.notifications module."""

from __future__ import annotations

import io

from rich.console import Console

from taskreload.notifications import Notifier, Toast


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _notifier(clock: FakeClock, output: io.StringIO | None = None) -> Notifier:
    return Notifier(Console(file=output or io.StringIO()), duration=3.0, clock=clock)


class TestToast:
    """Tests for Toast dataclass."""

    def test_expired(self) -> None:
        toast = Toast(message="m", kind="info", shown_at=10.0, duration=3.0)
        assert not toast.expired(12.9)
        assert toast.expired(13.0)


class TestNotifier:
    """Tests for Notifier class."""

    def test_notify_records_toast(self) -> None:
        clock = FakeClock()
        notifier = _notifier(clock)

        toast = notifier.notify("Задача создана успешно", "success")

        assert toast.shown_at == 100.0
        assert toast.duration == 3.0
        assert notifier.active() == [toast]
        assert notifier.last is toast

    def test_explicit_duration(self) -> None:
        notifier = _notifier(FakeClock())
        assert notifier.notify("m", duration=0.5).duration == 0.5

    def test_expired_toasts_removed(self) -> None:
        """Test toasts disappear once their duration has passed."""
        clock = FakeClock()
        notifier = _notifier(clock)
        first = notifier.notify("first")
        clock.now += 2
        second = notifier.notify("second")

        clock.now += 1.5
        assert notifier.active() == [second]

        clock.now += 5
        assert notifier.active() == []
        assert notifier.history == [first, second]

    def test_dismiss(self) -> None:
        notifier = _notifier(FakeClock())
        toast = notifier.notify("m")
        notifier.dismiss(toast)
        notifier.dismiss(toast)
        assert notifier.active() == []

    def test_toast_context_cleans_up(self) -> None:
        notifier = _notifier(FakeClock())
        with notifier.toast("Загрузка...") as toast:
            assert notifier.active() == [toast]
        assert notifier.active() == []

    def test_toast_context_cleans_up_on_error(self) -> None:
        notifier = _notifier(FakeClock())
        try:
            with notifier.toast("Загрузка..."):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert notifier.active() == []

    def test_prints_message(self) -> None:
        output = io.StringIO()
        notifier = _notifier(FakeClock(), output)
        notifier.notify("Ошибка: [red] not markup", "error")
        assert "Ошибка: [red] not markup" in output.getvalue()

    def test_no_history(self) -> None:
        assert _notifier(FakeClock()).last is None

    def test_notify_drops_expired(self) -> None:
        """Test showing a toast prunes the ones that already expired."""
        clock = FakeClock()
        notifier = _notifier(clock)
        old = notifier.notify("old")
        clock.now += 10
        new = notifier.notify("new")
        assert old not in notifier._live
        assert notifier._live == [new]

    def test_history_is_bounded(self) -> None:
        notifier = Notifier(
            Console(file=io.StringIO()), clock=FakeClock(), history_limit=3
        )
        for i in range(5):
            notifier.notify(f"message {i}")
        assert [t.message for t in notifier.history] == ["message 2", "message 3", "message 4"]
        assert notifier.last is not None and notifier.last.message == "message 4"
