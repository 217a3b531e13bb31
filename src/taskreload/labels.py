"""Display labels for task fields."""

from __future__ import annotations

from datetime import datetime, tzinfo

STATUS_LABELS = {
    "pending": "Ожидает",
    "in_progress": "В работе",
    "completed": "Завершено",
    "cancelled": "Отменено",
}

PRIORITY_LABELS = {
    "low": "Низкий",
    "medium": "Средний",
    "high": "Высокий",
}


def status_label(status: str) -> str:
    """Localized status name; unknown values are returned unchanged."""
    return STATUS_LABELS.get(status, status)


def priority_label(priority: str) -> str:
    """Localized priority name; unknown values are returned unchanged."""
    return PRIORITY_LABELS.get(priority, priority)


def format_date(value: datetime | None, tz: tzinfo | None = None) -> str:
    """Short ru-RU date (``dd.mm.yyyy``) in the viewer's timezone.

    ``tz`` defaults to the local timezone. Naive values are taken as local time.
    """
    if value is None:
        return ""
    return value.astimezone(tz).strftime("%d.%m.%Y")
