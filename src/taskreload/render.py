"""HTML rendering of task lists."""

from __future__ import annotations

from collections.abc import Sequence

from jinja2 import BaseLoader, Environment
from markupsafe import Markup

from taskreload.labels import (
    PRIORITY_LABELS,
    STATUS_LABELS,
    format_date,
    priority_label,
    status_label,
)
from taskreload.models import Task, TaskFilter

PAGE_TITLE = "TaskReload - Управление задачами"

EMPTY_STATE_TEMPLATE = """\
<div class="empty-state">
    <i class="fas fa-clipboard-list"></i>
    <h3>Нет задач</h3>
    <p>Создайте первую задачу, чтобы начать работу</p>
</div>
"""

TASKS_TEMPLATE = """\
{% for task in tasks -%}
<div class="task-card" data-task-id="{{ task.id }}">
    <div class="task-header">
        <div>
            <div class="task-title">{{ task.title }}</div>
            <div class="task-description">{{ task.description or '' }}</div>
        </div>
    </div>
    <div class="task-meta">
        <span class="badge badge-status">{{ task.status | status_label }}</span>
        <span class="badge badge-priority {{ task.priority }}">{{ task.priority | priority_label }}</span>
        <small class="task-date">{{ task.created_at | format_date }}</small>
    </div>
    <div class="task-actions">
        <button class="btn btn-primary btn-sm" onclick="editTask({{ task.id }})">
            <i class="fas fa-edit"></i> Изменить
        </button>
        <button class="btn btn-danger btn-sm" onclick="deleteTask({{ task.id }})">
            <i class="fas fa-trash"></i> Удалить
        </button>
    </div>
</div>
{% endfor %}"""

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="ru">
<head>
    <meta charset="UTF-8">
    <title>{{ title }}</title>
</head>
<body>
    <header>
        <h1>{{ title }}</h1>
        <div class="filters">
            <select id="statusFilter" onchange="filterTasks()">
                <option value="">Все статусы</option>
                {% for value, label in statuses.items() -%}
                <option value="{{ value }}"{% if value == selected_status %} selected{% endif %}>{{ label }}</option>
                {% endfor %}
            </select>
            <select id="priorityFilter" onchange="filterTasks()">
                <option value="">Все приоритеты</option>
                {% for value, label in priorities.items() -%}
                <option value="{{ value }}"{% if value == selected_priority %} selected{% endif %}>{{ label }}</option>
                {% endfor %}
            </select>
            <button class="btn btn-secondary" onclick="refreshTasks()">Обновить</button>
            <button class="btn btn-primary" onclick="openCreateModal()">Новая задача</button>
        </div>
    </header>
    <main id="tasksContainer">
{{ cards }}
    </main>
    <div id="taskModal" class="modal" style="display: none;">
        <div class="modal-content">
            <span class="close" onclick="closeModal()">&times;</span>
            <h2 id="modalTitle">Новая задача</h2>
            <form id="taskForm">
                <label for="taskTitle">Название</label>
                <input type="text" id="taskTitle" required>
                <label for="taskDescription">Описание</label>
                <textarea id="taskDescription"></textarea>
                <label for="taskStatus">Статус</label>
                <select id="taskStatus">
                    {% for value, label in statuses.items() -%}
                    <option value="{{ value }}">{{ label }}</option>
                    {% endfor %}
                </select>
                <label for="taskPriority">Приоритет</label>
                <select id="taskPriority">
                    {% for value, label in priorities.items() -%}
                    <option value="{{ value }}">{{ label }}</option>
                    {% endfor %}
                </select>
                <button type="submit" class="btn btn-primary">Сохранить</button>
            </form>
        </div>
    </div>
</body>
</html>
"""


def _environment() -> Environment:
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["status_label"] = status_label
    env.filters["priority_label"] = priority_label
    env.filters["format_date"] = format_date
    return env


_env = _environment()


def render_tasks(tasks: Sequence[Task]) -> str:
    """Render the contents of the task container.

    Title and description are escaped, so user text never becomes markup.
    """
    if not tasks:
        return EMPTY_STATE_TEMPLATE

    template = _env.from_string(TASKS_TEMPLATE)
    return template.render(tasks=tasks)


def render_page(tasks: Sequence[Task], task_filter: TaskFilter | None = None) -> str:
    """Render the full host page with the cards already in place."""
    task_filter = task_filter or TaskFilter()
    template = _env.from_string(PAGE_TEMPLATE)

    return template.render(
        title=PAGE_TITLE,
        statuses=STATUS_LABELS,
        priorities=PRIORITY_LABELS,
        selected_status=task_filter.status or "",
        selected_priority=task_filter.priority or "",
        # Cards are already escaped by render_tasks.
        cards=Markup(render_tasks(tasks)),
    )
