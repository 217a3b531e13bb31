"""CLI interface for taskreload."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from taskreload import __version__
from taskreload.api import TaskApi
from taskreload.client import ModalState, TaskListClient
from taskreload.config import CONFIG_FILE, ClientConfig
from taskreload.errors import TaskClientError
from taskreload.labels import format_date, priority_label, status_label
from taskreload.logging_setup import setup_logging
from taskreload.models import PRIORITIES, STATUSES, Task, TaskFilter
from taskreload.notifications import Notifier
from taskreload.render import render_page
from taskreload.view import MemoryView

console = Console()

PRIORITY_STYLES = {"high": "red", "medium": "yellow", "low": "green"}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskreload")
@click.option("--api-url", help="Base URL of the TaskReload server")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.json (default: .taskreload/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
@click.pass_context
def main(
    ctx: click.Context,
    api_url: str | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """taskreload - manage a TaskReload task list from the terminal.

    \b
    Examples:
      taskreload list --status pending
      taskreload add "Buy milk" --priority low
      taskreload edit 5 --priority high
      taskreload delete 5
      taskreload page -o tasks.html
      taskreload config --base-url http://tasks.local:8080
    """
    setup_logging(verbose)

    config = ClientConfig.load(config_path)
    if api_url:
        config.api.base_url = api_url

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _make_client(ctx: click.Context, view: MemoryView) -> TaskListClient:
    config: ClientConfig = ctx.obj["config"]
    return TaskListClient(
        api=TaskApi(config.api),
        view=view,
        notifier=Notifier(console, duration=config.notifications.duration_seconds),
    )


def _action_failed(notifier: Notifier) -> bool:
    """True if the last notification of the command is an error."""
    last = notifier.last
    return last is not None and last.kind == "error"


def _task_table(tasks: list[Task]) -> Table:
    table = Table(title="Задачи")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Название")
    table.add_column("Статус")
    table.add_column("Приоритет")
    table.add_column("Создана", style="dim")

    for task in tasks:
        style = PRIORITY_STYLES.get(task.priority, "white")
        table.add_row(
            str(task.id),
            escape(task.title),
            status_label(task.status),
            f"[{style}]{priority_label(task.priority)}[/{style}]",
            format_date(task.created_at),
        )

    return table


@main.command("list")
@click.option("--status", type=click.Choice(STATUSES), help="Only tasks with this status")
@click.option("--priority", type=click.Choice(PRIORITIES), help="Only tasks with this priority")
@click.option("--html", "as_html", is_flag=True, help="Print the rendered cards instead of a table")
@click.pass_context
def list_command(
    ctx: click.Context,
    status: str | None,
    priority: str | None,
    as_html: bool,
) -> None:
    """List tasks."""
    view = MemoryView(status=status or "", priority=priority or "")
    client = _make_client(ctx, view)

    client.load_tasks()
    if _action_failed(client.notifier):
        ctx.exit(1)

    if as_html:
        click.echo(view.container_html)
        return

    if not client.state.tasks:
        console.print("[dim]Нет задач[/dim]")
        return

    console.print(_task_table(client.state.tasks))


@main.command("show")
@click.argument("task_id", type=int)
@click.pass_context
def show_command(ctx: click.Context, task_id: int) -> None:
    """Show a single task."""
    config: ClientConfig = ctx.obj["config"]
    notifier = Notifier(console, duration=config.notifications.duration_seconds)

    try:
        with notifier.toast(f"Загрузка задачи #{task_id}..."):
            task = TaskApi(config.api).get_task(task_id)
    except TaskClientError as e:
        console.print(f"[red]Ошибка:[/red] {e}")
        ctx.exit(1)
        return

    lines = [
        f"[cyan]Статус:[/cyan] {status_label(task.status)}",
        f"[cyan]Приоритет:[/cyan] {priority_label(task.priority)}",
        f"[cyan]Создана:[/cyan] {format_date(task.created_at)}",
    ]
    if task.description:
        lines.insert(0, escape(task.description) + "\n")

    console.print(Panel("\n".join(lines), title=f"#{task.id} {escape(task.title)}"))


@main.command("add")
@click.argument("title")
@click.option("--description", "-d", default="", help="Task description")
@click.option("--status", type=click.Choice(STATUSES), default="pending", show_default=True)
@click.option("--priority", type=click.Choice(PRIORITIES), default="medium", show_default=True)
@click.pass_context
def add_command(
    ctx: click.Context,
    title: str,
    description: str,
    status: str,
    priority: str,
) -> None:
    """Create a task."""
    view = MemoryView()
    client = _make_client(ctx, view)

    client.open_create_modal()
    view.form.title = title
    view.form.description = description
    view.form.status = status
    view.form.priority = priority

    client.submit_form()
    if _action_failed(client.notifier):
        ctx.exit(1)


@main.command("edit")
@click.argument("task_id", type=int)
@click.option("--title", help="New title")
@click.option("--description", "-d", help="New description")
@click.option("--status", type=click.Choice(STATUSES), help="New status")
@click.option("--priority", type=click.Choice(PRIORITIES), help="New priority")
@click.pass_context
def edit_command(
    ctx: click.Context,
    task_id: int,
    title: str | None,
    description: str | None,
    status: str | None,
    priority: str | None,
) -> None:
    """Update a task. Fields that are not given keep their current values."""
    view = MemoryView()
    client = _make_client(ctx, view)

    client.load_tasks()
    if _action_failed(client.notifier):
        ctx.exit(1)

    client.edit_task(task_id)
    if client.state.modal is not ModalState.EDIT:
        console.print(f"[red]Задача не найдена:[/red] {task_id}")
        ctx.exit(1)

    if title is not None:
        view.form.title = title
    if description is not None:
        view.form.description = description
    if status is not None:
        view.form.status = status
    if priority is not None:
        view.form.priority = priority

    client.submit_form()
    if _action_failed(client.notifier):
        ctx.exit(1)


@main.command("delete")
@click.argument("task_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_command(ctx: click.Context, task_id: int, yes: bool) -> None:
    """Delete a task."""
    if yes:
        view = MemoryView()
    else:
        view = MemoryView(confirmer=lambda message: click.confirm(message, default=False))
    client = _make_client(ctx, view)

    if not client.delete_task(task_id):
        if _action_failed(client.notifier):
            ctx.exit(1)
        console.print("[yellow]Отменено[/yellow]")


@main.command("page")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the page to a file instead of stdout",
)
@click.option("--status", type=click.Choice(STATUSES), help="Only tasks with this status")
@click.option("--priority", type=click.Choice(PRIORITIES), help="Only tasks with this priority")
@click.pass_context
def page_command(
    ctx: click.Context,
    output: Path | None,
    status: str | None,
    priority: str | None,
) -> None:
    """Render the full task page as HTML."""
    view = MemoryView(status=status or "", priority=priority or "")
    client = _make_client(ctx, view)

    client.load_tasks()
    if _action_failed(client.notifier):
        ctx.exit(1)

    html = render_page(client.state.tasks, TaskFilter(status=status, priority=priority))

    if output is None:
        click.echo(html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    console.print(f"[green]Страница сохранена:[/green] {output}")


@main.command("config")
@click.option("--base-url", help="Base URL of the TaskReload server")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option("--duration", type=float, help="How long notifications stay, in seconds")
@click.pass_context
def config_command(
    ctx: click.Context,
    base_url: str | None,
    timeout: float | None,
    duration: float | None,
) -> None:
    """Show the configuration, or update and save it."""
    config: ClientConfig = ctx.obj["config"]

    if base_url is None and timeout is None and duration is None:
        console.print_json(config.model_dump_json())
        return

    if base_url is not None:
        config.api.base_url = base_url
    if timeout is not None:
        config.api.timeout_seconds = timeout
    if duration is not None:
        config.notifications.duration_seconds = duration

    path = ctx.obj["config_path"] or CONFIG_FILE
    config.save(path)
    console.print(f"[green]Configuration saved:[/green] {path}")


if __name__ == "__main__":
    main()
