"""Task management commands."""

import typer

from todotask_cli.models import Priority, Status
from todotask_cli.services.config_service import get_config_service, get_task_repository
from todotask_cli.services.task_service import TaskService
from todotask_cli.utils.task_helpers import parse_date_option
from todotask_cli.utils.typer_helpers import SuggestingGroup
from todotask_cli.utils.ui.console import get_console
from todotask_cli.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")
console = get_console()


def _task_service() -> TaskService:
    return TaskService(get_task_repository())


def _output_format(output: str | None) -> str:
    return output or get_config_service().config.output.format


@app.command("list")
@command_wrapper
async def list_tasks(
    status: str | None = typer.Option(
        None, "--status", "-s", help="Filter by status (All, Pending, Hold, Completed)"
    ),
    priority: str | None = typer.Option(
        None, "--priority", "-p", help="Filter by priority (All, Low, Normal, High)"
    ),
    search: str | None = typer.Option(
        None, "--search", "-q", help="Search in title and description"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty, table, json, yaml)"
    ),
) -> None:
    """List tasks, newest first."""
    tasks = await _task_service().filter_tasks(
        status=status, priority=priority, search=search
    )
    result = {"tasks": [t.model_dump(mode="json") for t in tasks]}
    format_output(result, _output_format(output))


@app.command("get")
@command_wrapper
async def get_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show one task."""
    task = await _task_service().get_task(task_id)
    output_format = _output_format(output)
    # Pretty mode shows a single task as key/value pairs
    if output_format == "pretty":
        output_format = "table"
    format_output(task.model_dump(mode="json"), output_format)


@app.command("add")
@command_wrapper
async def add_task(
    title: str = typer.Argument(..., help="Task title"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Longer description"
    ),
    priority: Priority = typer.Option(Priority.NORMAL, "--priority", "-p"),
    status: Status = typer.Option(Status.PENDING, "--status", "-s"),
    due: str | None = typer.Option(
        None, "--due", help="Due date YYYY-MM-DD (default: a week from today)"
    ),
) -> None:
    """Create a task."""
    task = await _task_service().create_task(
        title,
        description=description,
        priority=priority,
        status=status,
        due_date=parse_date_option(due),
    )
    format_success(f"Task #{task.id} created: {task.title}")


@app.command("update")
@command_wrapper
async def update_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="New description"
    ),
    priority: Priority | None = typer.Option(None, "--priority", "-p"),
    status: Status | None = typer.Option(None, "--status", "-s"),
    due: str | None = typer.Option(None, "--due", help="New due date YYYY-MM-DD"),
) -> None:
    """Update the given fields of a task."""
    task = await _task_service().update_task(
        task_id,
        title=title,
        description=description,
        priority=priority,
        status=status,
        due_date=parse_date_option(due),
    )
    format_success(f"Task #{task.id} updated")


@app.command("status")
@command_wrapper
async def set_status(
    task_id: int = typer.Argument(..., help="Task ID"),
    status: Status = typer.Argument(..., help="New status"),
) -> None:
    """Move a task to Pending, Hold or Completed."""
    task = await _task_service().update_task_status(task_id, status)
    format_success(f"Task #{task.id} is now {task.status.value}")


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    service = _task_service()
    task = await service.get_task(task_id)
    if not yes and not typer.confirm(f"Delete task #{task.id} '{task.title}'?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    await service.delete_task(task_id)
    format_success(f"Task #{task_id} deleted")


@app.command("filters")
@command_wrapper
def filter_options(
    output: str | None = typer.Option(None, "--output", "-o", help="Output format"),
) -> None:
    """Show the accepted status and priority filter values."""
    options = TaskService.get_filter_options()
    output_format = _output_format(output)
    if output_format in ("json", "yaml"):
        format_output(options, output_format)
        return

    console.print(f"[bold]Status:[/bold]   {', '.join(options['status'])}")
    console.print(f"[bold]Priority:[/bold] {', '.join(options['priority'])}")
