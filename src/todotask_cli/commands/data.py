"""Data commands - CSV import and export."""

from pathlib import Path

import typer

from todotask_cli.services.config_service import get_task_repository
from todotask_cli.services.csv_service import CsvService, default_export_filename
from todotask_cli.services.task_service import TaskService
from todotask_cli.utils.typer_helpers import SuggestingGroup
from todotask_cli.utils.ui.console import get_console
from todotask_cli.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Import and export tasks as CSV")
console = get_console()

MAX_REPORTED_ERRORS = 5


def _csv_service() -> CsvService:
    return CsvService(TaskService(get_task_repository()))


@app.command("export")
@command_wrapper
async def export_tasks(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: TodoTasks_<timestamp>.csv in the current directory)",
    ),
) -> None:
    """Export every task to a CSV file."""
    path = output or Path(default_export_filename())
    count = await _csv_service().export_tasks(path)
    format_success(f"Exported {count} tasks to {path}")


@app.command("import")
@command_wrapper
async def import_tasks(
    input_file: Path = typer.Argument(..., help="CSV file to import"),
) -> None:
    """Import tasks from a CSV file.

    Expected columns: Title, Description, Priority, Status, DueDate.
    """
    result = await _csv_service().import_tasks(input_file)

    if result.has_errors:
        format_warning(result.message)
        for error in result.errors[:MAX_REPORTED_ERRORS]:
            console.print(f"  [red]•[/red] {error}")
        hidden = len(result.errors) - MAX_REPORTED_ERRORS
        if hidden > 0:
            console.print(f"  [dim]... and {hidden} more[/dim]")
    else:
        format_success(result.message)
