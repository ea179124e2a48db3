"""Dashboard command - task statistics rendered as text charts."""

import typer

from todotask_cli.models import DashboardSnapshot
from todotask_cli.services.config_service import get_config_service, get_task_repository
from todotask_cli.services.dashboard_service import DashboardService
from todotask_cli.utils import exit_codes
from todotask_cli.utils.task_helpers import parse_date_option
from todotask_cli.utils.ui.console import get_console
from todotask_cli.utils.ui.formatters import (
    format_output,
    get_completion_color,
    render_bar,
)

from .decorators import AppError, command_wrapper

console = get_console()

DASHBOARD_FORMATS = ("pretty", "json", "yaml")


def render_dashboard(snapshot: DashboardSnapshot, bar_width: int = 20) -> None:
    """Print the snapshot: overview, status and priority breakdown, weekly chart."""
    console.print("\n[bold cyan]📊 Task Dashboard[/bold cyan]\n")

    console.print(f"Total Tasks:     [bold]{snapshot.total_tasks}[/bold]")
    console.print(f"Upcoming:        [bold]{snapshot.upcoming_tasks}[/bold]")

    color = get_completion_color(snapshot.completed_percentage)
    bar = render_bar(snapshot.completed_percentage, 100, width=bar_width)
    console.print(
        f"Completion:      [{color}]{bar} {snapshot.completed_percentage}%[/{color}]"
    )

    console.print("\n[bold]By Status:[/bold]")
    for label, count, pct, style in (
        ("Pending", snapshot.pending_tasks, snapshot.pending_percentage, "yellow"),
        ("Hold", snapshot.on_hold_tasks, snapshot.on_hold_percentage, "magenta"),
        ("Completed", snapshot.completed_tasks, snapshot.completed_percentage, "green"),
    ):
        bar = render_bar(pct, 100, width=bar_width)
        console.print(f"  {label:10s} [{style}]{bar}[/{style}] {count:4d}  ({pct}%)")

    console.print("\n[bold]By Priority:[/bold]")
    for label, count, pct, style in (
        ("High", snapshot.high_priority_tasks, snapshot.high_priority_percentage, "red"),
        (
            "Normal",
            snapshot.normal_priority_tasks,
            snapshot.normal_priority_percentage,
            "yellow",
        ),
        ("Low", snapshot.low_priority_tasks, snapshot.low_priority_percentage, "green"),
    ):
        bar = render_bar(pct, 100, width=bar_width)
        console.print(f"  {label:10s} [{style}]{bar}[/{style}] {count:4d}  ({pct}%)")

    console.print("\n[bold]Tasks Created per Week:[/bold]")
    max_created = max(
        (w.tasks_created for w in snapshot.weekly_task_creation), default=0
    )
    for week in snapshot.weekly_task_creation:
        bar = render_bar(week.tasks_created, max_created, width=bar_width)
        date_range = (
            f"{week.week_start_date.strftime('%b %d')} - "
            f"{week.week_end_date.strftime('%b %d')}"
        )
        console.print(
            f"  {week.week_label} ({date_range}):  [cyan]{bar}[/cyan] {week.tasks_created}"
        )

    console.print()


@command_wrapper
async def show_dashboard(
    today: str | None = typer.Option(
        None, "--today", help="Reference date YYYY-MM-DD (default: today)"
    ),
    output: str = typer.Option(
        "pretty", "--output", "-o", help="Output format (pretty, json, yaml)"
    ),
) -> None:
    """Show task statistics: counts, percentages and weekly creation."""
    if output not in DASHBOARD_FORMATS:
        raise AppError(
            f"Unsupported dashboard format '{output}' (choose from: "
            f"{', '.join(DASHBOARD_FORMATS)})",
            exit_codes.ERROR_INVALID_ARGS,
        )

    reference_date = parse_date_option(today, "--today")
    snapshot = await DashboardService(get_task_repository()).get_snapshot(
        reference_date
    )

    if output in ("json", "yaml"):
        format_output(snapshot.model_dump(mode="json"), output)
        return

    render_dashboard(snapshot, get_config_service().config.dashboard.bar_width)
