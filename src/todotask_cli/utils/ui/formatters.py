"""Output formatters for different formats."""

import json
from datetime import date
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from todotask_cli.utils.ui.console import get_console

console = get_console()


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        if "tasks" in data:
            format_dict_table(data["tasks"])
        else:
            format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title())

    for item in items:
        table.add_row(*[_cell(item.get(column)) for column in columns])

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================

PRIORITY_ICONS = {
    "High": "🔴",
    "Normal": "🟡",
    "Low": "🟢",
}

PRIORITY_COLORS = {
    "High": "bold red",
    "Normal": "yellow",
    "Low": "green",
}

STATUS_ICONS = {
    "Pending": "⬜",
    "Hold": "⏸️",
    "Completed": "☑️",
}


def format_pretty(data: Any) -> None:
    """Format data in pretty format with colors and icons."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, dict) and "tasks" in data:
        format_tasks_pretty(data["tasks"])
    elif isinstance(data, list) and isinstance(data[0], dict) and "title" in data[0]:
        format_tasks_pretty(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_tasks_pretty(tasks: list[dict]) -> None:
    """Format tasks as a colored list with a header count."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    open_tasks = [t for t in tasks if t.get("status") != "Completed"]

    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(open_tasks)} open, {len(tasks)} total)", style="dim")
    console.print(header)
    console.print()

    for task in tasks:
        format_task_item(task)


def format_task_item(task: dict) -> None:
    """Render one task line plus its description, if any."""
    status = task.get("status", "Pending")
    priority = task.get("priority", "Normal")

    line = Text()
    line.append(f"{STATUS_ICONS.get(status, '⬜')} ")
    line.append(f"#{task.get('id')} ", style="dim")
    title_style = "dim strike" if status == "Completed" else "bold"
    line.append(task.get("title", ""), style=title_style)
    line.append(f"  {PRIORITY_ICONS.get(priority, '')} ", style="")
    line.append(priority, style=PRIORITY_COLORS.get(priority, ""))

    due = task.get("due_date")
    if due:
        due_style = "red" if status != "Completed" and is_overdue(due) else "cyan"
        line.append(f"  📅 {format_due_date(due)}", style=due_style)

    console.print(line)
    if task.get("description"):
        console.print(f"     [dim]{task['description']}[/dim]")


def is_overdue(due_date: str | date | None, today: date | None = None) -> bool:
    """Whether a due date lies before today."""
    if not due_date:
        return False
    if isinstance(due_date, str):
        due_date = date.fromisoformat(due_date)
    return due_date < (today or date.today())


def format_due_date(value: str | date) -> str:
    """Format a due date as dd-Mon-yyyy."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return value.strftime("%d-%b-%Y")


def render_bar(value: float, max_value: float, width: int = 10) -> str:
    """Render a progress bar using block characters."""
    if max_value <= 0:
        ratio = 0.0
    else:
        ratio = min(value / max_value, 1.0)
    filled = int(ratio * width)
    return "█" * filled + "░" * (width - filled)


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"
