"""CSV import and export of tasks.

Export writes ``Title,Description,Priority,Status,DueDate,CreatedDate`` with
every field quoted. Import reads the same layout (CreatedDate is ignored,
since creation dates are always set by the store) and reports per-line
errors instead of failing the whole file.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel, Field, ValidationError

from todotask_cli.models import ImportFileError, Priority, Status, Task, TaskCreate
from todotask_cli.services.task_service import TaskService
from todotask_cli.utils.logger import get_logger

CSV_HEADER = ["Title", "Description", "Priority", "Status", "DueDate", "CreatedDate"]
MIN_IMPORT_COLUMNS = 5
DATE_FORMATS = ("%Y-%m-%d", "%d-%b-%Y", "%m/%d/%Y")


class CsvImportResult(BaseModel):
    """Summary of a CSV import."""

    imported: int = 0
    errors: list[str] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def message(self) -> str:
        message = f"Successfully imported {self.imported} tasks"
        if self.has_errors:
            message += f". {len(self.errors)} errors occurred"
        return message


def default_export_filename(now: datetime | None = None) -> str:
    """Timestamped export file name, e.g. TodoTasks_20240131_154500.csv."""
    return f"TodoTasks_{(now or datetime.now()):%Y%m%d_%H%M%S}.csv"


def write_tasks_csv(tasks: Iterable[Task], stream: TextIO) -> int:
    """Write tasks to ``stream`` as CSV and return how many rows were written."""
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL)
    writer.writerow(CSV_HEADER)

    count = 0
    for task in tasks:
        writer.writerow(
            [
                task.title,
                task.description or "",
                task.priority.value,
                task.status.value,
                task.due_date.isoformat(),
                task.created_date.isoformat(),
            ]
        )
        count += 1
    return count


def _parse_due_date(value: str) -> date:
    """Parse a due date, falling back to a week from today."""
    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return date.today() + timedelta(days=7)


def _first_error(error: ValidationError) -> str:
    return error.errors()[0]["msg"].removeprefix("Value error, ")


def parse_tasks_csv(stream: TextIO) -> tuple[list[TaskCreate], list[str]]:
    """Parse CSV rows into TaskCreate models.

    The first row is treated as a header and skipped. Unknown priorities
    become Normal and unknown statuses become Pending.

    Returns:
        Tuple of (valid tasks, "Line N: ..." error messages)
    """
    reader = csv.reader(stream)
    next(reader, None)

    tasks: list[TaskCreate] = []
    errors: list[str] = []

    # Quoted fields may span lines; errors name the line a record starts on
    row_start = reader.line_num + 1
    for values in reader:
        line_number, row_start = row_start, reader.line_num + 1
        if not values:
            continue

        if len(values) < MIN_IMPORT_COLUMNS:
            errors.append(f"Line {line_number}: Insufficient columns")
            continue

        title = values[0].strip()
        if not title:
            errors.append(f"Line {line_number}: Title is required")
            continue

        priority = values[2].strip()
        if priority not in {p.value for p in Priority}:
            priority = Priority.NORMAL

        status = values[3].strip()
        if status not in {s.value for s in Status}:
            status = Status.PENDING

        try:
            tasks.append(
                TaskCreate(
                    title=title,
                    description=values[1].strip() or None,
                    priority=priority,
                    status=status,
                    due_date=_parse_due_date(values[4]),
                )
            )
        except ValidationError as e:
            errors.append(f"Line {line_number}: {_first_error(e)}")

    return tasks, errors


class CsvService:
    """Imports and exports tasks through the task service."""

    def __init__(self, task_service: TaskService):
        self.task_service = task_service
        self.logger = get_logger()

    async def export_tasks(self, output_path: Path) -> int:
        """Export every task to ``output_path`` and return the row count."""
        tasks = await self.task_service.list_tasks()
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            count = write_tasks_csv(tasks, f)
        self.logger.info("exported %d tasks to %s", count, output_path)
        return count

    async def import_tasks(self, input_path: Path) -> CsvImportResult:
        """Import tasks from a CSV file.

        Raises:
            ImportFileError: If the file is missing, empty or not a .csv file
        """
        if input_path.suffix.lower() != ".csv":
            raise ImportFileError("Only CSV files are supported")
        if not input_path.is_file() or input_path.stat().st_size == 0:
            raise ImportFileError("Please select a non-empty CSV file")

        with open(input_path, newline="", encoding="utf-8-sig") as f:
            tasks, errors = parse_tasks_csv(f)

        result = CsvImportResult(errors=errors)
        for task in tasks:
            await self.task_service.add_task(task)
            result.imported += 1

        self.logger.info(
            "imported %d tasks from %s (%d errors)",
            result.imported,
            input_path,
            len(result.errors),
        )
        return result
