"""Unit tests for CSV import and export."""

from __future__ import annotations

import io
from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from todotask_cli.models import ImportFileError, Priority, Status
from todotask_cli.services.csv_service import (
    CSV_HEADER,
    CsvImportResult,
    CsvService,
    default_export_filename,
    parse_tasks_csv,
    write_tasks_csv,
)
from todotask_cli.services.task_service import TaskService

HEADER_LINE = ",".join(CSV_HEADER) + "\n"


# ---------------------------------------------------------------------------
# write_tasks_csv
# ---------------------------------------------------------------------------


def test_write_tasks_csv_quotes_every_field(task_factory):
    tasks = [
        task_factory(id=1, title="Buy milk", description="two litres"),
        task_factory(id=2, title="Call mum", status=Status.COMPLETED),
    ]
    stream = io.StringIO()

    count = write_tasks_csv(tasks, stream)

    lines = stream.getvalue().splitlines()
    assert count == 2
    assert lines[0] == '"Title","Description","Priority","Status","DueDate","CreatedDate"'
    assert lines[1] == '"Buy milk","two litres","Normal","Pending","2024-07-07","2024-06-30"'
    assert lines[2] == '"Call mum","","Normal","Completed","2024-07-07","2024-06-30"'


def test_default_export_filename():
    assert (
        default_export_filename(datetime(2024, 1, 31, 15, 45, 0))
        == "TodoTasks_20240131_154500.csv"
    )


# ---------------------------------------------------------------------------
# parse_tasks_csv
# ---------------------------------------------------------------------------


def test_parse_valid_rows():
    stream = io.StringIO(
        HEADER_LINE
        + '"Write report","quarterly numbers","High","Hold","2024-08-01","2024-01-01"\n'
        + "Buy milk,,Low,Completed,2024-08-02\n"
    )

    tasks, errors = parse_tasks_csv(stream)

    assert errors == []
    assert [t.title for t in tasks] == ["Write report", "Buy milk"]
    assert tasks[0].description == "quarterly numbers"
    assert tasks[0].priority == Priority.HIGH
    assert tasks[0].status == Status.HOLD
    assert tasks[0].due_date == date(2024, 8, 1)
    assert tasks[1].description is None
    assert tasks[1].status == Status.COMPLETED


def test_unknown_priority_and_status_fall_back_to_defaults():
    stream = io.StringIO(HEADER_LINE + "Task one,,Urgent,Doing,2024-08-01\n")

    tasks, errors = parse_tasks_csv(stream)

    assert errors == []
    assert tasks[0].priority == Priority.NORMAL
    assert tasks[0].status == Status.PENDING


def test_unparseable_due_date_falls_back_to_next_week():
    stream = io.StringIO(HEADER_LINE + "Task one,,Low,Pending,someday\n")

    tasks, _ = parse_tasks_csv(stream)

    assert tasks[0].due_date == date.today() + timedelta(days=7)


def test_display_format_due_date_is_accepted():
    stream = io.StringIO(HEADER_LINE + "Task one,,Low,Pending,05-Mar-2024\n")

    tasks, _ = parse_tasks_csv(stream)

    assert tasks[0].due_date == date(2024, 3, 5)


def test_row_errors_are_reported_with_line_numbers():
    stream = io.StringIO(
        HEADER_LINE
        + "Too,few,columns\n"
        + ',"desc",High,Pending,2024-08-01\n'
        + "Bad title!,,High,Pending,2024-08-01\n"
        + "Good one,,High,Pending,2024-08-01\n"
    )

    tasks, errors = parse_tasks_csv(stream)

    assert [t.title for t in tasks] == ["Good one"]
    assert errors == [
        "Line 2: Insufficient columns",
        "Line 3: Title is required",
        "Line 4: Title cannot contain special characters",
    ]


def test_line_numbers_follow_multi_line_records():
    stream = io.StringIO(
        HEADER_LINE
        + '"Spans lines","first part\nsecond part","Low","Pending","2024-08-01"\n'
        + "Too,few\n"
        + '"Bad title!","one\ntwo\nthree","Low","Pending","2024-08-01"\n'
        + "Also,short\n"
    )

    tasks, errors = parse_tasks_csv(stream)

    assert tasks[0].description == "first part\nsecond part"
    assert errors == [
        "Line 4: Insufficient columns",
        "Line 5: Title cannot contain special characters",
        "Line 8: Insufficient columns",
    ]


def test_blank_lines_are_skipped():
    stream = io.StringIO(HEADER_LINE + "\n" + "Task one,,Low,Pending,2024-08-01\n")

    tasks, errors = parse_tasks_csv(stream)

    assert len(tasks) == 1
    assert errors == []


def test_import_result_message():
    assert CsvImportResult(imported=3).message == "Successfully imported 3 tasks"
    assert (
        CsvImportResult(imported=1, errors=["Line 2: x", "Line 3: y"]).message
        == "Successfully imported 1 tasks. 2 errors occurred"
    )


# ---------------------------------------------------------------------------
# CsvService
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(return_value=[])
    repo.add = AsyncMock()
    return repo


@pytest.fixture()
def csv_service(mock_repo):
    return CsvService(TaskService(mock_repo))


@pytest.mark.asyncio
async def test_export_writes_file(csv_service, mock_repo, task_factory, tmp_path):
    mock_repo.list_all.return_value = [task_factory(id=1), task_factory(id=2)]
    path = tmp_path / "out.csv"

    count = await csv_service.export_tasks(path)

    assert count == 2
    assert len(path.read_text(encoding="utf-8").splitlines()) == 3


@pytest.mark.asyncio
async def test_import_creates_valid_rows(csv_service, mock_repo, tmp_path):
    path = tmp_path / "in.csv"
    path.write_text(
        HEADER_LINE + "One,,Low,Pending,2024-08-01\nTwo\nThree,,High,Hold,2024-08-02\n",
        encoding="utf-8",
    )

    result = await csv_service.import_tasks(path)

    assert result.imported == 2
    assert result.errors == ["Line 3: Insufficient columns"]
    assert mock_repo.add.await_count == 2


@pytest.mark.asyncio
async def test_import_round_trips_an_export(csv_service, mock_repo, task_factory, tmp_path):
    mock_repo.list_all.return_value = [
        task_factory(id=1, title="Alpha", priority=Priority.HIGH, status=Status.HOLD)
    ]
    path = tmp_path / "tasks.csv"
    await csv_service.export_tasks(path)

    result = await csv_service.import_tasks(path)

    created = mock_repo.add.call_args[0][0]
    assert result.imported == 1
    assert (created.title, created.priority, created.status) == (
        "Alpha",
        Priority.HIGH,
        Status.HOLD,
    )


@pytest.mark.asyncio
async def test_import_rejects_non_csv(csv_service, tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("x", encoding="utf-8")

    with pytest.raises(ImportFileError, match="Only CSV files"):
        await csv_service.import_tasks(path)


@pytest.mark.asyncio
async def test_import_rejects_empty_or_missing_file(csv_service, tmp_path):
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")

    with pytest.raises(ImportFileError):
        await csv_service.import_tasks(empty)
    with pytest.raises(ImportFileError):
        await csv_service.import_tasks(tmp_path / "missing.csv")
