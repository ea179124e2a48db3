"""Unit tests for SqliteTaskRepository.

Uses a real in-memory SQLite database with the full migration schema
applied, so the real SQL is exercised without touching a user vault.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import patch

import pytest
import pytest_asyncio

from todotask_cli.models import (
    NotFoundError,
    Priority,
    Status,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)

REPO_MODULE = "todotask_cli.adapters.sqlite.task_repository"


def _task_create(
    title: str = "Test task",
    description: str | None = None,
    priority: Priority = Priority.NORMAL,
    status: Status = Status.PENDING,
    due_date: date = date(2024, 7, 1),
) -> TaskCreate:
    return TaskCreate(
        title=title,
        description=description,
        priority=priority,
        status=status,
        due_date=due_date,
    )


# ---------------------------------------------------------------------------
# add / get
# ---------------------------------------------------------------------------


class TestAdd:
    @pytest.mark.asyncio
    async def test_add_assigns_id_and_created_date(self, repo):
        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-01"):
            task = await repo.add(_task_create(description="Some details"))

        assert task.id == 1
        assert task.title == "Test task"
        assert task.description == "Some details"
        assert task.priority == Priority.NORMAL
        assert task.status == Status.PENDING
        assert task.due_date == date(2024, 7, 1)
        assert task.created_date == date(2024, 6, 1)
        assert task.updated_date is None
        assert task.completed_date is None

    @pytest.mark.asyncio
    async def test_ids_increase(self, repo):
        first = await repo.add(_task_create("First"))
        second = await repo.add(_task_create("Second"))

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_add_completed_sets_completed_date(self, repo):
        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-01"):
            task = await repo.add(_task_create(status=Status.COMPLETED))

        assert task.completed_date == date(2024, 6, 1)

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, repo):
        with pytest.raises(NotFoundError, match="Task not found: 42"):
            await repo.get(42)


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def seeded(repo):
    await repo.add(_task_create("Buy milk", priority=Priority.LOW))
    await repo.add(
        _task_create("Write report", description="quarterly numbers", priority=Priority.HIGH)
    )
    await repo.add(_task_create("Call plumber", status=Status.HOLD))
    await repo.add(_task_create("File taxes", status=Status.COMPLETED, priority=Priority.HIGH))
    return repo


class TestListAll:
    @pytest.mark.asyncio
    async def test_no_filters_returns_everything_newest_first(self, seeded):
        tasks = await seeded.list_all()

        assert [t.id for t in tasks] == [4, 3, 2, 1]

    @pytest.mark.asyncio
    async def test_filter_by_status(self, seeded):
        tasks = await seeded.list_all(TaskFilters(status="Hold"))

        assert [t.title for t in tasks] == ["Call plumber"]

    @pytest.mark.asyncio
    async def test_filter_by_priority(self, seeded):
        tasks = await seeded.list_all(TaskFilters(priority=Priority.HIGH))

        assert {t.title for t in tasks} == {"Write report", "File taxes"}

    @pytest.mark.asyncio
    async def test_search_matches_title_or_description(self, seeded):
        by_title = await seeded.list_all(TaskFilters(search="milk"))
        by_description = await seeded.list_all(TaskFilters(search="quarterly"))

        assert [t.title for t in by_title] == ["Buy milk"]
        assert [t.title for t in by_description] == ["Write report"]

    @pytest.mark.asyncio
    async def test_all_option_means_no_filter(self, seeded):
        tasks = await seeded.list_all(TaskFilters(status="All", priority="All"))

        assert len(tasks) == 4

    @pytest.mark.asyncio
    async def test_combined_filters(self, seeded):
        tasks = await seeded.list_all(
            TaskFilters(status=Status.PENDING, priority=Priority.HIGH)
        )

        assert [t.title for t in tasks] == ["Write report"]


# ---------------------------------------------------------------------------
# update / update_status
# ---------------------------------------------------------------------------


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, repo):
        task = await repo.add(_task_create(description="keep me"))

        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-05"):
            updated = await repo.update(
                task.id, TaskUpdate(title="Renamed", priority=Priority.HIGH)
            )

        assert updated.title == "Renamed"
        assert updated.priority == Priority.HIGH
        assert updated.description == "keep me"
        assert updated.due_date == task.due_date
        assert updated.created_date == task.created_date
        assert updated.updated_date == date(2024, 6, 5)

    @pytest.mark.asyncio
    async def test_empty_update_returns_task_unchanged(self, repo):
        task = await repo.add(_task_create())

        assert await repo.update(task.id, TaskUpdate()) == task

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, repo):
        with pytest.raises(NotFoundError):
            await repo.update(7, TaskUpdate(title="Nope"))

    @pytest.mark.asyncio
    async def test_completing_sets_completed_date(self, repo):
        task = await repo.add(_task_create())

        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-10"):
            done = await repo.update_status(task.id, Status.COMPLETED)

        assert done.status == Status.COMPLETED
        assert done.completed_date == date(2024, 6, 10)

    @pytest.mark.asyncio
    async def test_recompleting_keeps_original_completed_date(self, repo):
        task = await repo.add(_task_create())
        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-10"):
            await repo.update_status(task.id, Status.COMPLETED)
        with patch(f"{REPO_MODULE}.today_iso", return_value="2024-06-20"):
            again = await repo.update_status(task.id, Status.COMPLETED)

        assert again.completed_date == date(2024, 6, 10)

    @pytest.mark.asyncio
    async def test_reopening_clears_completed_date(self, repo):
        task = await repo.add(_task_create(status=Status.COMPLETED))

        reopened = await repo.update_status(task.id, Status.PENDING)

        assert reopened.status == Status.PENDING
        assert reopened.completed_date is None


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_hides_task(self, repo):
        task = await repo.add(_task_create())

        assert await repo.delete(task.id) is True
        assert await repo.list_all() == []
        with pytest.raises(NotFoundError):
            await repo.get(task.id)

    @pytest.mark.asyncio
    async def test_delete_keeps_row_as_soft_delete(self, repo, db):
        task = await repo.add(_task_create())
        await repo.delete(task.id)

        row = db.execute("SELECT deleted_at FROM tasks WHERE id = ?", (task.id,)).fetchone()
        assert row["deleted_at"] is not None

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, repo):
        task = await repo.add(_task_create())
        await repo.delete(task.id)

        with pytest.raises(NotFoundError):
            await repo.delete(task.id)
