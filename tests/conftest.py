"""Shared test fixtures and configuration.

Isolates tests from the real config directory and task vault.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from unittest.mock import patch

import pytest

from todotask_cli.adapters.sqlite.migrations import ALL_MIGRATIONS
from todotask_cli.adapters.sqlite.migrations.runner import MigrationRunner
from todotask_cli.adapters.sqlite.task_repository import SqliteTaskRepository
from todotask_cli.models import Priority, Status, Task


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config service at *tmp_path* and clear its cache."""
    from todotask_cli.services.config_service import get_config_service

    monkeypatch.delenv("TODOTASK_DB", raising=False)
    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("todotask_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("todotask_cli.services.config_service.user_data_dir", return_value=tmpdir):
            yield tmp_path
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# In-memory vault
# ---------------------------------------------------------------------------


def create_in_memory_db() -> sqlite3.Connection:
    """Create an in-memory SQLite database with all migrations applied."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.row_factory = sqlite3.Row
    MigrationRunner(conn).run_migrations(ALL_MIGRATIONS)
    return conn


@pytest.fixture
def db():
    conn = create_in_memory_db()
    yield conn
    conn.close()


@pytest.fixture
def repo(db):
    """Provide a SqliteTaskRepository backed by an in-memory DB."""
    r = SqliteTaskRepository()
    r._connection = db
    return r


# ---------------------------------------------------------------------------
# Task factory
# ---------------------------------------------------------------------------


def make_task(
    id: int = 1,
    title: str = "Test task",
    priority: Priority = Priority.NORMAL,
    status: Status = Status.PENDING,
    due_date: date = date(2024, 7, 7),
    created_date: date = date(2024, 6, 30),
    **kwargs,
) -> Task:
    return Task(
        id=id,
        title=title,
        priority=priority,
        status=status,
        due_date=due_date,
        created_date=created_date,
        **kwargs,
    )


@pytest.fixture
def task_factory():
    """Build Task models with sensible defaults."""
    return make_task
