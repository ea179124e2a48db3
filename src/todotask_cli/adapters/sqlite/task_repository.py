"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

from todotask_cli.adapters.sqlite.connection import get_connection
from todotask_cli.adapters.sqlite.utils import (
    build_update_clause,
    row_to_dict,
    today_iso,
)
from todotask_cli.models import (
    NotFoundError,
    Status,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)
from todotask_cli.repositories import TaskRepository
from todotask_cli.utils.logger import get_logger

_SELECT_COLUMNS = """
    id, title, description, priority, status, due_date,
    created_date, updated_date, completed_date
"""


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository.

    Deletes are soft: rows get a ``deleted_at`` timestamp and disappear from
    every query.
    """

    def __init__(self, db_path: str | Path | None = None):
        """Initialize SQLite task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None
        self.logger = get_logger()

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    async def list_all(self, filters: TaskFilters | None = None) -> list[Task]:
        """List all non-deleted tasks, newest first."""
        filters = filters or TaskFilters()

        query = f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE deleted_at IS NULL"
        params: list[Any] = []

        if filters.status is not None:
            query += " AND status = ?"
            params.append(filters.status.value)

        if filters.priority is not None:
            query += " AND priority = ?"
            params.append(filters.priority.value)

        if filters.search:
            query += " AND (title LIKE ? OR description LIKE ?)"
            search_term = f"%{filters.search}%"
            params.extend([search_term, search_term])

        query += " ORDER BY created_date DESC, id DESC"

        cursor = self.connection.execute(query, params)
        return [Task(**row_to_dict(row)) for row in cursor.fetchall()]

    async def get(self, task_id: int) -> Task:
        """Get a specific task by ID."""
        cursor = self.connection.execute(
            f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE id = ? AND deleted_at IS NULL",
            (task_id,),
        )
        row = cursor.fetchone()

        if not row:
            raise NotFoundError(task_id)

        return Task(**row_to_dict(row))

    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task."""
        today = today_iso()
        completed_date = today if task_data.status == Status.COMPLETED else None

        cursor = self.connection.execute(
            """INSERT INTO tasks (
                title, description, priority, status, due_date,
                created_date, completed_date
            ) VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                task_data.title,
                task_data.description,
                task_data.priority.value,
                task_data.status.value,
                task_data.due_date.isoformat(),
                today,
                completed_date,
            ),
        )
        self.connection.commit()

        task_id = cursor.lastrowid
        self.logger.debug("created task %s", task_id)
        return await self.get(task_id)

    async def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Update an existing task."""
        current = await self.get(task_id)

        update_dict = updates.model_dump(exclude_none=True)
        if not update_dict:
            return current

        if "priority" in update_dict:
            update_dict["priority"] = updates.priority.value
        if "due_date" in update_dict:
            update_dict["due_date"] = updates.due_date.isoformat()
        if "status" in update_dict:
            update_dict["status"] = updates.status.value
            update_dict["completed_date"] = self._completed_date_for(
                current, updates.status
            )

        update_dict["updated_date"] = today_iso()

        set_clause, params = build_update_clause(update_dict)
        params.append(task_id)

        self.connection.execute(
            f"UPDATE tasks SET {set_clause} WHERE id = ? AND deleted_at IS NULL",
            params,
        )
        self.connection.commit()

        return await self.get(task_id)

    async def update_status(self, task_id: int, status: Status) -> Task:
        """Change only the status of a task."""
        return await self.update(task_id, TaskUpdate(status=status))

    async def delete(self, task_id: int) -> bool:
        """Delete a task (soft delete)."""
        cursor = self.connection.execute(
            "UPDATE tasks SET deleted_at = datetime('now') "
            "WHERE id = ? AND deleted_at IS NULL",
            (task_id,),
        )
        self.connection.commit()

        if cursor.rowcount == 0:
            raise NotFoundError(task_id)

        self.logger.debug("deleted task %s", task_id)
        return True

    @staticmethod
    def _completed_date_for(current: Task, status: Status) -> str | None:
        """Completed date to store when a task moves to ``status``."""
        if status != Status.COMPLETED:
            return None
        if current.completed_date is not None:
            return current.completed_date.isoformat()
        return today_iso()
