"""Task service - Business logic for task operations.

This service layer sits between commands and repositories, mapping command
arguments onto the task models.
"""

from __future__ import annotations

from datetime import date

from todotask_cli.models import (
    Priority,
    Status,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)
from todotask_cli.repositories import TaskRepository

ALL_OPTION = "All"


def _parse_date(value: str | date | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value)


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    async def list_tasks(self) -> list[Task]:
        """List every task."""
        return await self.repository.list_all()

    async def filter_tasks(
        self,
        *,
        status: str | Status | None = None,
        priority: str | Priority | None = None,
        search: str | None = None,
    ) -> list[Task]:
        """List tasks matching the given filters.

        Args:
            status: Status name, or "All"/None for any status
            priority: Priority name, or "All"/None for any priority
            search: Substring to look for in title or description

        Returns:
            List of Task objects matching the criteria
        """
        filters = TaskFilters(status=status, priority=priority, search=search)
        return await self.repository.list_all(filters)

    async def get_task(self, task_id: int) -> Task:
        """Get a specific task by ID."""
        return await self.repository.get(task_id)

    async def create_task(
        self,
        title: str,
        *,
        description: str | None = None,
        priority: str | Priority = Priority.NORMAL,
        status: str | Status = Status.PENDING,
        due_date: str | date | None = None,
    ) -> Task:
        """Create a new task.

        Args:
            title: Task title (required)
            description: Detailed description
            priority: Priority name
            status: Initial status
            due_date: Due date (ISO format or date); defaults to a week from today

        Returns:
            Created Task object
        """
        data = {
            "title": title,
            "description": description,
            "priority": priority,
            "status": status,
        }
        parsed_due_date = _parse_date(due_date)
        if parsed_due_date is not None:
            data["due_date"] = parsed_due_date

        return await self.add_task(TaskCreate(**data))

    async def add_task(self, task: TaskCreate) -> Task:
        """Store an already validated task."""
        return await self.repository.add(task)

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        priority: str | Priority | None = None,
        status: str | Status | None = None,
        due_date: str | date | None = None,
    ) -> Task:
        """Update an existing task; only the given fields change."""
        updates = TaskUpdate(
            title=title,
            description=description,
            priority=priority,
            status=status,
            due_date=_parse_date(due_date),
        )
        return await self.repository.update(task_id, updates)

    async def update_task_status(self, task_id: int, status: str | Status) -> Task:
        """Move a task to a new status."""
        return await self.repository.update_status(task_id, Status(status))

    async def delete_task(self, task_id: int) -> bool:
        """Delete a task."""
        return await self.repository.delete(task_id)

    @staticmethod
    def get_filter_options() -> dict[str, list[str]]:
        """Status and priority choices for filtering, each starting with "All"."""
        return {
            "status": [ALL_OPTION] + [s.value for s in Status],
            "priority": [ALL_OPTION] + [p.value for p in Priority],
        }
