"""Repository abstraction layer for TodoTask CLI.

This module defines the abstract base class (interface) for task persistence,
following the Ports & Adapters pattern. Business logic depends on this
interface only, never on the SQLite adapter directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todotask_cli.models import Status, Task, TaskCreate, TaskFilters, TaskUpdate


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    async def list_all(self, filters: TaskFilters | None = None) -> list[Task]:
        """List tasks, optionally filtered.

        Args:
            filters: TaskFilters object specifying filter criteria, or None
                for every non-deleted task

        Returns:
            List of Task objects matching the filters
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    async def get(self, task_id: int) -> Task:
        """Get a specific task by ID.

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    async def add(self, task_data: TaskCreate) -> Task:
        """Create a new task and return it with its generated ID and dates."""
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    async def update(self, task_id: int, updates: TaskUpdate) -> Task:
        """Update an existing task.

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        """Delete a task.

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    async def update_status(self, task_id: int, status: Status) -> Task:
        """Change only the status of a task.

        Raises:
            NotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update_status() must be implemented by adapter"
        )
