"""Custom exceptions for TodoTask."""


class TodoTaskError(Exception):
    """Base exception for all TodoTask domain errors."""


class NotFoundError(TodoTaskError):
    """Raised when a task does not exist (or was deleted)."""

    def __init__(self, task_id: int):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class ImportFileError(TodoTaskError):
    """Raised when a CSV import file is missing, empty or of the wrong type."""
