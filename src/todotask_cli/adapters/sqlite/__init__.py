"""SQLite adapter module - Local database storage implementation."""

from todotask_cli.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = ["SqliteTaskRepository"]
