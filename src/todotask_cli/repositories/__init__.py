"""Repository interfaces."""

from todotask_cli.repositories.repository import TaskRepository

__all__ = ["TaskRepository"]
