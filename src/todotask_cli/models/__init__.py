"""TodoTask CLI domain models.

Pydantic models for tasks, the dashboard snapshot and configuration.
"""

from .config_models import AppConfig, DashboardConfig, OutputConfig
from .dashboard import DashboardSnapshot, WeeklyTaskData
from .exceptions import ImportFileError, NotFoundError, TodoTaskError
from .task import (
    Priority,
    Status,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)

__all__ = [
    # Task models
    "Priority",
    "Status",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    # Dashboard models
    "DashboardSnapshot",
    "WeeklyTaskData",
    # Config models
    "AppConfig",
    "OutputConfig",
    "DashboardConfig",
    # Errors
    "TodoTaskError",
    "NotFoundError",
    "ImportFileError",
]
