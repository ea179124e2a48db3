"""Task data models."""

from __future__ import annotations

import re
from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, Field, field_validator

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

_PLAIN_TEXT = re.compile(r"^[a-zA-Z0-9\s]*$")


class Priority(str, Enum):
    """Task priority level."""

    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"


class Status(str, Enum):
    """Task workflow status."""

    PENDING = "Pending"
    HOLD = "Hold"
    COMPLETED = "Completed"


def default_due_date() -> date:
    """New tasks are due one week from today unless told otherwise."""
    return date.today() + timedelta(days=7)


def _check_plain_text(value: str | None, field: str) -> str | None:
    if value is not None and not _PLAIN_TEXT.match(value):
        raise ValueError(f"{field} cannot contain special characters")
    return value


class Task(BaseModel):
    """Task model representing a stored task.

    Attributes:
        id: Unique identifier assigned by the store
        title: Short task title
        description: Optional longer description
        priority: Low, Normal or High
        status: Pending, Hold or Completed
        due_date: Date the task is due
        created_date: Date the task was created (never changes)
        updated_date: Date of the last update, if any
        completed_date: Date the task was completed, if it is completed
    """

    id: int
    title: str
    description: str | None = None
    priority: Priority = Priority.NORMAL
    status: Status = Status.PENDING
    due_date: date
    created_date: date
    updated_date: date | None = None
    completed_date: date | None = None


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Title and description accept letters, digits and whitespace only.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    priority: Priority = Priority.NORMAL
    status: Status = Status.PENDING
    due_date: date = Field(default_factory=default_due_date)

    @field_validator("title")
    @classmethod
    def _title_plain(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return _check_plain_text(value, "Title")

    @field_validator("description")
    @classmethod
    def _description_plain(cls, value: str | None) -> str | None:
        return _check_plain_text(value, "Description")


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    All fields are optional - only provided fields will be updated.
    """

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    priority: Priority | None = None
    status: Status | None = None
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def _title_plain(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("Title is required")
        return _check_plain_text(value, "Title")

    @field_validator("description")
    @classmethod
    def _description_plain(cls, value: str | None) -> str | None:
        return _check_plain_text(value, "Description")


class TaskFilters(BaseModel):
    """Filters for querying tasks.

    ``"All"`` for status or priority is accepted and means no filtering,
    matching the option lists returned by ``TaskService.get_filter_options``.

    Attributes:
        status: Filter by status
        priority: Filter by priority
        search: Substring match on title or description
    """

    status: Status | None = None
    priority: Priority | None = None
    search: str | None = None

    @field_validator("status", "priority", "search", mode="before")
    @classmethod
    def _all_means_none(cls, value):
        if isinstance(value, str) and (value == "All" or not value.strip()):
            return None
        return value
