"""Dashboard snapshot models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class WeeklyTaskData(BaseModel):
    """Task-creation count for one 7-day bucket."""

    model_config = ConfigDict(frozen=True)

    week_label: str
    week_start_date: date
    week_end_date: date
    tasks_created: int = 0


class DashboardSnapshot(BaseModel):
    """Aggregated statistics for one dashboard render.

    Percentages are in [0, 100], rounded to one decimal place, and 0.0 when
    there are no tasks.
    """

    model_config = ConfigDict(frozen=True)

    total_tasks: int = 0
    completed_tasks: int = 0
    pending_tasks: int = 0
    on_hold_tasks: int = 0
    upcoming_tasks: int = 0

    completed_percentage: float = 0.0
    pending_percentage: float = 0.0
    on_hold_percentage: float = 0.0

    high_priority_tasks: int = 0
    normal_priority_tasks: int = 0
    low_priority_tasks: int = 0

    high_priority_percentage: float = 0.0
    normal_priority_percentage: float = 0.0
    low_priority_percentage: float = 0.0

    weekly_task_creation: list[WeeklyTaskData] = Field(default_factory=list)
