"""Dashboard statistics.

``compute_dashboard_snapshot`` is a pure function of (tasks, today): it never
mutates the tasks it is given and holds no state between calls, so equal
inputs always produce equal snapshots. ``DashboardService`` only adds the
step of loading every task from the repository first.

Task creation is bucketed weekly: five consecutive 7-day buckets ending on
``today``, labelled "Week 1" (oldest) to "Week 5" (the week ending today).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import ROUND_HALF_EVEN, Decimal

from todotask_cli.models import (
    DashboardSnapshot,
    Priority,
    Status,
    Task,
    WeeklyTaskData,
)
from todotask_cli.repositories import TaskRepository
from todotask_cli.utils.logger import get_logger

HISTOGRAM_WEEKS = 5
DAYS_PER_WEEK = 7

_REQUIRED_FIELDS = ("status", "priority", "due_date", "created_date")


def percentage(count: int, total: int) -> float:
    """Share of ``count`` in ``total`` as a percentage with one decimal.

    Exact halves round to the even digit (6.25 -> 6.2, 18.75 -> 18.8) on the
    decimal value, so binary float error never decides the tie. Returns 0.0
    when ``total`` is zero.
    """
    if total <= 0:
        return 0.0
    value = Decimal(count) * 100 / Decimal(total)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_EVEN))


def weekly_buckets(today: date, weeks: int = HISTOGRAM_WEEKS) -> list[tuple[date, date]]:
    """Inclusive (start, end) ranges of the histogram window, oldest first."""
    window_start = today - timedelta(days=weeks * DAYS_PER_WEEK - 1)
    return [
        (
            window_start + timedelta(days=i * DAYS_PER_WEEK),
            window_start + timedelta(days=i * DAYS_PER_WEEK + DAYS_PER_WEEK - 1),
        )
        for i in range(weeks)
    ]


def _is_well_formed(task: Task) -> bool:
    return all(getattr(task, field, None) is not None for field in _REQUIRED_FIELDS)


def compute_dashboard_snapshot(tasks: Iterable[Task], today: date) -> DashboardSnapshot:
    """Aggregate counts, percentages and the weekly creation histogram.

    Args:
        tasks: Every current task (unfiltered)
        today: Reference date for "upcoming" and for the histogram window

    Returns:
        A new DashboardSnapshot
    """
    buckets = weekly_buckets(today)
    window_start = buckets[0][0]
    created_per_week = [0] * len(buckets)

    status_counts = {status: 0 for status in Status}
    priority_counts = {priority: 0 for priority in Priority}
    total = 0
    upcoming = 0
    skipped = 0

    for task in tasks:
        if not _is_well_formed(task):
            skipped += 1
            continue

        total += 1
        status = Status(task.status)
        status_counts[status] += 1
        priority_counts[Priority(task.priority)] += 1

        if task.due_date > today and status != Status.COMPLETED:
            upcoming += 1

        if window_start <= task.created_date <= today:
            created_per_week[(task.created_date - window_start).days // DAYS_PER_WEEK] += 1

    if skipped:
        get_logger().debug("dashboard skipped %d malformed task(s)", skipped)

    return DashboardSnapshot(
        total_tasks=total,
        completed_tasks=status_counts[Status.COMPLETED],
        pending_tasks=status_counts[Status.PENDING],
        on_hold_tasks=status_counts[Status.HOLD],
        upcoming_tasks=upcoming,
        completed_percentage=percentage(status_counts[Status.COMPLETED], total),
        pending_percentage=percentage(status_counts[Status.PENDING], total),
        on_hold_percentage=percentage(status_counts[Status.HOLD], total),
        high_priority_tasks=priority_counts[Priority.HIGH],
        normal_priority_tasks=priority_counts[Priority.NORMAL],
        low_priority_tasks=priority_counts[Priority.LOW],
        high_priority_percentage=percentage(priority_counts[Priority.HIGH], total),
        normal_priority_percentage=percentage(priority_counts[Priority.NORMAL], total),
        low_priority_percentage=percentage(priority_counts[Priority.LOW], total),
        weekly_task_creation=[
            WeeklyTaskData(
                week_label=f"Week {i + 1}",
                week_start_date=start,
                week_end_date=end,
                tasks_created=created_per_week[i],
            )
            for i, (start, end) in enumerate(buckets)
        ],
    )


class DashboardService:
    """Builds dashboard snapshots from the task repository."""

    def __init__(self, task_repository: TaskRepository):
        self.repository = task_repository

    async def get_snapshot(self, today: date | None = None) -> DashboardSnapshot:
        """Load every task and aggregate it.

        Args:
            today: Reference date (defaults to the local date)
        """
        tasks = await self.repository.list_all()
        return compute_dashboard_snapshot(tasks, today or date.today())
