"""Productivity metrics for a day or week of tasks."""

import logging
from datetime import date, datetime
from typing import Sequence

from tasklens.schemas.metrics import DateRange, Metrics, PriorityBreakdown, PriorityCount
from tasklens.schemas.task import Priority, Task, to_local_naive
from tasklens.services.range_filter import in_range, membership_rule

logger = logging.getLogger(__name__)

RECENT_COMPLETIONS_LIMIT = 5


def completed_in_range(tasks: Sequence[Task], date_range: DateRange) -> list[Task]:
    """Completed tasks scoped by completion time.

    A task with a completion instant counts only when that instant is inside
    the range. A completed task without one falls back to range membership.
    """
    result = []
    for task in tasks:
        if not task.completed:
            continue
        if task.completed_at is not None:
            if in_range(task.completed_at, date_range):
                result.append(task)
        elif membership_rule(task, date_range) is not None:
            result.append(task)
    return result


def overdue_tasks(tasks: Sequence[Task], now: datetime) -> list[Task]:
    """Incomplete tasks due strictly before ``now``, regardless of any range."""
    return [t for t in tasks if not t.completed and t.due_date is not None and t.due_date < now]


def productivity_score(completed: int, total: int) -> int:
    """Completion rate as a whole percent, rounded half up; 0 for an empty range."""
    if total <= 0:
        return 0
    score = (completed * 200 + total) // (2 * total)
    return min(100, max(0, score))


def priority_breakdown(ranged: Sequence[Task]) -> PriorityBreakdown:
    # Tasks without a recognised priority are left out of every bucket.
    counts = {}
    for priority in Priority:
        bucket = [t for t in ranged if t.priority == priority]
        counts[priority.value] = PriorityCount(
            completed=sum(1 for t in bucket if t.completed),
            total=len(bucket),
        )
    return PriorityBreakdown(**counts)


def compute_metrics(tasks: Sequence[Task], date_range: DateRange, now: datetime) -> Metrics:
    now = to_local_naive(now)
    ranged = [t for t in tasks if membership_rule(t, date_range) is not None]
    completed = completed_in_range(tasks, date_range)
    pending = [t for t in ranged if not t.completed]
    metrics = Metrics(
        completed_count=len(completed),
        pending_count=len(pending),
        overdue_count=len(overdue_tasks(tasks, now)),
        total_in_range=len(ranged),
        total_time_tracked_minutes=sum(t.actual_minutes for t in ranged),
        total_time_estimated_minutes=sum(t.estimated_minutes for t in ranged),
        productivity_score=productivity_score(len(completed), len(ranged)),
        priority_breakdown=priority_breakdown(ranged),
        recent_completions=completed[:RECENT_COMPLETIONS_LIMIT],
    )
    logger.debug(
        "Metrics for %s: %d/%d completed, %d pending, %d overdue",
        date_range.label,
        metrics.completed_count,
        metrics.total_in_range,
        metrics.pending_count,
        metrics.overdue_count,
    )
    return metrics


def completed_on_day(tasks: Sequence[Task], day: date) -> list[Task]:
    """Tasks whose completion instant falls on ``day``."""
    return [
        t for t in tasks
        if t.completed and t.completed_at is not None and t.completed_at.date() == day
    ]


def high_priority_done(tasks: Sequence[Task]) -> list[Task]:
    return [t for t in tasks if t.completed and t.priority == Priority.high]
