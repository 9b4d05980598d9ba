"""Decide which tasks belong to a date range."""

import enum
from datetime import datetime
from typing import Iterable, Optional

from tasklens.schemas.metrics import DateRange
from tasklens.schemas.task import Task


class MembershipRule(str, enum.Enum):
    due = "due"
    completed = "completed"
    created = "created"


def in_range(instant: Optional[datetime], date_range: DateRange) -> bool:
    if instant is None:
        return False
    return date_range.start <= instant <= date_range.end


def membership_rule(task: Task, date_range: DateRange) -> Optional[MembershipRule]:
    """Return the rule that places ``task`` in ``date_range``, or None.

    Rules are tried in order: due date, then completion time, then creation
    time for tasks without a due date. A task due outside the range but
    completed inside it belongs through the completion rule; a task due
    outside the range is never placed by its creation time.
    """
    if in_range(task.due_date, date_range):
        return MembershipRule.due
    if in_range(task.completed_at, date_range):
        return MembershipRule.completed
    if task.due_date is None and in_range(task.created_at, date_range):
        return MembershipRule.created
    return None


def tasks_in_range(tasks: Iterable[Task], date_range: DateRange) -> list[Task]:
    """In-range tasks, in snapshot order."""
    return [task for task in tasks if membership_rule(task, date_range) is not None]
