"""Resolve day/week windows for the review dashboard."""

from datetime import date, datetime, time, timedelta
from typing import Union

from tasklens.schemas.metrics import DateRange, Direction, RangeMode

SUNDAY = 6  # date.weekday() numbering, 0=Mon

_DAY_END = time(23, 59, 59, 999999)


def _as_day(reference: Union[date, datetime]) -> date:
    return reference.date() if isinstance(reference, datetime) else reference


def week_start_for(day: date, week_start: int = SUNDAY) -> date:
    """First day of the week containing ``day``."""
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def resolve_range(
    reference: Union[date, datetime],
    mode: RangeMode = RangeMode.day,
    week_start: int = SUNDAY,
) -> DateRange:
    """Return the inclusive window of ``mode`` containing ``reference``.

    Time of day on the reference is ignored. Day labels read
    ``"Wednesday, Jan 10"``, week labels ``"Week of Jan 7"``.
    """
    mode = RangeMode(mode)
    day = _as_day(reference)
    if mode == RangeMode.day:
        first = last = day
        label = f"{day:%A}, {day:%b} {day.day}"
    else:
        first = week_start_for(day, week_start)
        last = first + timedelta(days=6)
        label = f"Week of {first:%b} {first.day}"
    return DateRange(
        mode=mode,
        start=datetime.combine(first, time.min),
        end=datetime.combine(last, _DAY_END),
        label=label,
    )


def shift_reference(
    reference: datetime, mode: RangeMode, direction: Direction
) -> datetime:
    """Move the reference one step: 1 day in day mode, 7 days in week mode."""
    step = 1 if RangeMode(mode) == RangeMode.day else 7
    if Direction(direction) == Direction.prev:
        step = -step
    return reference + timedelta(days=step)
