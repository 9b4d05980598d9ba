"""Unit tests for day/week range resolution."""
from datetime import date, datetime, time, timedelta

import pytest

from tasklens.schemas.metrics import Direction, RangeMode
from tasklens.services.date_range import SUNDAY, resolve_range, shift_reference, week_start_for


def test_day_range_spans_full_local_day():
    r = resolve_range(datetime(2024, 1, 10, 15, 42), RangeMode.day)
    assert r.start == datetime(2024, 1, 10, 0, 0)
    assert r.end == datetime(2024, 1, 10, 23, 59, 59, 999999)
    assert r.label == "Wednesday, Jan 10"
    assert r.mode == RangeMode.day


def test_day_range_ignores_time_of_day():
    assert resolve_range(datetime(2024, 1, 10, 0, 0)) == resolve_range(
        datetime(2024, 1, 10, 23, 59)
    )


def test_week_range_starts_on_sunday_by_default():
    r = resolve_range(date(2024, 1, 10), RangeMode.week)
    assert r.start == datetime(2024, 1, 7)
    assert r.end == datetime.combine(date(2024, 1, 13), time.max)
    assert r.label == "Week of Jan 7"


def test_week_range_on_the_start_day_itself():
    r = resolve_range(date(2024, 1, 7), RangeMode.week)
    assert r.start == datetime(2024, 1, 7)


def test_week_range_with_monday_start():
    r = resolve_range(date(2024, 1, 7), RangeMode.week, week_start=0)
    assert r.start == datetime(2024, 1, 1)
    assert r.end.date() == date(2024, 1, 7)


@pytest.mark.parametrize("offset", range(7))
def test_every_day_of_a_week_resolves_to_the_same_week(offset):
    day = date(2024, 1, 7) + timedelta(days=offset)
    assert week_start_for(day, SUNDAY) == date(2024, 1, 7)


def test_legacy_mode_names_are_accepted():
    assert RangeMode("daily") is RangeMode.day
    assert RangeMode("weekly") is RangeMode.week


@pytest.mark.parametrize("mode,days", [(RangeMode.day, 1), (RangeMode.week, 7)])
def test_shift_reference_steps(mode, days):
    ref = datetime(2024, 1, 10, 12, 0)
    assert shift_reference(ref, mode, Direction.next) == ref + timedelta(days=days)
    assert shift_reference(ref, mode, Direction.prev) == ref - timedelta(days=days)


@pytest.mark.parametrize("mode", list(RangeMode))
def test_next_then_prev_returns_to_the_original_range(mode):
    ref = datetime(2024, 2, 29, 8, 0)
    moved = shift_reference(shift_reference(ref, mode, Direction.next), mode, Direction.prev)
    assert resolve_range(moved, mode) == resolve_range(ref, mode)
