"""Activity streaks derived from task completion days."""

import asyncio
import logging
import threading
import weakref
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from tasklens.crud.streak_states import crud_streak_state
from tasklens.schemas.streak import (
    DEFAULT_MONTHLY_GOAL,
    DEFAULT_WEEKLY_GOAL,
    StreakState,
    StreakSummary,
)
from tasklens.schemas.task import Task
from tasklens.services import display
from tasklens.services.metrics_service import completed_on_day, high_priority_done
from tasklens.services.streak_store import StreakStateStore

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
WEEK_WINDOW_DAYS = 7


def default_streak_state(
    weekly_goal: int = DEFAULT_WEEKLY_GOAL, monthly_goal: int = DEFAULT_MONTHLY_GOAL
) -> StreakState:
    return StreakState(weekly_goal=weekly_goal, monthly_goal=monthly_goal)


def active_days(tasks: Iterable[Task]) -> list[date]:
    """Distinct completion days, most recent first.

    Completed tasks without a completion instant are ignored: a streak has to
    be anchored to the day the work was actually done.
    """
    days = {t.completed_at.date() for t in tasks if t.completed and t.completed_at is not None}
    return sorted(days, reverse=True)


def current_streak(days: Sequence[date], today: date) -> int:
    """Consecutive active days ending today, or yesterday if today is still open.

    ``days`` must be distinct and sorted most recent first.
    """
    if not days or days[0] not in (today, today - ONE_DAY):
        return 0
    streak = 0
    expected = days[0]
    for day in days:
        if day != expected:
            break
        streak += 1
        expected -= ONE_DAY
    return streak


def longest_run(days: Sequence[date]) -> int:
    """Longest run of consecutive calendar days in ``days`` (any order, distinct)."""
    ordered = sorted(days)
    if not ordered:
        return 0
    longest = run = 1
    for prev, day in zip(ordered, ordered[1:]):
        if (day - prev).days == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def recompute_streak(previous: StreakState, tasks: Sequence[Task], today: date) -> StreakState:
    """Derive fresh streak figures from the snapshot.

    Everything except ``longest_streak`` is recomputed from scratch; the
    longest streak only ever moves up. Goals are carried over untouched.
    """
    days = active_days(tasks)
    return previous.model_copy(
        update={
            "current_streak": current_streak(days, today),
            "longest_streak": max(longest_run(days), previous.longest_streak),
            "last_active_date": days[0] if days else None,
            "total_days_active": len(days),
        }
    )


def weekly_progress(tasks: Sequence[Task], today: date, weekly_goal: int) -> int:
    """Active days in the trailing week (today inclusive) as a percent of the goal."""
    if weekly_goal <= 0:
        return 0
    window_start = today - timedelta(days=WEEK_WINDOW_DAYS - 1)
    active = sum(1 for d in active_days(tasks) if window_start <= d <= today)
    return min(100, max(0, active * 100 // weekly_goal))


def summarize_streak(state: StreakState, tasks: Sequence[Task], today: date) -> StreakSummary:
    return StreakSummary(
        state=state,
        weekly_progress=weekly_progress(tasks, today, state.weekly_goal),
        completed_today=len(completed_on_day(tasks, today)),
        high_priority_done=len(high_priority_done(tasks)),
        tier_emoji=display.streak_emoji(state.current_streak),
        message=display.streak_message(state.current_streak),
    )


_store_lock = threading.Lock()


def refresh_streak(
    store: StreakStateStore,
    tasks: Sequence[Task],
    today: date,
    defaults: Optional[StreakState] = None,
) -> StreakState:
    """Load, recompute and save the state held by ``store`` as one step."""
    with _store_lock:
        previous = store.load() or defaults or default_streak_state()
        state = recompute_streak(previous, tasks, today)
        store.save(state)
    return state


# Reconciliation for the SQL-backed store, serialised per profile. An entry
# lives only while some request holds or waits on its lock.
_profile_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def _lock_for(profile: str) -> asyncio.Lock:
    lock = _profile_locks.get(profile)
    if lock is None:
        lock = asyncio.Lock()
        _profile_locks[profile] = lock
    return lock


async def get_state(
    db: AsyncSession, profile: str, defaults: Optional[StreakState] = None
) -> StreakState:
    return await crud_streak_state.load(db, profile) or defaults or default_streak_state()


async def reconcile_profile(
    db: AsyncSession,
    profile: str,
    tasks: Sequence[Task],
    today: date,
    defaults: Optional[StreakState] = None,
) -> StreakState:
    async with _lock_for(profile):
        previous = await get_state(db, profile, defaults)
        state = recompute_streak(previous, tasks, today)
        await crud_streak_state.save(db, profile, state)
        # Commit before releasing the lock so the next reconcile reads this state.
        await db.commit()
    if state.longest_streak > previous.longest_streak:
        logger.info(
            "New longest streak for profile %s: %d days", profile, state.longest_streak
        )
    return state


async def update_goals(
    db: AsyncSession,
    profile: str,
    weekly_goal: Optional[int] = None,
    monthly_goal: Optional[int] = None,
    defaults: Optional[StreakState] = None,
) -> StreakState:
    updates = {}
    if weekly_goal is not None:
        updates["weekly_goal"] = weekly_goal
    if monthly_goal is not None:
        updates["monthly_goal"] = monthly_goal
    async with _lock_for(profile):
        state = (await get_state(db, profile, defaults)).model_copy(update=updates)
        await crud_streak_state.save(db, profile, state)
        await db.commit()
    return state
