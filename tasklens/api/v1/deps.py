"""FastAPI dependencies."""

from datetime import date
from typing import Annotated, Optional

from fastapi import Depends, Query

from tasklens.config import Settings, get_settings
from tasklens.schemas.streak import StreakState
from tasklens.services.streak_service import default_streak_state


def get_profile(
    settings: Annotated[Settings, Depends(get_settings)],
    profile: Annotated[Optional[str], Query(max_length=100)] = None,
) -> str:
    return profile or settings.DEFAULT_PROFILE


def get_default_state(settings: Annotated[Settings, Depends(get_settings)]) -> StreakState:
    return default_streak_state(settings.DEFAULT_WEEKLY_GOAL, settings.DEFAULT_MONTHLY_GOAL)


def get_week_start(settings: Annotated[Settings, Depends(get_settings)]) -> int:
    return settings.get_week_start()


def get_today() -> date:
    return date.today()
