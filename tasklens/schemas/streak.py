from datetime import date
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from tasklens.schemas.base import CamelModel
from tasklens.schemas.task import Task, normalize_tasks

DEFAULT_WEEKLY_GOAL = 5
DEFAULT_MONTHLY_GOAL = 20


class StreakState(CamelModel):
    model_config = ConfigDict(frozen=True)

    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_active_date: Optional[date] = None
    total_days_active: int = Field(0, ge=0)
    weekly_goal: int = Field(DEFAULT_WEEKLY_GOAL, ge=0)
    monthly_goal: int = Field(DEFAULT_MONTHLY_GOAL, ge=0)


class StreakSummary(CamelModel):
    state: StreakState
    weekly_progress: int = Field(..., ge=0, le=100)
    completed_today: int
    high_priority_done: int
    tier_emoji: str
    message: str


class StreakRecomputeRequest(CamelModel):
    tasks: list[Task] = []
    today: Optional[date] = None

    @field_validator("tasks", mode="before")
    @classmethod
    def _snapshot(cls, v: Any) -> Any:
        return normalize_tasks(v) if isinstance(v, list) else v


class StreakGoalsUpdate(CamelModel):
    weekly_goal: Optional[int] = Field(None, ge=1)
    monthly_goal: Optional[int] = Field(None, ge=1)
