import enum
from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from tasklens.schemas.base import CamelModel
from tasklens.schemas.task import Task, normalize_tasks, to_local_naive


class RangeMode(str, enum.Enum):
    day = "day"
    week = "week"

    @classmethod
    def _missing_(cls, value):
        # The dashboard toggle historically sent "daily"/"weekly".
        if isinstance(value, str):
            return {"daily": cls.day, "weekly": cls.week}.get(value.strip().lower())
        return None


class Direction(str, enum.Enum):
    prev = "prev"
    next = "next"


class DateRange(CamelModel):
    model_config = ConfigDict(frozen=True)

    mode: RangeMode
    start: datetime
    end: datetime
    label: str


class PriorityCount(CamelModel):
    model_config = ConfigDict(frozen=True)

    completed: int = 0
    total: int = 0


class PriorityBreakdown(CamelModel):
    model_config = ConfigDict(frozen=True)

    high: PriorityCount = PriorityCount()
    medium: PriorityCount = PriorityCount()
    low: PriorityCount = PriorityCount()


class Metrics(CamelModel):
    model_config = ConfigDict(frozen=True)

    completed_count: int
    pending_count: int
    overdue_count: int
    total_in_range: int
    total_time_tracked_minutes: int
    total_time_estimated_minutes: int
    productivity_score: int = Field(..., ge=0, le=100)
    priority_breakdown: PriorityBreakdown
    recent_completions: list[Task] = []


class MetricsRequest(CamelModel):
    tasks: list[Task] = []
    mode: RangeMode = RangeMode.day
    reference_date: Optional[datetime] = None
    now: Optional[datetime] = None

    @field_validator("tasks", mode="before")
    @classmethod
    def _snapshot(cls, v: Any) -> Any:
        return normalize_tasks(v) if isinstance(v, list) else v

    @field_validator("reference_date", "now")
    @classmethod
    def _local(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(v) if v is not None else None


class MetricsResponse(CamelModel):
    date_range: DateRange
    metrics: Metrics


class NavigateRequest(CamelModel):
    mode: RangeMode = RangeMode.day
    reference_date: datetime
    direction: Direction

    @field_validator("reference_date")
    @classmethod
    def _local(cls, v: datetime) -> datetime:
        return to_local_naive(v)


class NavigateResponse(CamelModel):
    reference_date: datetime
    date_range: DateRange
