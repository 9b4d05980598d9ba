"""Task snapshot records.

Tasks arrive from client storage partially filled in. Every defaulting rule is
applied here, once, so the analytics code can rely on fully-populated records.
"""

import enum
import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from pydantic import ConfigDict, ValidationError, field_validator

from tasklens.schemas.base import CamelModel

logger = logging.getLogger(__name__)


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to local wall-clock time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def coerce_instant(value: Any) -> Optional[datetime]:
    """Parse a stored instant into a naive local datetime.

    Accepts datetimes, dates, ISO-8601 strings and epoch milliseconds (what
    ``Date.now()`` writes). Anything unparseable yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            if text.lstrip("-").isdigit():
                return datetime.fromtimestamp(int(text) / 1000)
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return to_local_naive(datetime.fromisoformat(text))
    except (ValueError, OverflowError, OSError) as exc:
        logger.debug("Unparseable timestamp %r: %s", value, exc)
        return None
    logger.debug("Unsupported timestamp type %s", type(value).__name__)
    return None


class Task(CamelModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    text: str = ""
    completed: bool = False
    completed_at: Optional[datetime] = None
    due_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    # None means the stored value was not a recognised priority.
    priority: Optional[Priority] = Priority.medium
    estimated_minutes: int = 0
    actual_minutes: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("text", mode="before")
    @classmethod
    def _default_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("completed", mode="before")
    @classmethod
    def _default_completed(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("completed_at", "due_date", "created_at", mode="before")
    @classmethod
    def _parse_instant(cls, v: Any) -> Optional[datetime]:
        return coerce_instant(v)

    @field_validator("priority", mode="before")
    @classmethod
    def _parse_priority(cls, v: Any) -> Optional[Priority]:
        if v is None:
            return Priority.medium
        if isinstance(v, Priority):
            return v
        try:
            return Priority(str(v).strip().lower())
        except ValueError:
            return None

    @field_validator("estimated_minutes", "actual_minutes", mode="before")
    @classmethod
    def _parse_minutes(cls, v: Any) -> int:
        if v is None or isinstance(v, bool):
            return 0
        try:
            return max(0, int(v))
        except (TypeError, ValueError):
            return 0


def normalize_tasks(raw_tasks: Iterable[Any]) -> list[Task]:
    """Build a task snapshot from stored records.

    Records that cannot form a task at all (no id, not an object) are skipped
    so one damaged entry does not discard the whole snapshot.
    """
    snapshot: list[Task] = []
    for raw in raw_tasks:
        if isinstance(raw, Task):
            snapshot.append(raw)
            continue
        try:
            snapshot.append(Task.model_validate(raw))
        except ValidationError as exc:
            task_id = raw.get("id") if isinstance(raw, Mapping) else None
            logger.warning("Skipping malformed task record %r: %s", task_id, exc)
    return snapshot
