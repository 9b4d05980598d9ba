from tasklens.models.base import Base, TimestampMixin
from tasklens.models.streak_state import StreakStateRecord

__all__ = [
    "Base",
    "TimestampMixin",
    "StreakStateRecord",
]
