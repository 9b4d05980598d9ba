from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tasklens.models.base import Base, TimestampMixin


class StreakStateRecord(Base, TimestampMixin):
    """Persisted streak state, one row per profile.

    ``payload`` holds the JSON object written by ``encode_streak_state``; it is
    kept as text so that a damaged value can be detected and replaced instead
    of failing at the ORM layer.
    """

    __tablename__ = "streak_states"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
