from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./tasklens.db"

    # App
    APP_DEBUG: bool = False
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # Analytics
    # First day of the calendar week used by week-mode ranges.
    WEEK_START: str = "sunday"

    # Streaks
    DEFAULT_PROFILE: str = "default"
    DEFAULT_WEEKLY_GOAL: int = 5
    DEFAULT_MONTHLY_GOAL: int = 20

    @field_validator("WEEK_START", mode="before")
    @classmethod
    def parse_week_start(cls, v: str) -> str:
        value = (v or "sunday").strip().lower()
        if value not in WEEKDAYS:
            raise ValueError(f"WEEK_START must be one of {', '.join(WEEKDAYS)}")
        return value

    def get_week_start(self) -> int:
        """Week start as a ``date.weekday()`` number (0=Mon, 6=Sun)."""
        return WEEKDAYS.index(self.WEEK_START)


@lru_cache
def get_settings() -> Settings:
    return Settings()
