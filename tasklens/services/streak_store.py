"""Load/save boundary for the persisted streak state.

The state is stored as a single JSON object with camelCase keys, the same
shape client storage keeps under ``streak-data``. Damaged or missing data
decodes to None so callers can fall back to defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol, Union

from pydantic import ValidationError

from tasklens.schemas.streak import StreakState

logger = logging.getLogger(__name__)


def encode_streak_state(state: StreakState) -> str:
    return state.model_dump_json(by_alias=True)


def decode_streak_state(raw: Union[str, bytes, dict, None]) -> Optional[StreakState]:
    """Parse persisted state; returns None for absent or corrupt data."""
    if raw is None:
        return None
    data: Any = raw
    if isinstance(raw, (str, bytes)):
        if not raw.strip():
            return None
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Discarding unreadable streak state: %s", exc)
            return None
    if not isinstance(data, dict):
        logger.warning("Discarding streak state of type %s", type(data).__name__)
        return None
    try:
        return StreakState.model_validate(data)
    except ValidationError as exc:
        logger.warning("Discarding invalid streak state: %s", exc)
        return None


class StreakStateStore(Protocol):
    def load(self) -> Optional[StreakState]: ...

    def save(self, state: StreakState) -> None: ...


class InMemoryStreakStateStore:
    def __init__(self, state: Optional[StreakState] = None):
        self.state = state
        self.saves = 0

    def load(self) -> Optional[StreakState]:
        return self.state

    def save(self, state: StreakState) -> None:
        self.state = state
        self.saves += 1


class JsonFileStreakStateStore:
    """Keeps the state in a JSON file; last write wins."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[StreakState]:
        # Bytes go straight to the decoder, which treats bad encodings as corrupt.
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read streak state from %s: %s", self.path, exc)
            return None
        return decode_streak_state(raw)

    def save(self, state: StreakState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(encode_streak_state(state), encoding="utf-8")
        tmp.replace(self.path)
