from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasklens.models.streak_state import StreakStateRecord
from tasklens.schemas.streak import StreakState
from tasklens.services.streak_store import decode_streak_state, encode_streak_state


class CRUDStreakState:
    async def get_by_profile(self, db: AsyncSession, profile: str) -> Optional[StreakStateRecord]:
        result = await db.execute(
            select(StreakStateRecord).where(StreakStateRecord.profile == profile)
        )
        return result.scalar_one_or_none()

    async def load(self, db: AsyncSession, profile: str) -> Optional[StreakState]:
        """Stored state for ``profile``, or None when absent or unreadable."""
        record = await self.get_by_profile(db, profile)
        if record is None:
            return None
        return decode_streak_state(record.payload)

    async def save(self, db: AsyncSession, profile: str, state: StreakState) -> StreakStateRecord:
        record = await self.get_by_profile(db, profile)
        payload = encode_streak_state(state)
        if record is None:
            record = StreakStateRecord(profile=profile, payload=payload)
            db.add(record)
        else:
            record.payload = payload
        await db.flush()
        return record


crud_streak_state = CRUDStreakState()
