"""Streak state endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from tasklens.api.v1.deps import get_default_state, get_profile, get_today
from tasklens.database import get_db
from tasklens.schemas.streak import (
    StreakGoalsUpdate,
    StreakRecomputeRequest,
    StreakState,
    StreakSummary,
)
from tasklens.services import streak_service

router = APIRouter(prefix="/streaks", tags=["streaks"])


@router.get("", response_model=StreakState)
async def get_streak(
    db: Annotated[AsyncSession, Depends(get_db)],
    profile: Annotated[str, Depends(get_profile)],
    defaults: Annotated[StreakState, Depends(get_default_state)],
):
    return await streak_service.get_state(db, profile, defaults)


@router.post("/recompute", response_model=StreakSummary)
async def recompute_streak(
    body: StreakRecomputeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    profile: Annotated[str, Depends(get_profile)],
    defaults: Annotated[StreakState, Depends(get_default_state)],
    today: Annotated[date, Depends(get_today)],
):
    today = body.today or today
    state = await streak_service.reconcile_profile(db, profile, body.tasks, today, defaults)
    return streak_service.summarize_streak(state, body.tasks, today)


@router.put("/goals", response_model=StreakState)
async def update_goals(
    body: StreakGoalsUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    profile: Annotated[str, Depends(get_profile)],
    defaults: Annotated[StreakState, Depends(get_default_state)],
):
    if body.weekly_goal is None and body.monthly_goal is None:
        raise HTTPException(422, "weekly_goal or monthly_goal required")
    return await streak_service.update_goals(
        db, profile, body.weekly_goal, body.monthly_goal, defaults
    )
