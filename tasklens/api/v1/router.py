"""Aggregates all v1 routers."""
from fastapi import APIRouter
from tasklens.api.v1.analytics import router as analytics_router
from tasklens.api.v1.streaks import router as streaks_router

router = APIRouter()
router.include_router(analytics_router)
router.include_router(streaks_router)
