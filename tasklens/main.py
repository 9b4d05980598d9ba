"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasklens.config import get_settings
from tasklens.database import init_models

logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.APP_DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting TaskLens...")
    await init_models()
    logger.info("Database ready, week starts on %s", settings.WEEK_START)
    yield
    logger.info("TaskLens stopped")


app = FastAPI(
    title="TaskLens",
    description="Task analytics and streak tracking for a personal task manager",
    version="0.1.0",
    lifespan=lifespan,
)

# The task manager runs in the browser and talks to this service directly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from tasklens.api.v1.router import router as api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health():
    """Basic liveness probe."""
    return {"status": "ok", "service": "tasklens"}


@app.get("/health/ready")
async def health_ready():
    """Readiness: the streak table is reachable; reports how many profiles it holds."""
    from sqlalchemy import func, select
    from sqlalchemy.exc import SQLAlchemyError

    from tasklens.database import engine
    from tasklens.models.streak_state import StreakStateRecord

    try:
        async with engine.connect() as conn:
            profiles = await conn.scalar(
                select(func.count()).select_from(StreakStateRecord)
            )
    except SQLAlchemyError as exc:
        logger.error("Streak store not ready: %s", exc)
        return JSONResponse(
            {"status": "not_ready", "streak_store": "unavailable"}, status_code=503
        )
    return {"status": "ready", "streak_store": "ok", "profiles": profiles}
