"""Review dashboard metrics."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from tasklens.api.v1.deps import get_week_start
from tasklens.schemas.metrics import (
    MetricsRequest,
    MetricsResponse,
    NavigateRequest,
    NavigateResponse,
)
from tasklens.services.date_range import resolve_range, shift_reference
from tasklens.services.metrics_service import compute_metrics

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("/metrics", response_model=MetricsResponse)
async def get_metrics(
    body: MetricsRequest,
    week_start: Annotated[int, Depends(get_week_start)],
):
    now = body.now or datetime.now()
    date_range = resolve_range(body.reference_date or now, body.mode, week_start)
    metrics = compute_metrics(body.tasks, date_range, now)
    return MetricsResponse(date_range=date_range, metrics=metrics)


@router.post("/navigate", response_model=NavigateResponse)
async def navigate(
    body: NavigateRequest,
    week_start: Annotated[int, Depends(get_week_start)],
):
    reference = shift_reference(body.reference_date, body.mode, body.direction)
    return NavigateResponse(
        reference_date=reference,
        date_range=resolve_range(reference, body.mode, week_start),
    )
