from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from src.api.deps import get_current_user, get_db_session, require_admin
from src.api.schemas.analytics import (
    AnalyticsCreate,
    AnalyticsRecordResponse,
    ChartPointResponse,
    MetricsResponse,
)
from src.domain import AuthClaims
from src.domain.services.analytics import AnalyticsService

# Every analytics route requires a valid token; recording a sample also needs admin.
router = APIRouter(
    prefix="/analytics",
    tags=["Analytics"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/metrics", response_model=MetricsResponse)
async def get_metrics(session: AsyncSession = Depends(get_db_session)) -> MetricsResponse:
    """Headline dashboard figures."""
    metrics = await AnalyticsService(session).compute_metrics()
    return MetricsResponse.model_validate(metrics)


@router.get("/charts", response_model=list[ChartPointResponse])
async def get_charts(session: AsyncSession = Depends(get_db_session)) -> list[ChartPointResponse]:
    """Up to six most recent snapshots, oldest first."""
    series = await AnalyticsService(session).compute_chart_series()
    return [ChartPointResponse.model_validate(point) for point in series]


@router.post("", response_model=AnalyticsRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_analytics_record(
    payload: AnalyticsCreate,
    session: AsyncSession = Depends(get_db_session),
    claims: AuthClaims = Depends(require_admin),
) -> AnalyticsRecordResponse:
    record = await AnalyticsService(session).record_sample(
        active_users=payload.active_users,
        new_signups=payload.new_signups,
        sales=payload.sales,
        revenue=payload.revenue,
        actor_id=claims.user_id,
    )
    return AnalyticsRecordResponse.model_validate(record)
