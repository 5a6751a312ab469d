"""Read-side aggregation over accounts and analytics snapshots.

Metrics are assembled from several independent store reads with no snapshot
isolation between them, so concurrent writes can make the figures slightly
inconsistent with each other.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from src.domain.models import ChartPoint, DashboardMetrics
from src.infrastructure.db.models import AnalyticsRecordModel, UserModel, UserStatus
from src.infrastructure.repositories import AccountRepository, AnalyticsRepository

logger = structlog.get_logger()

SIGNUP_WINDOW = timedelta(days=30)
METRICS_RECORD_WINDOW = 30
CHART_RECORD_WINDOW = 6

_MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_label(moment: datetime) -> str:
    """Short English month name, e.g. ``Jan``."""
    return _MONTH_LABELS[moment.month - 1]


def growth_rate(new_signups: int, total_users: int) -> float:
    """Percentage of users who joined in the signup window, to one decimal place."""
    if total_users == 0:
        return 0.0
    return round(new_signups / total_users * 100, 1)


class AnalyticsService:
    def __init__(
        self,
        session: AsyncSession,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.accounts = AccountRepository(session)
        self.records = AnalyticsRepository(session)
        self._clock = clock or (lambda: datetime.now(UTC))

    async def compute_metrics(self) -> DashboardMetrics:
        cutoff = self._clock() - SIGNUP_WINDOW

        total_users = await self.accounts.count()
        active_users = await self.accounts.count(UserModel.status == UserStatus.ACTIVE)
        new_signups = await self.accounts.count(UserModel.join_date >= cutoff)

        recent = await self.records.find_recent(METRICS_RECORD_WINDOW)
        total_sales = sum(record.sales for record in recent)
        total_revenue = sum(record.revenue for record in recent)

        return DashboardMetrics(
            total_users=total_users,
            active_users=active_users,
            new_signups=new_signups,
            total_sales=total_sales,
            total_revenue=total_revenue,
            growth_rate=growth_rate(new_signups, total_users),
        )

    async def compute_chart_series(self) -> list[ChartPoint]:
        """Latest snapshots in chronological order, at most six."""
        recent = await self.records.find_recent(CHART_RECORD_WINDOW)
        return [
            ChartPoint(
                period_label=month_label(record.recorded_at),
                sales=record.sales,
                active_users=record.active_users,
                revenue=record.revenue,
            )
            for record in reversed(recent)
        ]

    async def record_sample(
        self,
        *,
        active_users: int = 0,
        new_signups: int = 0,
        sales: int = 0,
        revenue: float = 0,
        actor_id: str | None = None,
    ) -> AnalyticsRecordModel:
        record = AnalyticsRecordModel(
            recorded_at=self._clock(),
            active_users=active_users,
            new_signups=new_signups,
            sales=sales,
            revenue=revenue,
        )
        record = await self.records.insert(record)
        await logger.ainfo("analytics_recorded", record_id=record.id, admin_user=actor_id)
        return record
