from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class MetricsResponse(CamelModel):
    total_users: int
    active_users: int
    new_signups: int
    total_sales: int
    total_revenue: float
    growth_rate: float = Field(..., description="New signups as a percentage of all users")


class ChartPointResponse(CamelModel):
    period_label: str = Field(..., alias="date", description="Short month label, e.g. Jan")
    sales: int
    active_users: int = Field(..., alias="users")
    revenue: float


class AnalyticsCreate(CamelModel):
    active_users: int = 0
    new_signups: int = 0
    sales: int = 0
    revenue: float = 0


class AnalyticsRecordResponse(CamelModel):
    id: str = Field(..., alias="_id")
    recorded_at: datetime = Field(..., alias="date")
    active_users: int
    new_signups: int
    sales: int
    revenue: float
