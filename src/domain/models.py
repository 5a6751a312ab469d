from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.core.auth import Role


@dataclass(slots=True, frozen=True)
class AuthClaims:
    """Identity carried by a validated access token."""

    user_id: str
    role: Role
    email: str = ""
    issued_at: datetime | None = None
    expires_at: datetime | None = None


@dataclass(slots=True)
class DashboardMetrics:
    total_users: int
    active_users: int
    new_signups: int
    total_sales: int
    total_revenue: float
    growth_rate: float


@dataclass(slots=True)
class ChartPoint:
    period_label: str
    sales: int
    active_users: int
    revenue: float
