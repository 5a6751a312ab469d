from src.domain.models import AuthClaims, ChartPoint, DashboardMetrics

__all__ = ["AuthClaims", "ChartPoint", "DashboardMetrics"]
