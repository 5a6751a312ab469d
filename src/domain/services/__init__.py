"""Domain services."""

from src.domain.services.analytics import AnalyticsService
from src.domain.services.auth_service import AuthResult, AuthService, authorize, validate_token
from src.domain.services.seed import SeedResult, SeedService
from src.domain.services.users import UserNotFoundError, UserService

__all__ = [
    "AnalyticsService",
    "AuthResult",
    "AuthService",
    "SeedResult",
    "SeedService",
    "UserNotFoundError",
    "UserService",
    "authorize",
    "validate_token",
]
