from .accounts import AccountRepository, DuplicateKeyError
from .analytics import AnalyticsRepository

__all__ = ["AccountRepository", "AnalyticsRepository", "DuplicateKeyError"]
