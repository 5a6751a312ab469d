"""Error taxonomy shared by the domain services and the HTTP layer.

Each error carries the HTTP status it maps to, so the API exception handler can
render every failure with the same ``{"message", "error"}`` envelope.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for all expected failures."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None, *, error: str | None = None) -> None:
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)


class ValidationError(DashboardError):
    """Malformed or conflicting input."""

    status_code = 400
    default_message = "Invalid request"


class DuplicateEmailError(ValidationError):
    """An account with the given email already exists."""

    default_message = "User already exists"


class NotFoundError(DashboardError):
    status_code = 404
    default_message = "Not found"


class AuthError(DashboardError):
    """Base exception for authentication and authorization failures."""

    status_code = 400
    default_message = "Authentication failed"


class MissingTokenError(AuthError):
    status_code = 401
    default_message = "Access denied. No token provided."


class InvalidTokenError(AuthError):
    status_code = 400
    default_message = "Invalid token"


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password; the two cases are indistinguishable."""

    status_code = 400
    default_message = "Invalid credentials"


class ForbiddenError(AuthError):
    status_code = 403
    default_message = "Access denied. Admin only."
