from __future__ import annotations

from datetime import UTC, datetime, timedelta
from enum import Enum

import jwt
from src.core.config import Settings, get_settings


class TokenError(Exception):
    """Raised when a token cannot be decoded or validated."""


class Role(str, Enum):
    ADMIN = "Admin"
    USER = "User"

    @classmethod
    def contains(cls, value: str) -> bool:
        return value in {role.value for role in cls}


def create_access_token(
    subject: str,
    *,
    role: str,
    email: str | None = None,
    expires_delta: timedelta | None = None,
    issued_at: datetime | None = None,
    settings: Settings | None = None,
) -> str:
    """Generate a signed JWT access token.

    ``issued_at`` defaults to the current time; passing an earlier instant lets
    callers mint tokens that are already partway through (or past) their TTL.
    """
    settings = settings or get_settings()

    if not Role.contains(role):
        raise TokenError(f"Unsupported role: {role}")

    now = issued_at or datetime.now(UTC)
    ttl = expires_delta or timedelta(seconds=settings.access_token_ttl_seconds)
    payload = {
        "sub": subject,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
        "iss": settings.app_name,
    }

    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, *, settings: Settings | None = None) -> dict:
    """Decode and validate a JWT access token."""
    settings = settings or get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.app_name,
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.PyJWTError as exc:  # pragma: no cover - third-party raises numerous subclasses
        raise TokenError("Invalid token") from exc

    role = payload["role"]
    if not isinstance(role, str) or not Role.contains(role):
        raise TokenError(f"Unsupported role: {role}")
    return payload
