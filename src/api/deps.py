from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from src.core.auth import Role
from src.core.config import Settings
from src.domain import AuthClaims
from src.domain.services.auth_service import authorize, validate_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Provide an async SQLAlchemy session for API handlers."""
    async with request.app.state.session_factory() as session:
        yield session


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> AuthClaims:
    """Resolve the caller's claims from the bearer token.

    A header with a scheme other than Bearer is still a presented token and
    is validated as a whole.
    """
    if credentials is not None:
        token = credentials.credentials
    else:
        token = request.headers.get("Authorization", "").strip() or None
    return validate_token(token, settings=settings)


def require_role(required_role: Role) -> Callable[[AuthClaims], AuthClaims]:
    """Dependency factory enforcing that the caller holds exactly ``required_role``."""

    def dependency(claims: AuthClaims = Depends(get_current_user)) -> AuthClaims:  # noqa: B008
        return authorize(claims, required_role)

    return dependency


require_admin = require_role(Role.ADMIN)
