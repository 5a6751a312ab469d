from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from src.api.main import create_app
from src.core.auth import Role
from src.core.config import Settings
from src.infrastructure.db import create_schema
from tests.utils import auth_headers


@pytest.fixture()
def settings() -> Settings:
    """Fresh settings per test: in-memory database and a unique signing secret."""
    return Settings(
        environment="test",
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret=f"test-secret-{uuid4().hex}",
    )


@pytest.fixture()
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings)
    await create_schema(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest.fixture()
def session_factory(app: FastAPI) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the same database the app uses."""
    return app.state.session_factory


@pytest.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing async routes."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture()
def admin_headers(settings: Settings) -> dict[str, str]:
    return auth_headers(settings, user_id="admin-user", role=Role.ADMIN)


@pytest.fixture()
def user_headers(settings: Settings) -> dict[str, str]:
    return auth_headers(settings, user_id="regular-user", role=Role.USER)
