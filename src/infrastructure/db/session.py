from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from src.core.config import Settings

from .base import Base


def create_engine(settings: Settings) -> AsyncEngine:
    """Build an async engine for the configured database."""
    url = settings.async_database_url
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False, future=True)
    return create_async_engine(url, echo=False, future=True, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables; used for SQLite databases and tests instead of migrations."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
