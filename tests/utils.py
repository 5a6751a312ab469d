from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from src.core.auth import Role, create_access_token
from src.core.config import Settings
from src.domain.services.auth_service import hash_password
from src.infrastructure.db.models import AnalyticsRecordModel, UserModel, UserStatus

DEFAULT_PASSWORD = "password123"


@lru_cache
def default_password_hash() -> str:
    return hash_password(DEFAULT_PASSWORD)


def auth_headers(
    settings: Settings,
    *,
    user_id: str = "user-1",
    role: Role = Role.USER,
    email: str = "user@example.com",
) -> dict[str, str]:
    token = create_access_token(user_id, role=role.value, email=email, settings=settings)
    return {"Authorization": f"Bearer {token}"}


async def create_account(
    session_factory: async_sessionmaker[AsyncSession],
    *,
    email: str,
    name: str = "Test User",
    role: Role = Role.USER,
    status: UserStatus = UserStatus.ACTIVE,
    join_date: datetime | None = None,
) -> UserModel:
    """Insert an account directly, bypassing the API."""
    async with session_factory() as session:
        account = UserModel(
            name=name,
            email=email,
            hashed_password=default_password_hash(),
            role=role,
            status=status,
            join_date=join_date or datetime.now(UTC),
        )
        session.add(account)
        await session.commit()
        await session.refresh(account)
        return account


async def create_record(
    session_factory: async_sessionmaker[AsyncSession],
    *,
    recorded_at: datetime,
    active_users: int = 0,
    new_signups: int = 0,
    sales: int = 0,
    revenue: float = 0,
) -> AnalyticsRecordModel:
    async with session_factory() as session:
        record = AnalyticsRecordModel(
            recorded_at=recorded_at,
            active_users=active_users,
            new_signups=new_signups,
            sales=sales,
            revenue=revenue,
        )
        session.add(record)
        await session.commit()
        await session.refresh(record)
        return record
