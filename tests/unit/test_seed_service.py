from __future__ import annotations

import random

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from src.core.auth import Role
from src.core.config import Settings
from src.domain.services.auth_service import verify_password
from src.domain.services.seed import SeedService
from src.infrastructure.db.models import UserStatus
from src.infrastructure.repositories import AccountRepository, AnalyticsRepository


async def test_seed_populates_empty_store(
    session_factory: async_sessionmaker[AsyncSession], settings: Settings
) -> None:
    async with session_factory() as session:
        result = await SeedService(session, settings, rng=random.Random(7)).seed()

    assert result.created is True
    assert result.message == (
        "Database seeded successfully! Login with admin@example.com / admin123"
    )

    async with session_factory() as session:
        accounts = AccountRepository(session)
        admin = await accounts.find_by_email("admin@example.com")
        user3 = await accounts.find_by_email("user3@example.com")
        user4 = await accounts.find_by_email("user4@example.com")
        assert await accounts.count() == 11

        records = await AnalyticsRepository(session).find_recent(10)

    assert admin is not None
    assert admin.role is Role.ADMIN
    assert admin.status is UserStatus.ACTIVE
    assert verify_password("admin123", admin.hashed_password)

    assert user3 is not None and user3.status is UserStatus.INACTIVE
    assert user4 is not None and user4.status is UserStatus.ACTIVE
    assert verify_password("user123", user4.hashed_password)

    assert len(records) == 6
    assert [record.recorded_at.month for record in reversed(records)] == [1, 2, 3, 4, 5, 6]
    for record in records:
        assert 200 <= record.active_users < 400
        assert 50 <= record.new_signups < 150
        assert 3000 <= record.sales < 6000
        assert 30000 <= record.revenue < 60000


async def test_seed_twice_is_idempotent(
    session_factory: async_sessionmaker[AsyncSession], settings: Settings
) -> None:
    async with session_factory() as session:
        await SeedService(session, settings).seed()

    async with session_factory() as session:
        result = await SeedService(session, settings).seed()

    assert result.created is False
    assert result.message == (
        "Database already seeded! Use admin@example.com / admin123 to login."
    )

    async with session_factory() as session:
        assert await AccountRepository(session).count() == 11
        assert len(await AnalyticsRepository(session).find_recent(20)) == 6


async def test_reseed_after_admin_removal_keeps_existing_sample_users(
    session_factory: async_sessionmaker[AsyncSession], settings: Settings
) -> None:
    async with session_factory() as session:
        await SeedService(session, settings).seed()

    async with session_factory() as session:
        accounts = AccountRepository(session)
        admin = await accounts.find_by_email("admin@example.com")
        assert admin is not None
        assert await accounts.delete(admin.id)

    async with session_factory() as session:
        result = await SeedService(session, settings).seed()

    assert result.created is True

    async with session_factory() as session:
        accounts = AccountRepository(session)
        assert await accounts.count() == 11
        assert await accounts.find_by_email("admin@example.com") is not None
        assert len(await AnalyticsRepository(session).find_recent(20)) == 12
