from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from src.core.auth import Role
from src.core.config import Settings
from src.domain.reference_data import (
    ADMIN_NAME,
    SAMPLE_ANALYTICS_DATES,
    SAMPLE_ANALYTICS_RANGES,
    SAMPLE_USER_PASSWORD,
    sample_users,
)
from src.domain.services.auth_service import hash_password
from src.infrastructure.db.models import AnalyticsRecordModel, UserModel, UserStatus
from src.infrastructure.repositories import AccountRepository, AnalyticsRepository

logger = structlog.get_logger()


@dataclass(slots=True)
class SeedResult:
    created: bool
    message: str


class SeedService:
    """Populate an empty store with an admin, sample users and sample analytics."""

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.accounts = AccountRepository(session)
        self.records = AnalyticsRepository(session)
        self.settings = settings
        self.rng = rng or random.Random()

    async def seed(self) -> SeedResult:
        admin_email = self.settings.seed_admin_email
        admin_password = self.settings.seed_admin_password

        if await self.accounts.find_by_email(admin_email) is not None:
            await logger.ainfo("seed_skipped", admin_email=admin_email)
            return SeedResult(
                created=False,
                message=(
                    f"Database already seeded! Use {admin_email} / {admin_password} to login."
                ),
            )

        admin_hash = await asyncio.to_thread(hash_password, admin_password)
        await self.accounts.insert(
            UserModel(
                name=ADMIN_NAME,
                email=admin_email,
                hashed_password=admin_hash,
                role=Role.ADMIN,
                status=UserStatus.ACTIVE,
            )
        )

        user_hash = await asyncio.to_thread(hash_password, SAMPLE_USER_PASSWORD)
        created = 1
        for user in sample_users():
            if await self.accounts.find_by_email(user["email"]) is not None:
                continue
            created += 1
            await self.accounts.insert(
                UserModel(
                    name=user["name"],
                    email=user["email"],
                    hashed_password=user_hash,
                    role=Role.USER,
                    status=UserStatus.INACTIVE if user["inactive"] else UserStatus.ACTIVE,
                )
            )

        await self.records.insert_many(
            [self._sample_record(recorded_at) for recorded_at in SAMPLE_ANALYTICS_DATES]
        )

        await logger.ainfo(
            "seed_completed",
            users=created,
            analytics_records=len(SAMPLE_ANALYTICS_DATES),
        )
        return SeedResult(
            created=True,
            message=f"Database seeded successfully! Login with {admin_email} / {admin_password}",
        )

    def _sample_record(self, recorded_at: datetime) -> AnalyticsRecordModel:
        values = {
            field: self.rng.randrange(low, high)
            for field, (low, high) in SAMPLE_ANALYTICS_RANGES.items()
        }
        return AnalyticsRecordModel(recorded_at=recorded_at, **values)
