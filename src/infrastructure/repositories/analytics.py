"""Store access for AnalyticsRecord snapshots. Records are append-only."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from src.infrastructure.db.models import AnalyticsRecordModel


class AnalyticsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, record: AnalyticsRecordModel) -> AnalyticsRecordModel:
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def insert_many(self, records: Sequence[AnalyticsRecordModel]) -> None:
        self.session.add_all(records)
        await self.session.commit()

    async def find_recent(self, limit: int) -> Sequence[AnalyticsRecordModel]:
        """Return up to ``limit`` records, newest first."""
        stmt = (
            select(AnalyticsRecordModel)
            .order_by(AnalyticsRecordModel.recorded_at.desc())
            .limit(limit)
        )
        return (await self.session.scalars(stmt)).all()
