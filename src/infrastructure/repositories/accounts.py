"""Store access for Account records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import ColumnElement, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from src.infrastructure.db.models import UserModel


class DuplicateKeyError(Exception):
    """Raised when a write violates a unique constraint."""


class AccountRepository:
    """find-one / find-many / insert / update / delete / count over the users table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: str) -> UserModel | None:
        return await self.session.get(UserModel, account_id)

    async def find_by_email(self, email: str) -> UserModel | None:
        return await self.session.scalar(select(UserModel).where(UserModel.email == email))

    async def find_many(self) -> Sequence[UserModel]:
        stmt = select(UserModel).order_by(UserModel.join_date.desc())
        return (await self.session.scalars(stmt)).all()

    async def insert(self, account: UserModel) -> UserModel:
        self.session.add(account)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateKeyError(str(exc.orig)) from exc
        await self.session.refresh(account)
        return account

    async def update(self, account_id: str, values: dict[str, Any]) -> UserModel | None:
        account = await self.find_by_id(account_id)
        if account is None:
            return None

        for field, value in values.items():
            setattr(account, field, value)

        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateKeyError(str(exc.orig)) from exc
        await self.session.refresh(account)
        return account

    async def delete(self, account_id: str) -> bool:
        result = await self.session.execute(delete(UserModel).where(UserModel.id == account_id))
        await self.session.commit()
        return result.rowcount > 0

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        stmt = select(func.count(UserModel.id)).where(*criteria)
        return await self.session.scalar(stmt) or 0
