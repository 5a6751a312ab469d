from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from src.domain.errors import DuplicateEmailError, NotFoundError
from src.infrastructure.db.models import UserModel
from src.infrastructure.repositories import AccountRepository, DuplicateKeyError

logger = structlog.get_logger()

UPDATABLE_FIELDS = frozenset({"name", "email", "role", "status"})


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class UserService:
    """Administrative CRUD over accounts."""

    def __init__(self, session: AsyncSession) -> None:
        self.accounts = AccountRepository(session)

    async def list_users(self) -> Sequence[UserModel]:
        return await self.accounts.find_many()

    async def get_user(self, user_id: str) -> UserModel:
        account = await self.accounts.find_by_id(user_id)
        if account is None:
            raise UserNotFoundError()
        return account

    async def update_user(self, user_id: str, changes: dict[str, Any], *, actor_id: str) -> UserModel:
        """Apply a partial update; keys outside name/email/role/status are ignored."""
        values = {field: value for field, value in changes.items() if field in UPDATABLE_FIELDS}

        try:
            account = await self.accounts.update(user_id, values)
        except DuplicateKeyError as exc:
            await logger.awarning("user_update_duplicate_email", user_id=user_id)
            raise DuplicateEmailError("Email already in use") from exc

        if account is None:
            raise UserNotFoundError()

        await logger.ainfo(
            "user_updated",
            user_id=user_id,
            admin_user=actor_id,
            updated_fields=sorted(values),
        )
        return account

    async def delete_user(self, user_id: str, *, actor_id: str) -> None:
        if not await self.accounts.delete(user_id):
            raise UserNotFoundError()
        await logger.ainfo("user_deleted", user_id=user_id, admin_user=actor_id)
