from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from src.core.auth import Role

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UserStatus(str, enum.Enum):
    """User account status."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class UserModel(Base):
    """SQLAlchemy model for the users table (Account)."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [x.value for x in e]),
        default=Role.USER,
        nullable=False,
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus, name="user_status", values_callable=lambda e: [x.value for x in e]),
        default=UserStatus.ACTIVE,
        nullable=False,
    )
    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role.value})>"


class AnalyticsRecordModel(Base):
    """One immutable snapshot of business metrics."""

    __tablename__ = "analytics"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )
    active_users: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    new_signups: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    sales: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    revenue: Mapped[float] = mapped_column(Float, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<AnalyticsRecordModel(id={self.id}, recorded_at={self.recorded_at})>"


__all__ = [
    "AnalyticsRecordModel",
    "UserModel",
    "UserStatus",
]
