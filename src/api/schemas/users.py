from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field
from src.core.auth import Role
from src.infrastructure.db.models import UserStatus

from .common import CamelModel


class UserResponse(CamelModel):
    """Account as exposed over the API; the password hash is never included."""

    id: str = Field(..., alias="_id")
    name: str
    email: str
    role: Role
    status: UserStatus
    join_date: datetime


class UserUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=128)
    email: EmailStr | None = None
    role: Role | None = None
    status: UserStatus | None = None
