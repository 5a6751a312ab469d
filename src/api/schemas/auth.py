"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from pydantic import EmailStr, Field
from src.core.auth import Role

from .common import CamelModel

# --- Request Schemas ---


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=128, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="Account password")
    role: Role | None = Field(
        default=None,
        description="Account role (defaults to User)",
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str = Field(..., description="User email address; not format-checked")
    password: str = Field(..., description="User password")


# --- Response Schemas ---


class RegisterResponse(CamelModel):
    message: str = Field(default="User registered successfully")
    user_id: str = Field(..., description="Identifier of the new account")


class LoginUser(CamelModel):
    id: str
    name: str
    email: str
    role: Role


class LoginResponse(CamelModel):
    token: str = Field(..., description="JWT access token, valid for 24 hours")
    user: LoginUser
