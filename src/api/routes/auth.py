"""Authentication routes - register and login."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from src.api.deps import get_app_settings, get_db_session
from src.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    LoginUser,
    RegisterRequest,
    RegisterResponse,
)
from src.core.config import Settings
from src.domain.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create an account with name, email, password and an optional role.",
)
async def register(
    payload: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> RegisterResponse:
    service = AuthService(session, settings)
    account = await service.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return RegisterResponse(user_id=account.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Exchange email and password for a 24 hour JWT.",
)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    service = AuthService(session, settings)
    result = await service.authenticate(email=payload.email, password=payload.password)
    return LoginResponse(token=result.token, user=LoginUser.model_validate(result.user))
