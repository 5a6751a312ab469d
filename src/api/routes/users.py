from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from src.api.deps import get_current_user, get_db_session, require_admin
from src.api.schemas.common import MessageResponse
from src.api.schemas.users import UserResponse, UserUpdate
from src.domain import AuthClaims
from src.domain.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    session: AsyncSession = Depends(get_db_session),
    _: AuthClaims = Depends(require_admin),
) -> list[UserResponse]:
    """List every account (admin-only)."""
    users = await UserService(session).list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    session: AsyncSession = Depends(get_db_session),
    _: AuthClaims = Depends(get_current_user),
) -> UserResponse:
    user = await UserService(session).get_user(user_id)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    session: AsyncSession = Depends(get_db_session),
    claims: AuthClaims = Depends(require_admin),
) -> UserResponse:
    """Update name, email, role or status (admin-only). Omitted fields are left as is."""
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    user = await UserService(session).update_user(user_id, changes, actor_id=claims.user_id)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    session: AsyncSession = Depends(get_db_session),
    claims: AuthClaims = Depends(require_admin),
) -> MessageResponse:
    """Delete an account (admin-only)."""
    await UserService(session).delete_user(user_id, actor_id=claims.user_id)
    return MessageResponse(message="User deleted successfully")
