from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from src.api.deps import get_app_settings, get_db_session
from src.api.schemas.common import MessageResponse
from src.core.config import Settings
from src.domain.services.seed import SeedService

router = APIRouter(tags=["Seed"])


@router.api_route("/seed", methods=["GET", "POST"], response_model=MessageResponse)
async def seed_database(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """Create demo accounts and analytics unless the admin account already exists."""
    result = await SeedService(session, settings).seed()
    return MessageResponse(message=result.message)
