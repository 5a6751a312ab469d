from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Request
from sqlalchemy import text

router = APIRouter(tags=["Observability"])
logger = structlog.get_logger()


async def check_database(request: Request) -> dict:
    """Check the database connection."""
    try:
        async with request.app.state.session_factory() as session:
            await session.execute(text("SELECT 1"))
            return {"status": "ok"}
    except Exception as e:
        return {"status": "error", "message": str(e)[:100]}


@router.get("/health", summary="Service health probe")
async def health_check(request: Request) -> dict:
    """Liveness probe; always 200 while the process is serving requests."""
    settings = request.app.state.settings
    database_status = await check_database(request)

    payload = {
        "status": "OK",
        "message": "Server is running",
        "service": settings.app_name,
        "version": settings.version,
        "timestamp": datetime.now(UTC).isoformat(),
        "database": database_status,
    }
    logger.debug("health_probe", database=database_status["status"])
    return payload
