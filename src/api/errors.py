"""Exception handlers.

All handlers return the same ``{"message", "error"}`` envelope so dashboard
clients can read ``message`` without inspecting the status code first.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from src.api.schemas.common import ErrorResponse
from src.domain.errors import DashboardError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()


def error_response(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content)


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.error)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a 400, matching the rest of the input-error taxonomy."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.info("request_validation_failed", errors=details)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """500 envelope for failures nothing else handled."""
    logger.exception("unhandled_exception", error_type=type(exc).__name__)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error", str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
