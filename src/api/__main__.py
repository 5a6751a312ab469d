"""Run the API with uvicorn: ``python -m src.api``."""

from __future__ import annotations

import uvicorn
from src.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
        log_config=None,
    )


if __name__ == "__main__":
    main()
