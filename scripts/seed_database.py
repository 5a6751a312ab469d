#!/usr/bin/env python3
"""Seed the configured database with the demo admin, sample users and analytics.

Usage:
    python scripts/seed_database.py [--create-schema]

``--create-schema`` creates tables directly, which is convenient for local SQLite
databases; PostgreSQL deployments should run ``alembic upgrade head`` instead.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path so the src package imports from any directory
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import get_settings
from src.core.logging import setup_logging
from src.domain.services.seed import SeedService
from src.infrastructure.db import create_engine, create_schema, create_session_factory


async def run(create_tables: bool) -> str:
    settings = get_settings()
    engine = create_engine(settings)
    try:
        if create_tables:
            await create_schema(engine)
        session_factory = create_session_factory(engine)
        async with session_factory() as session:
            result = await SeedService(session, settings).seed()
    finally:
        await engine.dispose()
    return result.message


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="create tables before seeding (local SQLite databases)",
    )
    args = parser.parse_args()

    setup_logging(get_settings().log_level)
    print(asyncio.run(run(args.create_schema)))


if __name__ == "__main__":
    main()
