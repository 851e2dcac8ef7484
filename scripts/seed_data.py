"""Seed the directory with categories, tech stacks, proprietary products and alternatives.

Usage:
    python scripts/seed_data.py
    python scripts/seed_data.py --only alternatives --log-level DEBUG
"""

import argparse
import asyncio
import logging
import sys

from osfinder.config import settings
from osfinder.core.logging import setup_logging
from osfinder.db.session import AsyncSessionLocal, async_engine
from osfinder.models.base import Base
from osfinder.seeding import STAGES, Seeder


logger = logging.getLogger(__name__)


async def seed(only: str | None, create_tables: bool) -> int:
    """Run the seeder in its own session. Returns a process exit code."""
    if create_tables:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    try:
        async with AsyncSessionLocal() as session:
            report = await Seeder(session).run(only=only)
    finally:
        await async_engine.dispose()

    for stage, counts in report.stages.items():
        print(f"  {stage:<14} created={counts.created} updated={counts.updated} skipped={counts.skipped}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Open Source Finder seed data loader")
    parser.add_argument("--only", choices=STAGES, help="Run a single seeding stage")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: from settings)")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (local development only)",
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level, json_format=settings.log_json)
    logger.info(f"Seeding {args.only or 'all stages'} into {settings.app_env} database")

    try:
        return asyncio.run(seed(args.only, args.create_tables))
    except Exception:
        logger.exception("Seeding failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
