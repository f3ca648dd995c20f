"""
Seed the database at DATABASE_URL with the fixture data.

Usage (from `api/`): python -m seed
"""

from __future__ import annotations

import asyncio

from core import config, db
from core.observability import setup_logging

from . import seed
from .test_data import DATA


async def _main() -> None:
    await db.init_pool()
    try:
        await seed(DATA)
    finally:
        await db.close_pool()


if __name__ == "__main__":
    setup_logging(config.log_level())
    asyncio.run(_main())
