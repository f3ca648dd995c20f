"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_topics() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT slug, description
        FROM topics
        """
    )
