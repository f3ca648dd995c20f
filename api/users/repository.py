"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_users() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        """
    )
