"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_ARTICLE_COLUMNS = "article_id, title, topic, author, body, created_at, votes"


async def get_article(article_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_ARTICLE_COLUMNS}
        FROM articles
        WHERE article_id = $1
        """,
        article_id,
    )


async def increment_votes(article_id: int, inc_votes: int) -> dict | None:
    """
    Add `inc_votes` (may be negative) to the article's vote count.

    The increment is evaluated by Postgres in one statement so concurrent
    updates on the same row are never lost. Returns None if no row matched.
    """
    return await db.fetch_one(
        f"""
        UPDATE articles
        SET votes = votes + $2
        WHERE article_id = $1
        RETURNING {_ARTICLE_COLUMNS}
        """,
        article_id,
        inc_votes,
    )
