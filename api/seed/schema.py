"""
DDL and bulk inserts for topics, users and articles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from core import db

logger = logging.getLogger(__name__)

_DROP_TABLES = """
DROP TABLE IF EXISTS articles;
DROP TABLE IF EXISTS users;
DROP TABLE IF EXISTS topics;
"""

_CREATE_TABLES = """
CREATE TABLE topics (
    slug VARCHAR PRIMARY KEY,
    description VARCHAR NOT NULL
);

CREATE TABLE users (
    username VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    avatar_url VARCHAR NOT NULL
);

CREATE TABLE articles (
    article_id SERIAL PRIMARY KEY,
    title VARCHAR NOT NULL,
    topic VARCHAR NOT NULL REFERENCES topics(slug),
    author VARCHAR NOT NULL REFERENCES users(username),
    body VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT NOW(),
    votes INT NOT NULL DEFAULT 0
);
"""


@dataclass(frozen=True)
class SeedData:
    topics: list[dict] = field(default_factory=list)
    users: list[dict] = field(default_factory=list)
    articles: list[dict] = field(default_factory=list)


def _to_timestamp(value: object) -> datetime:
    """
    Accept epoch milliseconds or a datetime; return naive UTC for a
    `TIMESTAMP` column.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
    raise ValueError(f"Unsupported created_at value: {value!r}")


def _article_row(article: dict) -> tuple:
    created_at = article.get("created_at")
    return (
        str(article["title"]),
        str(article["topic"]),
        str(article["author"]),
        str(article["body"]),
        _to_timestamp(created_at) if created_at is not None else datetime.now(timezone.utc).replace(tzinfo=None),
        int(article.get("votes", 0)),
    )


async def seed(data: SeedData) -> None:
    async with db.transaction() as conn:
        await conn.execute(_DROP_TABLES)
        await conn.execute(_CREATE_TABLES)

        await conn.executemany(
            "INSERT INTO topics (slug, description) VALUES ($1, $2)",
            [(t["slug"], t["description"]) for t in data.topics],
        )
        await conn.executemany(
            "INSERT INTO users (username, name, avatar_url) VALUES ($1, $2, $3)",
            [(u["username"], u["name"], u["avatar_url"]) for u in data.users],
        )
        # Insert in list order so article_id follows the fixture order.
        await conn.executemany(
            """
            INSERT INTO articles (title, topic, author, body, created_at, votes)
            VALUES ($1, $2, $3, $4, $5, $6)
            """,
            [_article_row(a) for a in data.articles],
        )

    logger.info(
        "seeded topics=%s users=%s articles=%s",
        len(data.topics),
        len(data.users),
        len(data.articles),
    )
