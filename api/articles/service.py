"""
Article business logic.

Validation runs before any query; the first failing check decides the error:
id, then presence of `inc_votes`, then its type, then existence of the row.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from core.errors import InvalidIdentifier, InvalidType, MissingField, NotFound

from . import repository

logger = logging.getLogger(__name__)

# articles.article_id and articles.votes are Postgres `integer` columns.
_INT4_MIN = -(2**31)
_INT4_MAX = 2**31 - 1
_INT4_MAX_DIGITS = len(str(_INT4_MAX))

_ID_PATTERN = re.compile(r"([+-]?)([0-9]+)")


def parse_article_id(raw_id: str) -> int:
    """
    Parse a path id. Ids with more digits than an `integer` column holds are
    still valid ids; they map to a value just outside the column range so the
    lookup reports them as not found.
    """
    match = _ID_PATTERN.fullmatch(raw_id or "")
    if match is None:
        raise InvalidIdentifier()

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _INT4_MAX_DIGITS:
        return _INT4_MIN - 1 if sign == "-" else _INT4_MAX + 1
    return int(sign + digits)


def _fits_int4(value: int) -> bool:
    return _INT4_MIN <= value <= _INT4_MAX


def parse_vote_increment(payload: Any) -> int:
    if not isinstance(payload, dict) or "inc_votes" not in payload:
        raise MissingField()

    value = payload["inc_votes"]
    # bool is an int subclass, but `true` is not a vote count.
    if isinstance(value, bool):
        raise InvalidType()
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidType()
        value = int(value)
    if not isinstance(value, int) or not _fits_int4(value):
        raise InvalidType()
    return value


async def get_article(raw_id: str) -> dict:
    article_id = parse_article_id(raw_id)
    if not _fits_int4(article_id):
        raise NotFound()

    row = await repository.get_article(article_id)
    if row is None:
        raise NotFound()
    return row


async def update_article_votes(raw_id: str, payload: Any) -> dict:
    article_id = parse_article_id(raw_id)
    inc_votes = parse_vote_increment(payload)
    if not _fits_int4(article_id):
        raise NotFound()

    row = await repository.increment_votes(article_id, inc_votes)
    if row is None:
        raise NotFound()

    logger.info(
        "article_votes_updated article_id=%s inc_votes=%s votes=%s",
        article_id,
        inc_votes,
        row["votes"],
    )
    return row
