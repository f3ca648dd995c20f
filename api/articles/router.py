"""
Article API endpoints.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Request

from . import schemas, service

router = APIRouter()


def _parse_json_int(text: str) -> int | Decimal:
    # int() refuses very long digit strings; keep those as Decimal so the
    # service rejects them as the wrong type.
    try:
        return int(text)
    except ValueError:
        return Decimal(text)


async def _read_json_body(request: Request) -> Any:
    # Malformed or empty bodies are reported by the service as missing data,
    # after the id has been validated.
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw, parse_int=_parse_json_int)
    except ValueError:
        return None


@router.get("/api/articles/{article_id}", response_model=schemas.Article)
async def get_article(article_id: str) -> dict:
    return await service.get_article(article_id)


@router.patch("/api/articles/{article_id}", response_model=schemas.Article)
async def patch_article(article_id: str, request: Request) -> dict:
    payload = await _read_json_body(request)
    return await service.update_article_votes(article_id, payload)
