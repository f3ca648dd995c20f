"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/topics", response_model=list[schemas.Topic])
async def get_topics() -> list[dict]:
    return await repository.list_topics()
