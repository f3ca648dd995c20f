"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import repository, schemas

router = APIRouter()


@router.get("/api/users", response_model=list[schemas.User])
async def get_users() -> list[dict]:
    return await repository.list_users()
