"""
User response schema.
"""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    username: str
    name: str
    avatar_url: str
