"""
Topic response schema.
"""

from __future__ import annotations

from pydantic import BaseModel


class Topic(BaseModel):
    slug: str
    description: str
