"""
Database schema and seed data.

`seed(data)` rebuilds the three tables from scratch and fills them; tests call
it before every case, `python -m seed` runs it against DATABASE_URL.
"""

from .schema import SeedData, seed

__all__ = ["SeedData", "seed"]
