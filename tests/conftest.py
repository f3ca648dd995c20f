"""Shared test fixtures.

- `client`: httpx client bound to the ASGI app. The lifespan is not run, so no
  DB pool exists; route tests patch the repository functions instead.
- `pg_client`: same client, but backed by a real Postgres at
  TEST_DATABASE_URL, reseeded before every test. Skipped when unset.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

from core import db
from main import app
from seed import seed
from seed.test_data import DATA


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def unsafe_client():
    """Client that turns unhandled app errors into responses instead of raising."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seeded_db():
    dsn = os.environ.get("TEST_DATABASE_URL", "").strip()
    if not dsn:
        pytest.skip("TEST_DATABASE_URL is not set")
    await db.init_pool(dsn)
    try:
        await seed(DATA)
        yield
    finally:
        await db.close_pool()


@pytest.fixture
async def pg_client(seeded_db, client):
    yield client
