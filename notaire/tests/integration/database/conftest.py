"""
Fixtures for tests that need a real PostgreSQL database.

Set NOTAIRE_TEST_DATABASE_URL (asyncpg URL of a throwaway database) to
run them; they are skipped otherwise.
"""

import os

import pytest
import pytest_asyncio


@pytest_asyncio.fixture(autouse=True)
async def database_lifecycle(request):
    """Run the test class async_setup/async_teardown around each test."""
    if not os.getenv("NOTAIRE_TEST_DATABASE_URL"):
        pytest.skip("NOTAIRE_TEST_DATABASE_URL is not set")

    await request.instance.async_setup()
    yield
    await request.instance.async_teardown()
