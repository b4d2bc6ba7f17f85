"""Shared fixtures for integration tests.

Live tests need a universe id and API key in ``OPENCLOUD_UNIVERSE_ID`` and
``OPENCLOUD_API_KEY``; the key must have data store read/write access.
"""

import os
import uuid

import pytest
import pytest_asyncio

from opencloud.datastores import Universe


@pytest_asyncio.fixture
async def live_universe():
    async with Universe.from_env() as universe:
        yield universe


@pytest.fixture
def store_name():
    """Unique store name so runs never share entries."""
    return os.environ.get("OPENCLOUD_TEST_STORE", f"integration-{uuid.uuid4().hex[:12]}")
