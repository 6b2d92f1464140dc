"""
Integration test fixtures for the Timekit client.

These tests talk to a real Timekit API and are skipped unless
TIMEKIT_LIVE_API_URL points at one (e.g. http://api-localhost.timekit.io/).

Optional:
    TIMEKIT_LIVE_EMAIL / TIMEKIT_LIVE_PASSWORD: login for the auth step
        (defaults to the API's seeded test user)
"""

import os

import pytest
import pytest_asyncio

from timekit.client import TimekitClient
from timekit.config import TimekitConfig


LIVE_API_URL = os.environ.get("TIMEKIT_LIVE_API_URL")
LIVE_EMAIL = os.environ.get("TIMEKIT_LIVE_EMAIL", "timebirdcph@gmail.com")
LIVE_PASSWORD = os.environ.get("TIMEKIT_LIVE_PASSWORD", "password")

requires_live_api = pytest.mark.skipif(
    not LIVE_API_URL, reason="TIMEKIT_LIVE_API_URL not set"
)


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.live)
            item.add_marker(requires_live_api)


@pytest.fixture
def live_client() -> TimekitClient:
    """Unauthenticated client pointed at the live API."""
    return TimekitClient(config=TimekitConfig(app="demo", api_base_url=LIVE_API_URL or ""))


@pytest.fixture
def live_credentials() -> tuple[str, str]:
    return LIVE_EMAIL, LIVE_PASSWORD


@pytest_asyncio.fixture
async def live_authed_client(live_client, live_credentials) -> TimekitClient:
    """Client that has already logged in."""
    await live_client.auth(*live_credentials)
    return live_client
