"""Shared test fixtures for Timekit client tests.

This module provides common fixtures used across all test modules:
- Environment isolation (no TIMEKIT_* variables or .env leak into tests)
- A fake Timekit API served through httpx.MockTransport
- Standard fixture data mirroring the API's documented examples

Usage:
    @pytest.mark.asyncio
    async def test_something(client, fake_api):
        fake_api.route("GET", "/calendars", json={"data": []})
        response = await client.get_calendars()
"""

import base64
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from timekit import api as timekit_api
from timekit.client import TimekitClient
from timekit.config import TimekitConfig


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "timekit"

BASE_URL = "http://api-localhost.timekit.io/"
USER_EMAIL = "timebirdcph@gmail.com"
USER_API_TOKEN = "password"


# ─────────────────────────────────────────────────────────────────────────────
# Environment Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Strip TIMEKIT_* variables and run from an empty directory."""
    for var in (
        "TIMEKIT_APP",
        "TIMEKIT_API_BASE_URL",
        "TIMEKIT_API_VERSION",
        "TIMEKIT_TIMEZONE",
        "TIMEKIT_TIMEOUT",
        "TIMEKIT_EMAIL",
        "TIMEKIT_API_TOKEN",
        "TIMEKIT_CONFIG",
        "TIMEKIT_LOG_LEVEL",
        "TIMEKIT_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    # Default client is process-wide; start every test from scratch
    timekit_api.set_client(None)
    yield
    timekit_api.set_client(None)


# ─────────────────────────────────────────────────────────────────────────────
# Fake API
# ─────────────────────────────────────────────────────────────────────────────


class FakeTimekitApi:
    """In-memory stand-in for the Timekit API.

    Routes are registered per (method, path). Routes marked ``auth=True``
    answer 401 unless the request carries Basic credentials matching
    ``valid_credentials``. Every request is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []
        self.valid_credentials = (USER_EMAIL, USER_API_TOKEN)

    def route(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        auth: bool = True,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> None:
        def _default(request: httpx.Request) -> httpx.Response:
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        respond = handler or _default

        def _guarded(request: httpx.Request) -> httpx.Response:
            if auth and not self._authorized(request):
                return error_response(401, "Unauthorized")
            return respond(request)

        self.routes[(method, path)] = _guarded

    def _authorized(self, request: httpx.Request) -> bool:
        header = request.headers.get("Authorization", "")
        if not header.startswith("Basic "):
            return False
        decoded = base64.b64decode(header[len("Basic "):]).decode("utf-8")
        return tuple(decoded.split(":", 1)) == self.valid_credentials

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self.routes.get((request.method, request.url.path))
        if respond is None:
            return error_response(404, "Not found")
        return respond(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


def error_response(status: int, message: str) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"message": message, "status_code": status}},
    )


@pytest.fixture
def fake_api() -> FakeTimekitApi:
    return FakeTimekitApi()


@pytest.fixture
def timekit_config() -> TimekitConfig:
    """Configuration pointing at the fake API host."""
    return TimekitConfig(app="demo", api_base_url=BASE_URL)


@pytest.fixture
def client(timekit_config, fake_api) -> TimekitClient:
    """Client wired to the fake API, without credentials."""
    return TimekitClient(
        config=timekit_config,
        http_transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture
def authed_client(client) -> TimekitClient:
    """Client wired to the fake API, with valid credentials."""
    client.set_user(USER_EMAIL, USER_API_TOKEN)
    return client


# ─────────────────────────────────────────────────────────────────────────────
# Data Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def new_meeting() -> dict:
    """Meeting proposal with two suggested windows."""
    return {
        "what": "test title",
        "where": "test location",
        "suggestions": [
            {"start": "2015-09-22T14:30:00.000Z", "end": "2015-09-22T16:00:00.000Z"},
            {"start": "2015-09-23T09:15:00.000Z", "end": "2015-09-23T09:45:00.000Z"},
        ],
    }


@pytest.fixture
def find_time_filters() -> dict:
    """Availability filters combining or/and constraints."""
    return {
        "or": [
            {"specific_day": {"day": "Monday"}},
            {
                "specific_day_and_time": {
                    "day": "Wednesday",
                    "start": 10,
                    "end": 12,
                    "timezone": "Europe/Copenhagen",
                }
            },
        ],
        "and": [
            {"business_hours": {"timezone": "America/Los_angeles"}},
        ],
    }
