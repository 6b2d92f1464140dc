"""Tests for timekit/request.py and timekit/endpoints.py

Tests the request builder:
- Path placeholder substitution and quoting
- Base URL / version joining
- Header construction (app, timezone, Basic auth)
- Google signup URL building (no I/O)
"""

import base64
import re

import pytest

from timekit import endpoints
from timekit.config import TimekitConfig, with_credentials
from timekit.request import (
    build_base_url,
    build_google_signup_url,
    build_request,
    render_path,
)

# Generic HTTP(S) URL shape
URL_PATTERN = re.compile(r"^https?://[\w.-]+(:\d+)?(/[\w./()-]*)?(\?[^#]*)?(#.*)?$")


@pytest.fixture
def config():
    return TimekitConfig(app="demo", api_base_url="http://api-localhost.timekit.io/")


class TestRenderPath:
    def test_substitutes_placeholder(self):
        assert render_path("/calendar/:token", {"token": "abc"}) == "/calendar/abc"

    def test_quotes_values(self):
        assert render_path("/properties/:key", {"key": "a b/c"}) == "/properties/a%20b%2Fc"

    def test_multiple_placeholders(self):
        path = render_path("/meetings/:token/invite", {"token": "7zd"})
        assert path == "/meetings/7zd/invite"

    def test_missing_value_raises(self):
        with pytest.raises(ValueError, match="token"):
            render_path("/meetings/:token", {})

    def test_no_placeholders(self):
        assert render_path("/calendars") == "/calendars"


class TestBuildBaseUrl:
    def test_strips_trailing_slash(self, config):
        assert build_base_url(config) == "http://api-localhost.timekit.io"

    def test_appends_version(self):
        config = TimekitConfig(api_base_url="https://api.timekit.io/", api_version="/v2/")
        assert build_base_url(config) == "https://api.timekit.io/v2"


class TestBuildRequest:
    def test_builds_url_and_method(self, config):
        request = build_request(config, endpoints.CALENDAR, path_params={"token": "1e396a70"})
        assert request.method == "GET"
        assert request.path == "/calendar/1e396a70"
        assert request.url == "http://api-localhost.timekit.io/calendar/1e396a70"

    def test_drops_none_query_values(self, config):
        request = build_request(
            config, endpoints.EVENTS, query={"start": "2015-09-22", "end": None}
        )
        assert request.query == {"start": "2015-09-22"}

    def test_sets_app_header(self, config):
        request = build_request(config, endpoints.CALENDARS)
        assert request.headers["Timekit-App"] == "demo"
        assert request.headers["Content-Type"] == "application/json"
        assert "Timekit-Timezone" not in request.headers

    def test_sets_timezone_header(self, config):
        config = config.model_copy(update={"timezone": "Europe/Copenhagen"})
        request = build_request(config, endpoints.CALENDARS)
        assert request.headers["Timekit-Timezone"] == "Europe/Copenhagen"

    def test_basic_auth_header_for_auth_endpoints(self, config):
        config = with_credentials(config, "timebirdcph@gmail.com", "password")
        request = build_request(config, endpoints.CALENDARS)

        scheme, token = request.headers["Authorization"].split(" ", 1)
        assert scheme == "Basic"
        assert base64.b64decode(token).decode() == "timebirdcph@gmail.com:password"

    def test_no_auth_header_without_credentials(self, config):
        request = build_request(config, endpoints.CALENDARS)
        assert "Authorization" not in request.headers

    def test_no_auth_header_on_unauthenticated_endpoint(self, config):
        config = with_credentials(config, "timebirdcph@gmail.com", "password")
        request = build_request(config, endpoints.AUTH, body={"email": "x", "password": "y"})
        assert "Authorization" not in request.headers
        assert request.body == {"email": "x", "password": "y"}

    def test_descriptor_is_independent_of_later_config_changes(self, config):
        config = with_credentials(config, "first@example.com", "one")
        request = build_request(config, endpoints.CALENDARS)
        header = request.headers["Authorization"]

        with_credentials(config, "second@example.com", "two")

        assert request.headers["Authorization"] == header


class TestEndpoints:
    def test_placeholders(self):
        assert endpoints.MEETING_INVITE.placeholders == ["token"]
        assert endpoints.CALENDARS.placeholders == []

    def test_unauthenticated_endpoints(self):
        assert endpoints.AUTH.auth is False
        assert endpoints.ACCOUNT_GOOGLE_SIGNUP.auth is False
        assert endpoints.USER_CREATE.auth is False
        assert endpoints.CALENDARS.auth is True

    @pytest.mark.parametrize(
        "endpoint, method, path",
        [
            (endpoints.FIND_TIME, "POST", "/findtime"),
            (endpoints.EVENTS_AVAILABILITY, "GET", "/events/availability"),
            (endpoints.MEETING_UPDATE, "PUT", "/meetings/:token"),
            (endpoints.MEETING_AVAILABILITY, "POST", "/meetings/availability"),
            (endpoints.USER_UPDATE, "PUT", "/users/me"),
            (endpoints.PROPERTIES_SET, "PUT", "/properties"),
        ],
    )
    def test_routes(self, endpoint, method, path):
        assert endpoint.method == method
        assert endpoint.path == path


class TestGoogleSignupUrl:
    def test_matches_http_url_shape(self, config):
        url = build_google_signup_url(config)
        assert URL_PATTERN.match(url)
        assert url == "http://api-localhost.timekit.io/accounts/google/signup?Timekit-App=demo"

    def test_includes_callback(self, config):
        url = build_google_signup_url(config, callback="https://example.com/done")
        assert "callback=https%3A%2F%2Fexample.com%2Fdone" in url
        assert URL_PATTERN.match(url)
