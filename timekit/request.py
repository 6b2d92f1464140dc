"""
Tool: Timekit Request Builder
Purpose: Turn an endpoint template plus call arguments into a concrete request

The builder reads the configuration it is handed and copies everything it
needs (URL, headers, credentials) into the descriptor, so later config
changes never reach a request that was already built.

Usage:
    from timekit import endpoints
    from timekit.request import build_request

    request = build_request(config, endpoints.CALENDAR, path_params={"token": "abc"})
    request.url  # https://api.timekit.io/calendar/abc
"""

import base64
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote, urlencode

from timekit.config import TimekitConfig
from timekit.endpoints import ACCOUNT_GOOGLE_SIGNUP, PLACEHOLDER_PATTERN, Endpoint


@dataclass
class RequestDescriptor:
    """A single HTTP request, owned by the call that built it."""

    method: str
    path: str
    url: str
    query: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None


def build_base_url(config: TimekitConfig) -> str:
    """Base URL plus optional API version, without a trailing slash."""
    base = config.api_base_url.rstrip("/")
    if config.api_version:
        base = f"{base}/{config.api_version.strip('/')}"
    return base


def render_path(path: str, path_params: Optional[dict[str, Any]] = None) -> str:
    """
    Substitute ``:name`` placeholders with URL-quoted values.

    Raises:
        ValueError: If a placeholder has no value
    """
    params = path_params or {}

    def _replace(match) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None or value == "":
            raise ValueError(f"Missing value for path parameter '{name}' in {path}")
        return quote(str(value), safe="")

    return PLACEHOLDER_PATTERN.sub(_replace, path)


def encode_basic_auth(email: str, api_token: str) -> str:
    token = base64.b64encode(f"{email}:{api_token}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_headers(config: TimekitConfig, auth: bool) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Timekit-App": config.app,
    }
    if config.timezone:
        headers["Timekit-Timezone"] = config.timezone
    if auth and config.credentials is not None:
        headers["Authorization"] = encode_basic_auth(
            config.credentials.email, config.credentials.api_token
        )
    return headers


def build_request(
    config: TimekitConfig,
    endpoint: Endpoint,
    path_params: Optional[dict[str, Any]] = None,
    query: Optional[dict[str, Any]] = None,
    body: Optional[Any] = None,
) -> RequestDescriptor:
    """
    Build a request descriptor for one endpoint call.

    Authenticated endpoints are built even without credentials; the API
    answers those with a 401 which the transport maps to AuthenticationError.

    Args:
        config: Configuration to read (not modified)
        endpoint: Endpoint template
        path_params: Values for the path placeholders
        query: Query parameters, None values are dropped
        body: JSON-serialisable request body

    Returns:
        RequestDescriptor
    """
    path = render_path(endpoint.path, path_params)
    return RequestDescriptor(
        method=endpoint.method,
        path=path,
        url=f"{build_base_url(config)}{path}",
        query={k: v for k, v in (query or {}).items() if v is not None},
        headers=build_headers(config, endpoint.auth),
        body=body,
    )


def build_google_signup_url(config: TimekitConfig, callback: Optional[str] = None) -> str:
    """
    Build the Google account signup URL.

    Pure string building: the caller sends the user's browser there.

    Args:
        config: Configuration supplying base URL and app
        callback: Optional URL the API redirects to after signup

    Returns:
        Absolute signup URL
    """
    params = {"Timekit-App": config.app}
    if callback:
        params["callback"] = callback
    return f"{build_base_url(config)}{ACCOUNT_GOOGLE_SIGNUP.path}?{urlencode(params)}"
