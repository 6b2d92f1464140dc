"""Timekit: async Python client for the Timekit scheduling API

One coroutine per REST endpoint, over a small configurable HTTP layer.

Components:
    config.py: Configuration model, yaml/env loading, controlled updates
    endpoints.py: Route table (method, path, auth, result schema)
    request.py: Request builder (path params, query, auth headers)
    transport.py: httpx transport, response/error normalization
    client.py: TimekitClient, one method per endpoint
    api.py: Module-level functions bound to a default client
    models.py: Result schemas and the ApiResponse envelope
    exceptions.py: Error taxonomy
    cli.py: ``timekit`` command line tool

Usage:
    import timekit

    timekit.configure(app="demo")
    await timekit.auth("user@example.com", "password")
    response = await timekit.get_calendars()
"""

from timekit.api import (
    account_google_signup,
    account_sync,
    auth,
    book_meeting,
    configure,
    create_meeting,
    create_user,
    find_time,
    get_account_google_calendars,
    get_accounts,
    get_availability,
    get_calendar,
    get_calendars,
    get_client,
    get_config,
    get_contacts,
    get_events,
    get_meeting,
    get_meetings,
    get_user,
    get_user_info,
    get_user_properties,
    get_user_property,
    invite_to_meeting,
    set_client,
    set_meeting_availability,
    set_user,
    set_user_properties,
    update_meeting,
    update_user,
)
from timekit.client import TimekitClient
from timekit.config import TimekitConfig, load_config
from timekit.exceptions import (
    AuthenticationError,
    DecodeError,
    ServerError,
    TimekitError,
    TransportError,
    ValidationError,
)
from timekit.models import ApiResponse, Credentials

__version__ = "0.1.0"

__all__ = [
    "TimekitClient",
    "TimekitConfig",
    "load_config",
    "ApiResponse",
    "Credentials",
    "TimekitError",
    "AuthenticationError",
    "ValidationError",
    "ServerError",
    "TransportError",
    "DecodeError",
    "get_client",
    "set_client",
    "configure",
    "set_user",
    "get_config",
    "get_user",
    "auth",
    "account_google_signup",
    "get_accounts",
    "get_account_google_calendars",
    "account_sync",
    "find_time",
    "get_calendars",
    "get_calendar",
    "get_contacts",
    "get_events",
    "get_availability",
    "get_meetings",
    "get_meeting",
    "create_meeting",
    "update_meeting",
    "set_meeting_availability",
    "book_meeting",
    "invite_to_meeting",
    "create_user",
    "get_user_info",
    "update_user",
    "get_user_properties",
    "get_user_property",
    "set_user_properties",
]
