"""
Module-level API backed by a process-wide default client.

Usage:
    import timekit

    timekit.configure(app="demo", apiBaseUrl="https://api.timekit.io/")
    timekit.set_user("user@example.com", "api-token")
    response = await timekit.get_calendars()
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from timekit.client import TimeArg, TimekitClient
from timekit.config import TimekitConfig
from timekit.models import ApiResponse, Credentials

_client_instance: TimekitClient | None = None


def get_client() -> TimekitClient:
    """Get or create the global TimekitClient instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = TimekitClient()
    return _client_instance


def set_client(client: Optional[TimekitClient]) -> None:
    """Replace the global client (None resets it to a fresh default on next use)."""
    global _client_instance
    _client_instance = client


# Configuration


def configure(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> TimekitConfig:
    return get_client().configure(options, **kwargs)


def set_user(email: str, api_token: str) -> None:
    get_client().set_user(email, api_token)


def get_config() -> TimekitConfig:
    return get_client().get_config()


def get_user() -> Optional[Credentials]:
    return get_client().get_user()


# Authentication and accounts


async def auth(email: str, password: str) -> ApiResponse:
    return await get_client().auth(email, password)


def account_google_signup(callback: Optional[str] = None) -> str:
    return get_client().account_google_signup(callback)


async def get_accounts() -> ApiResponse:
    return await get_client().get_accounts()


async def get_account_google_calendars() -> ApiResponse:
    return await get_client().get_account_google_calendars()


async def account_sync() -> ApiResponse:
    return await get_client().account_sync()


async def find_time(
    emails: list[str],
    filters: Optional[dict[str, Any]] = None,
    future: Optional[str] = None,
    length: Optional[str] = None,
    sort: Optional[str] = None,
) -> ApiResponse:
    return await get_client().find_time(emails, filters, future, length, sort)


# Calendars, contacts, events


async def get_calendars() -> ApiResponse:
    return await get_client().get_calendars()


async def get_calendar(token: str) -> ApiResponse:
    return await get_client().get_calendar(token)


async def get_contacts() -> ApiResponse:
    return await get_client().get_contacts()


async def get_events(start: TimeArg, end: TimeArg) -> ApiResponse:
    return await get_client().get_events(start, end)


async def get_availability(start: TimeArg, end: TimeArg, email: str) -> ApiResponse:
    return await get_client().get_availability(start, end, email)


# Meetings


async def get_meetings() -> ApiResponse:
    return await get_client().get_meetings()


async def get_meeting(token: str) -> ApiResponse:
    return await get_client().get_meeting(token)


async def create_meeting(what: str, where: str, suggestions: list[Any]) -> ApiResponse:
    return await get_client().create_meeting(what, where, suggestions)


async def update_meeting(token: str, data: Mapping[str, Any]) -> ApiResponse:
    return await get_client().update_meeting(token, data)


async def set_meeting_availability(suggestion_id: Any, available: bool) -> ApiResponse:
    return await get_client().set_meeting_availability(suggestion_id, available)


async def book_meeting(suggestion_id: Any) -> ApiResponse:
    return await get_client().book_meeting(suggestion_id)


async def invite_to_meeting(token: str, emails: list[str]) -> ApiResponse:
    return await get_client().invite_to_meeting(token, emails)


# Users and properties


async def create_user(
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    timezone: str,
) -> ApiResponse:
    return await get_client().create_user(first_name, last_name, email, password, timezone)


async def get_user_info() -> ApiResponse:
    return await get_client().get_user_info()


async def update_user(data: Mapping[str, Any]) -> ApiResponse:
    return await get_client().update_user(data)


async def get_user_properties() -> ApiResponse:
    return await get_client().get_user_properties()


async def get_user_property(key: str) -> ApiResponse:
    return await get_client().get_user_property(key)


async def set_user_properties(data: Mapping[str, Any]) -> ApiResponse:
    return await get_client().set_user_properties(data)
