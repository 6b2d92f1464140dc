"""
Tool: Timekit Client
Purpose: One coroutine per Timekit API endpoint

The client owns a configuration and a transport. Every endpoint method builds
a fresh request from the configuration as it is at call time and returns the
transport's result unchanged.

Usage:
    from timekit.client import TimekitClient

    client = TimekitClient(app="demo", api_base_url="https://api.timekit.io/")
    await client.auth("user@example.com", "password")
    calendars = await client.get_calendars()
    for calendar in calendars.payload:
        print(calendar.name)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

import httpx

from timekit import endpoints
from timekit.config import TimekitConfig, load_config, merge_options, with_credentials
from timekit.endpoints import Endpoint
from timekit.models import ApiResponse, Credentials, serialize_suggestions, serialize_time
from timekit.request import build_google_signup_url, build_request
from timekit.transport import Transport

logger = logging.getLogger(__name__)

TimeArg = str | datetime


class TimekitClient:
    """
    Async client for the Timekit API.

    Args:
        config: Starting configuration (defaults to load_config())
        http_transport: Optional httpx transport, mainly for tests
        **options: Config options merged on top of ``config``
    """

    def __init__(
        self,
        config: Optional[TimekitConfig] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ):
        self._config = config if config is not None else load_config()
        if options:
            self._config = merge_options(self._config, options)
        self._transport = Transport(http_transport)

    # =========================================================================
    # Configuration
    # =========================================================================

    def configure(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> TimekitConfig:
        """
        Merge recognised options into the configuration.

        Accepts ``app``, ``api_base_url``/``apiBaseUrl``,
        ``api_version``/``apiVersion``, ``timezone`` and ``timeout``. Unknown
        keys are ignored. Takes effect from the next call.
        """
        merged = dict(options or {})
        merged.update(kwargs)
        self._config = merge_options(self._config, merged)
        return self._config

    def set_user(self, email: str, api_token: str) -> None:
        """Use these credentials for subsequent calls."""
        self._config = with_credentials(self._config, email, api_token)

    def get_config(self) -> TimekitConfig:
        return self._config

    def get_user(self) -> Optional[Credentials]:
        return self._config.credentials

    async def _call(
        self,
        endpoint: Endpoint,
        path_params: Optional[dict[str, Any]] = None,
        query: Optional[dict[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> ApiResponse:
        config = self._config
        request = build_request(config, endpoint, path_params=path_params, query=query, body=body)
        return await self._transport.send(request, schema=endpoint.schema, timeout=config.timeout)

    # =========================================================================
    # Authentication
    # =========================================================================

    async def auth(self, email: str, password: str) -> ApiResponse:
        """
        Exchange email and password for an API token.

        On success the returned email/api_token become the client's
        credentials for subsequent calls.
        """
        response = await self._call(endpoints.AUTH, body={"email": email, "password": password})
        token = response.payload
        self.set_user(token.email, token.api_token)
        logger.info(f"Authenticated as {token.email}")
        return response

    def account_google_signup(self, callback: Optional[str] = None) -> str:
        """Return the Google signup URL. No request is made."""
        return build_google_signup_url(self._config, callback=callback)

    # =========================================================================
    # Accounts
    # =========================================================================

    async def get_accounts(self) -> ApiResponse:
        return await self._call(endpoints.ACCOUNTS)

    async def get_account_google_calendars(self) -> ApiResponse:
        return await self._call(endpoints.ACCOUNT_GOOGLE_CALENDARS)

    async def account_sync(self) -> ApiResponse:
        return await self._call(endpoints.ACCOUNT_SYNC)

    # =========================================================================
    # Find time
    # =========================================================================

    async def find_time(
        self,
        emails: list[str],
        filters: Optional[dict[str, Any]] = None,
        future: Optional[str] = None,
        length: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> ApiResponse:
        """
        Ask the API for time slots where all given users are free.

        Args:
            emails: Users whose calendars are considered
            filters: ``{"or": [...], "and": [...]}`` availability filters
            future: How far ahead to search, e.g. "3 days"
            length: Slot length, e.g. "30 minutes"
            sort: "asc" or "desc"
        """
        body = {
            "emails": emails,
            "filters": filters,
            "future": future,
            "length": length,
            "sort": sort,
        }
        return await self._call(
            endpoints.FIND_TIME,
            body={k: v for k, v in body.items() if v is not None},
        )

    # =========================================================================
    # Calendars, contacts, events
    # =========================================================================

    async def get_calendars(self) -> ApiResponse:
        return await self._call(endpoints.CALENDARS)

    async def get_calendar(self, token: str) -> ApiResponse:
        return await self._call(endpoints.CALENDAR, path_params={"token": token})

    async def get_contacts(self) -> ApiResponse:
        return await self._call(endpoints.CONTACTS)

    async def get_events(self, start: TimeArg, end: TimeArg) -> ApiResponse:
        return await self._call(
            endpoints.EVENTS,
            query={"start": serialize_time(start), "end": serialize_time(end)},
        )

    async def get_availability(self, start: TimeArg, end: TimeArg, email: str) -> ApiResponse:
        return await self._call(
            endpoints.EVENTS_AVAILABILITY,
            query={
                "start": serialize_time(start),
                "end": serialize_time(end),
                "email": email,
            },
        )

    # =========================================================================
    # Meetings
    # =========================================================================

    async def get_meetings(self) -> ApiResponse:
        return await self._call(endpoints.MEETINGS)

    async def get_meeting(self, token: str) -> ApiResponse:
        return await self._call(endpoints.MEETING, path_params={"token": token})

    async def create_meeting(self, what: str, where: str, suggestions: list[Any]) -> ApiResponse:
        """
        Create a meeting proposal.

        Args:
            what: Title
            where: Location
            suggestions: Candidate windows as ``{"start", "end"}`` dicts or
                         Suggestion models; datetimes are sent as ISO 8601
        """
        body = {
            "what": what,
            "where": where,
            "suggestions": serialize_suggestions(suggestions),
        }
        return await self._call(endpoints.MEETING_CREATE, body=body)

    async def update_meeting(self, token: str, data: Mapping[str, Any]) -> ApiResponse:
        return await self._call(endpoints.MEETING_UPDATE, path_params={"token": token}, body=dict(data))

    async def set_meeting_availability(self, suggestion_id: Any, available: bool) -> ApiResponse:
        return await self._call(
            endpoints.MEETING_AVAILABILITY,
            body={"suggestion_id": suggestion_id, "available": available},
        )

    async def book_meeting(self, suggestion_id: Any) -> ApiResponse:
        return await self._call(endpoints.MEETING_BOOK, body={"suggestion_id": suggestion_id})

    async def invite_to_meeting(self, token: str, emails: list[str]) -> ApiResponse:
        return await self._call(
            endpoints.MEETING_INVITE,
            path_params={"token": token},
            body={"emails": emails},
        )

    # =========================================================================
    # Users
    # =========================================================================

    async def create_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        timezone: str,
    ) -> ApiResponse:
        body = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
            "timezone": timezone,
        }
        return await self._call(endpoints.USER_CREATE, body=body)

    async def get_user_info(self) -> ApiResponse:
        return await self._call(endpoints.USER_ME)

    async def update_user(self, data: Mapping[str, Any]) -> ApiResponse:
        return await self._call(endpoints.USER_UPDATE, body=dict(data))

    # =========================================================================
    # Properties
    # =========================================================================

    async def get_user_properties(self) -> ApiResponse:
        return await self._call(endpoints.PROPERTIES)

    async def get_user_property(self, key: str) -> ApiResponse:
        return await self._call(endpoints.PROPERTY, path_params={"key": key})

    async def set_user_properties(self, data: Mapping[str, Any]) -> ApiResponse:
        return await self._call(endpoints.PROPERTIES_SET, body=dict(data))
