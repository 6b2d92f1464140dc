"""
Tool: Timekit Endpoints
Purpose: Route table for every API operation the client exposes

Each Endpoint is a template: HTTP method, path pattern with ``:name``
placeholders, whether the call needs user credentials, and the schema the
body's ``data`` member decodes into.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from timekit.models import AuthToken, Calendar, Meeting, Property, User

PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    auth: bool = True
    schema: Optional[Any] = None

    @property
    def placeholders(self) -> list[str]:
        return PLACEHOLDER_PATTERN.findall(self.path)


# Authentication
AUTH = Endpoint("GET", "/auth", auth=False, schema=AuthToken)
ACCOUNT_GOOGLE_SIGNUP = Endpoint("GET", "/accounts/google/signup", auth=False)

# Accounts
ACCOUNTS = Endpoint("GET", "/accounts", schema=list[dict[str, Any]])
ACCOUNT_GOOGLE_CALENDARS = Endpoint("GET", "/accounts/google/calendars", schema=list[dict[str, Any]])
ACCOUNT_SYNC = Endpoint("GET", "/accounts/sync")

# Find time
FIND_TIME = Endpoint("POST", "/findtime", schema=list[dict[str, Any]])

# Calendars and contacts
CALENDARS = Endpoint("GET", "/calendars", schema=list[Calendar])
CALENDAR = Endpoint("GET", "/calendar/:token", schema=Calendar)
CONTACTS = Endpoint("GET", "/contacts", schema=list[dict[str, Any]])

# Events
EVENTS = Endpoint("GET", "/events", schema=list[dict[str, Any]])
EVENTS_AVAILABILITY = Endpoint("GET", "/events/availability", schema=list[dict[str, Any]])

# Meetings
MEETINGS = Endpoint("GET", "/meetings", schema=list[Meeting])
MEETING = Endpoint("GET", "/meetings/:token", schema=Meeting)
MEETING_CREATE = Endpoint("POST", "/meetings", schema=Meeting)
MEETING_UPDATE = Endpoint("PUT", "/meetings/:token")
MEETING_AVAILABILITY = Endpoint("POST", "/meetings/availability")
MEETING_BOOK = Endpoint("POST", "/meetings/book")
MEETING_INVITE = Endpoint("POST", "/meetings/:token/invite")

# Users
USER_CREATE = Endpoint("POST", "/users", auth=False, schema=User)
USER_ME = Endpoint("GET", "/users/me", schema=User)
USER_UPDATE = Endpoint("PUT", "/users/me")

# Properties
PROPERTIES = Endpoint("GET", "/properties", schema=list[Property])
PROPERTY = Endpoint("GET", "/properties/:key", schema=Property)
PROPERTIES_SET = Endpoint("PUT", "/properties")
