"""
Tool: Timekit Models
Purpose: Result schemas for API payloads and the response envelope

Only the fields callers rely on are declared; everything else the API sends
is kept (``extra="allow"``) and reachable as attributes.

Usage:
    from timekit.models import ApiResponse, Calendar

    response = await client.get_calendar(token)
    response.payload.name      # typed
    response.data["data"]      # raw body
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)
    email: str
    api_token: str


class AuthToken(BaseModel):
    model_config = ConfigDict(extra="allow")
    email: str
    api_token: str


class Calendar(BaseModel):
    model_config = ConfigDict(extra="allow")
    name: str
    token: Optional[str] = None
    description: Optional[str] = None


class Suggestion(BaseModel):
    """Proposed meeting window."""

    model_config = ConfigDict(extra="allow")
    id: Optional[Any] = None
    start: Any
    end: Any


class Meeting(BaseModel):
    model_config = ConfigDict(extra="allow")
    what: str
    where: Optional[str] = None
    token: Optional[str] = None
    suggestions: list[Suggestion] = Field(default_factory=list)


class User(BaseModel):
    model_config = ConfigDict(extra="allow")
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    timezone: Optional[str] = None


class Property(BaseModel):
    model_config = ConfigDict(extra="allow")
    key: Optional[str] = None
    value: str


@dataclass
class ApiResponse:
    """
    Successful API call.

    Attributes:
        status: HTTP status code (200, 201 or 204)
        data: Decoded JSON body, None when the response has no body
        payload: The body's ``data`` member decoded into the endpoint's
                 result schema, None when the endpoint declares none
    """

    status: int
    data: Any = None
    payload: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data}


def serialize_time(value: Any) -> Any:
    """Render datetimes as ISO 8601 strings; pass anything else through."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def serialize_suggestions(suggestions: list[Any]) -> list[dict[str, Any]]:
    """Normalize suggestions given as dicts or Suggestion models."""
    result = []
    for s in suggestions:
        if isinstance(s, BaseModel):
            s = s.model_dump(exclude_none=True)
        result.append({k: serialize_time(v) for k, v in s.items()})
    return result
