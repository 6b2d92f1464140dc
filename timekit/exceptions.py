"""
Tool: Timekit Exceptions
Purpose: Error taxonomy for failed API calls

Every failure raised by an endpoint call carries the same error envelope the
API returns in its body:

    {"error": {"message": "...", "status_code": 401}}

Usage:
    from timekit.exceptions import AuthenticationError, TimekitError

    try:
        await client.get_calendars()
    except AuthenticationError as e:
        print(e.status_code, e.message)
"""

from typing import Any, Optional


class TimekitError(Exception):
    """Base exception for all failed Timekit calls."""

    def __init__(
        self,
        message: str,
        status: int = 0,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.status = status
        self.status_code = status if status_code is None else status_code
        super().__init__(message)

    @property
    def data(self) -> dict[str, Any]:
        """Error envelope in the API's wire shape."""
        return {
            "error": {
                "message": self.message,
                "status_code": self.status_code,
            }
        }

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class AuthenticationError(TimekitError):
    """Raised on 401/403: missing, malformed or wrong credentials."""

    pass


class ValidationError(TimekitError):
    """Raised on any other 4xx, usually a malformed request body."""

    pass


class ServerError(TimekitError):
    """Raised on 5xx responses."""

    pass


class TransportError(TimekitError):
    """
    Raised when no HTTP response was received at all.

    Connection refused, DNS failure, timeouts, redirect loops, undecodable
    content encodings and unusable base URLs all land here. ``status`` is always 0.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message, status=0, status_code=0)


class DecodeError(TimekitError):
    """Raised when a success response does not match the expected shape."""

    def __init__(self, message: str, status: int, body: Any = None):
        self.body = body
        super().__init__(message, status=status)


def error_for_status(status: int, message: str, status_code: Optional[int] = None) -> TimekitError:
    """Build the exception matching an HTTP error status."""
    if status in (401, 403):
        cls: type[TimekitError] = AuthenticationError
    elif 400 <= status < 500:
        cls = ValidationError
    elif status >= 500:
        cls = ServerError
    else:
        cls = TimekitError
    return cls(message, status=status, status_code=status_code)


__all__ = [
    "TimekitError",
    "AuthenticationError",
    "ValidationError",
    "ServerError",
    "TransportError",
    "DecodeError",
    "error_for_status",
]
