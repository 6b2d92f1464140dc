"""
Tool: Timekit Transport
Purpose: Execute request descriptors over HTTP and normalize the outcome

Every call resolves to an ApiResponse on 2xx or raises a TimekitError
subclass carrying the API's error envelope. There are no retries.

Usage:
    from timekit.transport import Transport

    transport = Transport()
    response = await transport.send(request, schema=Calendar)

Dependencies:
    - httpx (async HTTP client)
"""

import logging
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from timekit.exceptions import DecodeError, TransportError, error_for_status
from timekit.models import ApiResponse
from timekit.request import RequestDescriptor

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


class Transport:
    """
    Async HTTP transport.

    Each send() opens its own httpx.AsyncClient, so concurrent calls share no
    connection state.

    Args:
        http_transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
    """

    def __init__(self, http_transport: Optional[httpx.AsyncBaseTransport] = None):
        self._http_transport = http_transport

    def _client(self, timeout: Optional[float]) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._http_transport,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    async def send(
        self,
        request: RequestDescriptor,
        schema: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> ApiResponse:
        """
        Send a request and return the normalized response.

        Args:
            request: Descriptor built by timekit.request.build_request
            schema: Type the body's ``data`` member decodes into
            timeout: Seconds before giving up, None for no timeout

        Returns:
            ApiResponse with status, raw body and decoded payload

        Raises:
            AuthenticationError, ValidationError, ServerError: On 4xx/5xx
            TransportError: When no usable response was received
            DecodeError: When a success body is missing or does not match the schema
        """
        logger.debug(f"{request.method} {request.url}")

        try:
            async with self._client(timeout) as client:
                resp = await client.request(
                    request.method,
                    request.url,
                    params=request.query or None,
                    json=request.body,
                    headers=request.headers,
                )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"{request.method} {request.url} failed: {e!r}")
            raise TransportError(f"Request failed: {e!s}", cause=e) from e

        logger.debug(f"{request.method} {request.url} -> {resp.status_code}")
        return self._handle_response(resp, schema)

    def _handle_response(self, resp: httpx.Response, schema: Optional[Any]) -> ApiResponse:
        """Map an httpx response onto ApiResponse or the matching error."""
        status = resp.status_code

        data = None
        if status != 204 and resp.content:
            try:
                data = resp.json()
            except ValueError:
                if status < 400:
                    raise DecodeError(
                        f"Response body is not valid JSON (HTTP {status})",
                        status=status,
                        body=resp.text,
                    )

        if status >= 400:
            message = resp.reason_phrase or f"HTTP {status}"
            status_code = status
            error = data.get("error") if isinstance(data, dict) else None
            if isinstance(error, dict):
                message = error.get("message") or message
                status_code = error.get("status_code") or status
            logger.warning(f"API error {status}: {message}")
            raise error_for_status(status, message, status_code)

        payload = None
        if schema is not None and status != 204:
            if data is None:
                raise DecodeError(f"Response body is empty (HTTP {status})", status=status)
            payload = self._decode(data, schema, status)

        return ApiResponse(status=status, data=data, payload=payload)

    def _decode(self, data: Any, schema: Any, status: int) -> Any:
        if not isinstance(data, dict) or "data" not in data:
            raise DecodeError("Response body has no 'data' member", status=status, body=data)
        try:
            return _adapter(schema).validate_python(data["data"])
        except PydanticValidationError as e:
            raise DecodeError(f"Unexpected response shape: {e}", status=status, body=data) from e
