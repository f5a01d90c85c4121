"""Exception hierarchy for the Nvisy SDK.

Every failure surfaced by the SDK derives from :class:`NvisyError`. Errors
carry a human readable ``message``, an optional numeric ``code`` and a
``context`` mapping with diagnostic details (request method, URL, response
body). The originating exception is always chained via ``raise ... from``.
"""

from __future__ import annotations

from typing import Any

import httpx


class NvisyError(Exception):
    """Base exception for all Nvisy SDK errors."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.message} (code={self.code})"
        return self.message


class ConfigError(NvisyError):
    """Raised when client configuration fails validation."""


class TransportError(NvisyError):
    """Network, DNS or timeout failure reported by the HTTP layer."""


class HttpStatusError(TransportError):
    """The API answered with a status code outside the 2xx range."""

    def __init__(
        self,
        message: str,
        status_code: int,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, context)
        self.status_code = status_code

    @property
    def body(self) -> str:
        return str(self.context.get("body", ""))


class AuthenticationError(HttpStatusError):
    """401: the bearer token was rejected."""


class PermissionDeniedError(HttpStatusError):
    """403: the token is valid but not allowed to perform the operation."""


class NotFoundError(HttpStatusError):
    """404: the requested resource does not exist (or was deleted)."""


class RateLimitError(HttpStatusError):
    """429: too many requests."""


class SerializationError(NvisyError):
    """A request body could not be encoded or a response body could not be decoded."""


class UrlParseError(NvisyError):
    """The base URL or request path could not be parsed."""


class FileAccessError(NvisyError):
    """Reading or writing a local file for an upload/download helper failed."""


class ApiError(NvisyError):
    """The API returned a well-formed response that is missing expected data."""


_STATUS_ERRORS: dict[int, type[HttpStatusError]] = {
    httpx.codes.UNAUTHORIZED: AuthenticationError,
    httpx.codes.FORBIDDEN: PermissionDeniedError,
    httpx.codes.NOT_FOUND: NotFoundError,
    httpx.codes.TOO_MANY_REQUESTS: RateLimitError,
}


def error_for_status(response: httpx.Response) -> HttpStatusError:
    """Build the typed error matching a non-success ``response``.

    The body must already be read; it is attached verbatim to the error
    context so callers can inspect server-provided details.
    """
    request = response.request
    status = response.status_code
    error_cls = _STATUS_ERRORS.get(status, HttpStatusError)
    message = (
        f"HTTP {status} {response.reason_phrase} for {request.method} {request.url}"
    )
    context = {
        "method": request.method,
        "url": str(request.url),
        "body": response.text,
    }
    return error_cls(message, status, context)
