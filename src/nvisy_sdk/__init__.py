"""Typed asynchronous SDK for the Nvisy document and workspace API."""

from .client import NvisyClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MAX_TIMEOUT, NvisyConfig
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    FileAccessError,
    HttpStatusError,
    NotFoundError,
    NvisyError,
    PermissionDeniedError,
    RateLimitError,
    SerializationError,
    TransportError,
    UrlParseError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "MAX_TIMEOUT",
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "FileAccessError",
    "HttpStatusError",
    "NotFoundError",
    "NvisyClient",
    "NvisyConfig",
    "NvisyError",
    "PermissionDeniedError",
    "RateLimitError",
    "SerializationError",
    "TransportError",
    "UrlParseError",
]
