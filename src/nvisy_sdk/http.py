"""Authenticated HTTP primitives shared by every Nvisy service."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Self, TypeVar

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .config import NvisyConfig
from .errors import (
    SerializationError,
    TransportError,
    UrlParseError,
    error_for_status,
)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM = "application/octet-stream"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


@dataclass(frozen=True, slots=True)
class _ClientState:
    """Configuration plus transport, shared read-only between client clones."""

    config: NvisyConfig
    http: httpx.AsyncClient
    owns_http: bool


class HttpCore:
    """Build, send and decode authenticated requests against the Nvisy API.

    Instances hold a single immutable state object. :meth:`clone` hands the
    same state to a new instance, so clones share configuration and
    connection pool and can be used concurrently without locking.
    """

    def __init__(self, config: NvisyConfig) -> None:
        http = config.http_client
        owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(timeout=config.timeout)
        self._state = _ClientState(config=config, http=http, owns_http=owns_http)
        logger.debug(
            f"Initialized Nvisy client for {config.base_url} "
            f"(api_key={config.masked_api_key}, timeout={config.timeout}s)"
        )

    @classmethod
    def _from_state(cls, state: _ClientState) -> Self:
        instance = cls.__new__(cls)
        instance._state = state
        return instance

    @property
    def config(self) -> NvisyConfig:
        return self._state.config

    def clone(self) -> Self:
        """Return a client sharing this client's configuration and transport."""
        return self._from_state(self._state)

    def __copy__(self) -> Self:
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self._state.config!r})"

    async def aclose(self) -> None:
        """Close the transport if this client created it.

        An injected ``http_client`` is left open; its lifecycle belongs to the
        caller that built it.
        """
        if self._state.owns_http:
            await self._state.http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _url(self, path: str) -> str:
        return f"{self._state.config.base_url.rstrip('/')}{path}"

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._state.config.api_key}",
            "Accept": JSON_CONTENT_TYPE,
        }

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json: Any = None,
        content: bytes | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Compose base URL and ``path`` into a request carrying auth headers.

        Bodies default to ``application/json``; raw ``content`` is sent as
        ``application/octet-stream`` and multipart ``files`` let httpx set the
        boundary header.
        """
        request_headers = self._auth_headers()
        if files is None:
            is_raw = content is not None
            request_headers["Content-Type"] = OCTET_STREAM if is_raw else JSON_CONTENT_TYPE
        if headers:
            request_headers.update(headers)

        url = self._url(path)
        try:
            return self._state.http.build_request(
                method,
                url,
                params=params,
                json=json,
                content=content,
                files=files,
                headers=request_headers,
            )
        except httpx.InvalidURL as exc:
            raise UrlParseError(f"Invalid request URL: {url}", context={"url": url}) from exc
        except TypeError as exc:
            raise SerializationError(
                f"Request body for {method} {url} is not JSON serializable: {exc}",
                context={"method": method, "url": url},
            ) from exc

    def build_multipart_request(
        self,
        method: str,
        path: str,
        filename: str,
        data: bytes,
        *,
        field: str = "file",
    ) -> httpx.Request:
        """Encode ``data`` as a single multipart form field named ``field``."""
        return self.build_request(method, path, files={field: (filename, data)})

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Execute ``request`` and return the response once its status is 2xx.

        Non-success statuses raise an :class:`~nvisy_sdk.errors.HttpStatusError`
        subclass before any body parsing happens.
        """
        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._state.http.send(request)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request timed out: {request.method} {request.url}",
                context={"method": request.method, "url": str(request.url)},
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"Connection error for {request.method} {request.url}: {exc}",
                context={"method": request.method, "url": str(request.url)},
            ) from exc

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        if not response.is_success:
            raise error_for_status(response)
        return response

    async def send_json(self, request: httpx.Request, response_type: type[T]) -> T:
        """Send ``request`` and validate its JSON body as ``response_type``."""
        response = await self.send(request)
        return self.decode(response, response_type)

    async def send_bytes(self, request: httpx.Request) -> bytes:
        response = await self.send(request)
        return response.content

    async def send_text(self, request: httpx.Request) -> str:
        response = await self.send(request)
        return response.text

    async def send_delete(self, request: httpx.Request) -> None:
        """Send a request whose only meaningful outcome is its status."""
        await self.send(request)

    @staticmethod
    def decode(response: httpx.Response, response_type: type[T]) -> T:
        """Parse the JSON body of ``response`` into ``response_type``."""
        url = str(response.request.url)
        try:
            payload = response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Invalid JSON response from {url}",
                context={"url": url, "body": response.text[:200]},
            ) from exc

        try:
            return _adapter(response_type).validate_python(payload)
        except ValidationError as exc:
            logger.error(f"Response validation failed for {url}: {exc}")
            raise SerializationError(
                f"Unexpected response shape from {url}",
                context={"url": url, "errors": exc.errors(include_url=False, include_input=False)},
            ) from exc
