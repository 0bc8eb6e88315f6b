# ABOUTME: Async HTTP client abstraction for metadata provider and cover image requests.
# ABOUTME: Provides rate limiting, raw byte responses, and an injectable transport for testing.

import asyncio
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from homelibrary.errors import NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = "homelibrary/0.1.0"


@dataclass
class HttpResponse:
    """Status and raw body of a completed GET request."""

    status_code: int
    content: bytes
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> None:
        """Raise NetworkError unless the response has a 2xx status."""
        if not self.ok:
            raise NetworkError(f"HTTP {self.status_code} from {self.url}")

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            NetworkError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.content)
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {self.url}: {exc}") from exc


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata and image hosts."""

    async def get(self, url: str) -> HttpResponse: ...


class LibraryHttpClient:
    """Async HTTP client with rate limiting for metadata API calls.

    Wraps httpx.AsyncClient. Transport failures raise NetworkError; any
    HTTP status is returned to the caller, which decides what counts as
    an error. There is no retry: callers fall through to the next provider.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)
        self._min_interval = min_request_interval
        self._last_request_time: float = 0.0

    async def get(self, url: str) -> HttpResponse:
        """Send a GET request.

        Args:
            url: The fully built URL to request.

        Returns:
            The response status and body.

        Raises:
            NetworkError: On connection, timeout, or other transport failures.
        """
        await self._rate_limit()
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Request failed: {url}: {exc}") from exc

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return HttpResponse(
            status_code=response.status_code,
            content=response.content,
            url=url,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "LibraryHttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            await asyncio.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
