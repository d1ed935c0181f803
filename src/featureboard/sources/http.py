"""HTTP payload source."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from .protocol import PayloadSourceError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = "https://dummyjson.com/c/e9ec-093c-47b6-a3ae"


class HttpPayloadSource:
    """Fetches the board payload from a JSON endpoint.

    A thin wrapper around `httpx.Client` with a bounded timeout; every failure
    is reported as `PayloadSourceError` so callers have one thing to catch.
    """

    def __init__(
        self,
        url: str = DEFAULT_SOURCE_URL,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the source.

        Args:
            url: Endpoint returning the board payload as JSON
            timeout: Seconds allowed for the whole request
            client: Optional preconfigured client (mainly for tests)
        """
        self.url = url
        self.timeout = timeout
        self._client = client or httpx.Client(
            headers={"Accept": "application/json"},
            timeout=timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpPayloadSource:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def describe(self) -> str:
        return self.url

    def fetch(self) -> Any:
        """GET the payload and decode it.

        Raises:
            PayloadSourceError: Network failure, HTTP error status or invalid JSON
        """
        logger.debug("GET %s (timeout=%.1fs)", self.url, self.timeout)

        start_time = time.monotonic()
        try:
            response = self._client.get(self.url)
        except httpx.TimeoutException as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("GET %s timed out after %.0fms", self.url, elapsed_ms)
            raise PayloadSourceError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("GET %s failed after %.0fms: %s", self.url, elapsed_ms, e)
            raise PayloadSourceError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if response.status_code >= 400:
            logger.error("GET %s: HTTP %d (%.0fms)", self.url, response.status_code, elapsed_ms)
            raise PayloadSourceError(f"HTTP error! Status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error("GET %s: Invalid JSON response (%.0fms)", self.url, elapsed_ms)
            raise PayloadSourceError(f"Invalid JSON response: {e}") from e

        logger.info("GET %s: %d OK (%.0fms)", self.url, response.status_code, elapsed_ms)
        return data
