"""Spacing for outgoing upstream requests.

Ensures a minimum delay between consecutive requests to the same API.
A minimum delay of zero disables waiting entirely.
"""

import asyncio
import logging
import time

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Rate limiter for outgoing API requests, async-safe via asyncio.Lock."""

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait until enough time has passed since the previous request."""
        async with self._lock:
            if self._last_request_time is not None and self.min_delay_seconds > 0:
                elapsed = time.monotonic() - self._last_request_time
                wait_time = self.min_delay_seconds - elapsed
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)

            self._last_request_time = time.monotonic()
