"""HTTP client for transport.rest requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from r7_delays.adapters.api_rate_limiter import ApiRateLimiter
from r7_delays.adapters.transport_rest.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    LOCATIONS_PATH,
    STOPS_PATH,
)
from r7_delays.adapters.transport_rest.request_logger import UpstreamRequestLogger
from r7_delays.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransportRestHttpClient:
    """Thin aiohttp wrapper returning decoded JSON or raising UpstreamError."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = DEFAULT_BASE_URL,
        rate_limiter: ApiRateLimiter | None = None,
        request_logger: UpstreamRequestLogger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session (timeouts and User-Agent are set on it).
            base_url: API base URL without trailing slash.
            rate_limiter: Optional spacing between requests.
            request_logger: Optional tracing of every call.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._rate_limiter = rate_limiter
        self._request_logger = request_logger or UpstreamRequestLogger()

    async def fetch_locations(self, query: str, results: int) -> Any:
        """GET /locations for a free-text query."""
        return await self._get_json(LOCATIONS_PATH, {"query": query, "results": results})

    async def fetch_departures(self, station_id: str, duration: int, results: int) -> Any:
        """GET /stops/{id}/departures within a lookahead window."""
        return await self._get_json(
            f"{STOPS_PATH}/{station_id}/departures",
            {"duration": duration, "results": results},
        )

    async def _get_json(self, path: str, params: dict[str, str | int]) -> Any:
        url = f"{self._base_url}{path}"

        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

        started = self._request_logger.log_request(url, params)
        try:
            async with self._session.get(url, params=params, headers=DEFAULT_HEADERS) as response:
                self._request_logger.log_response(url, response.status, started)
                if not 200 <= response.status < 300:
                    body = await response.text()
                    raise UpstreamError(
                        f"Upstream returned status {response.status} for {url}: {body[:200]}",
                        status_code=response.status,
                    )
                return await response.json(content_type=None)
        except UpstreamError:
            raise
        except TimeoutError as e:
            self._request_logger.log_failure(url, e, started)
            raise UpstreamError(f"Upstream request to {url} timed out") from e
        except aiohttp.ClientError as e:
            self._request_logger.log_failure(url, e, started)
            raise UpstreamError(f"Upstream request to {url} failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Upstream returned malformed JSON for {url}: {e}") from e
