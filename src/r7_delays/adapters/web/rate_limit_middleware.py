"""Per-client request quota for the JSON API, enforced with throttled-py token buckets."""

import logging
import math
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from throttled import RateLimiterType, Throttled, rate_limiter, store

from .responses import error_response

logger = logging.getLogger(__name__)

RATE_LIMIT_ERROR = "Rate limit exceeded. Please try again later."
API_PREFIX = "/api/"
# Load balancer health checks are never throttled
DEFAULT_EXEMPT_PATHS = ("/api/health",)
FALLBACK_RETRY_AFTER_SECONDS = 60


def client_key(request: Request) -> str:
    """Identify the caller, preferring the first hop of X-Forwarded-For."""
    first_hop = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    if first_hop:
        return first_hop
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def retry_after_seconds(result: Any) -> int:
    """Whole seconds until the caller's bucket refills, at least 1."""
    retry_after = getattr(getattr(result, "state", None), "retry_after", None)
    if not isinstance(retry_after, int | float):
        return FALLBACK_RETRY_AFTER_SECONDS
    return max(1, math.ceil(retry_after))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Throttles `/api/*` requests per client; other paths and exempt endpoints pass through.

    Every delay request can fan out into one upstream call per stop, so the
    quota protects the upstream API as much as this service.
    """

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 100,
        exempt_paths: Iterable[str] = DEFAULT_EXEMPT_PATHS,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests each client may make per minute.
            exempt_paths: API paths that are never throttled.
        """
        super().__init__(app)
        self.exempt_paths = frozenset(exempt_paths)
        self._throttle = Throttled(
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=rate_limiter.per_min(requests_per_minute, burst=requests_per_minute),
            store=store.MemoryStore(),
        )
        logger.info(f"API quota: {requests_per_minute} requests per minute per client")

    def is_throttled_path(self, path: str) -> bool:
        """Whether requests to a path count against the quota."""
        return path.startswith(API_PREFIX) and path not in self.exempt_paths

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject over-quota API requests with 429, pass everything else on."""
        if not self.is_throttled_path(request.url.path):
            return await call_next(request)

        key = client_key(request)
        result = self._throttle.limit(key)
        if not result.limited:
            return await call_next(request)

        retry_after = retry_after_seconds(result)
        logger.warning(f"Quota exceeded for {key} on {request.url.path}, retry in {retry_after}s")
        return error_response(
            RATE_LIMIT_ERROR, 429, headers={"Retry-After": str(retry_after)}
        )
