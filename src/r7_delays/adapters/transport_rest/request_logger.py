"""Optional tracing of transport.rest traffic."""

import logging
import time
from urllib.parse import urlencode

logger = logging.getLogger(__name__)


class UpstreamRequestLogger:
    """Logs each upstream call with its outcome and latency when enabled.

    A full delay resolution issues one lookup and one departure query per
    stop, so tracing shows which stops are slow or failing.
    """

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    @staticmethod
    def format_url(url: str, params: dict[str, str | int] | None = None) -> str:
        """URL as sent, with query parameters in stable order."""
        if not params:
            return url
        return f"{url}?{urlencode(sorted(params.items()))}"

    def log_request(self, url: str, params: dict[str, str | int] | None = None) -> float:
        """Log an outgoing GET and return its start time."""
        if self.enabled:
            logger.info(f"Upstream GET {self.format_url(url, params)}")
        return time.monotonic()

    def log_response(self, url: str, status: int, started: float) -> None:
        """Log the HTTP status of a completed call."""
        if self.enabled:
            logger.info(f"Upstream {status} from {url} in {self._elapsed_ms(started)} ms")

    def log_failure(self, url: str, error: Exception, started: float) -> None:
        """Log a call that never produced a usable response."""
        if self.enabled:
            logger.info(f"Upstream call to {url} failed after {self._elapsed_ms(started)} ms: {error}")

    @staticmethod
    def _elapsed_ms(started: float) -> int:
        return round((time.monotonic() - started) * 1000)
