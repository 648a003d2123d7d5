"""Upstream availability probe."""

import logging

from r7_delays.domain.errors import UpstreamError
from r7_delays.domain.ports.transit_api import TransitApi

logger = logging.getLogger(__name__)


def describe_failure(error: Exception) -> str:
    """Short description of why the probe failed."""
    if isinstance(error, UpstreamError) and error.status_code is not None:
        return f"answered HTTP {error.status_code}"
    return "not reachable"


class AvailabilityProber:
    """Decides once whether the upstream API is reachable and remembers the answer.

    The result is sticky for the lifetime of the instance: a transient outage
    at probe time keeps the process in simulated mode until restart.
    """

    def __init__(
        self,
        transit_api: TransitApi,
        probe_query: str = "Saarbrücken",
        force_unavailable: bool = False,
    ) -> None:
        """Initialize the prober.

        Args:
            transit_api: Upstream API to probe.
            probe_query: Well-known place name used for the probe lookup.
            force_unavailable: Skip the probe and report the upstream as unavailable.
        """
        self._transit_api = transit_api
        self._probe_query = probe_query
        self._force_unavailable = force_unavailable
        self._available: bool | None = None  # None = not tested yet

    async def check_availability(self) -> bool:
        """Return whether the upstream API is available, probing on first call."""
        if self._available is not None:
            return self._available

        if self._force_unavailable:
            self._available = False
            logger.info("Upstream API disabled by configuration - using simulated data")
            return False

        try:
            await self._transit_api.search_locations(self._probe_query, results=1)
        except Exception as e:
            self._available = False
            logger.warning(
                f"Upstream API {describe_failure(e)} - using simulated data. Reason: {e}"
            )
            return False

        self._available = True
        logger.info("Upstream API is available - using real-time data")
        return True
