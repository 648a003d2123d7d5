"""Fetches departures for a station and keeps the target line only."""

import logging

from r7_delays.application.services.line_filter import LineFilter
from r7_delays.domain.models.departure_record import DepartureRecord
from r7_delays.domain.ports.transit_api import TransitApi

logger = logging.getLogger(__name__)


class DepartureFetcher:
    """Retrieves upcoming departures for the target line at a station."""

    def __init__(
        self,
        transit_api: TransitApi,
        line_filter: LineFilter,
        results_limit: int = 50,
        lookahead_minutes: int = 120,
    ) -> None:
        """Initialize the fetcher.

        Args:
            transit_api: Upstream API to query.
            line_filter: Filter selecting the target line.
            results_limit: Maximum number of departures requested upstream.
            lookahead_minutes: Default lookahead window.
        """
        self._transit_api = transit_api
        self._line_filter = line_filter
        self._results_limit = results_limit
        self._lookahead_minutes = lookahead_minutes

    async def fetch_departures(
        self, station_id: str, lookahead_minutes: int | None = None
    ) -> list[DepartureRecord]:
        """Get the target line's departures at a station, empty on any failure."""
        duration = lookahead_minutes if lookahead_minutes is not None else self._lookahead_minutes
        try:
            departures = await self._transit_api.get_departures(
                station_id,
                duration_minutes=duration,
                results=self._results_limit,
            )
        except Exception as e:
            logger.error(f"Error getting departures for station {station_id}: {e}")
            return []

        matching = [d for d in departures if self._line_filter.matches(d.line_name)]
        logger.debug(
            f"Station {station_id}: {len(matching)} of {len(departures)} departures "
            f"match line {self._line_filter.line_code}"
        )
        return matching
