"""Transit API port."""

from typing import Protocol

from r7_delays.domain.models.departure_record import DepartureRecord
from r7_delays.domain.models.station_match import StationMatch


class TransitApi(Protocol):
    """Port for the upstream transit directory and departure board.

    Implementations raise UpstreamError on any failure.
    """

    async def search_locations(self, query: str, results: int = 5) -> list[StationMatch]:
        """Search the directory for locations matching a query."""
        ...

    async def get_departures(
        self,
        station_id: str,
        duration_minutes: int = 120,
        results: int = 50,
    ) -> list[DepartureRecord]:
        """Get upcoming departures at a station within a lookahead window."""
        ...
