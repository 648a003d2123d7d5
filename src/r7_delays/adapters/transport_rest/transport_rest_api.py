"""transport.rest adapter implementing the TransitApi port."""

import logging

from r7_delays.adapters.transport_rest.departure_parser import DepartureParser
from r7_delays.adapters.transport_rest.http_client import TransportRestHttpClient
from r7_delays.adapters.transport_rest.location_parser import LocationParser
from r7_delays.domain.errors import UpstreamError
from r7_delays.domain.models.departure_record import DepartureRecord
from r7_delays.domain.models.station_match import StationMatch
from r7_delays.domain.ports.transit_api import TransitApi

logger = logging.getLogger(__name__)


class TransportRestApi(TransitApi):
    """Adapter for a transport.rest HAFAS API, validating payloads at the boundary."""

    def __init__(self, http_client: TransportRestHttpClient) -> None:
        """Initialize with the HTTP client used for requests."""
        self._http_client = http_client

    async def search_locations(self, query: str, results: int = 5) -> list[StationMatch]:
        """Search locations by name.

        Raises:
            UpstreamError: If the request fails or the payload is not a location list.
        """
        data = await self._http_client.fetch_locations(query, results)
        matches = LocationParser.parse_locations(data)
        if matches is None:
            raise UpstreamError(f"Unexpected locations payload for query '{query}'")
        return matches

    async def get_departures(
        self,
        station_id: str,
        duration_minutes: int = 120,
        results: int = 50,
    ) -> list[DepartureRecord]:
        """Get departures at a station.

        Raises:
            UpstreamError: If the request fails or the payload has no departures list.
        """
        data = await self._http_client.fetch_departures(station_id, duration_minutes, results)
        departures = DepartureParser.extract_departures(data)
        if departures is None:
            raise UpstreamError(f"Unexpected departures payload for station {station_id}")

        records = DepartureParser.parse_departures(departures)
        if len(records) != len(departures):
            logger.debug(
                f"Dropped {len(departures) - len(records)} malformed departures at {station_id}"
            )
        return records
