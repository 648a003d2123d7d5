"""Parser for transport.rest location search results."""

import logging
from typing import Any

from r7_delays.domain.models.station_match import GeoLocation, StationMatch

logger = logging.getLogger(__name__)


class LocationParser:
    """Converts /locations payloads into StationMatch objects."""

    @staticmethod
    def parse_locations(data: Any) -> list[StationMatch] | None:
        """Parse a locations payload.

        Returns None when the payload is not a list at all; entries without
        an id (e.g. plain addresses) are skipped.
        """
        if not isinstance(data, list):
            return None

        matches = []
        for item in data:
            match = LocationParser.parse_location(item)
            if match is not None:
                matches.append(match)
        return matches

    @staticmethod
    def parse_location(item: Any) -> StationMatch | None:
        """Parse a single location entry."""
        if not isinstance(item, dict):
            return None

        external_id = item.get("id")
        if external_id is None or external_id == "":
            return None
        external_id = str(external_id)

        name = item.get("name")
        return StationMatch(
            external_id=external_id,
            display_name=str(name) if name else external_id,
            location=LocationParser._parse_coordinates(item.get("location")),
            kind=str(item.get("type") or "location"),
        )

    @staticmethod
    def _parse_coordinates(location: Any) -> GeoLocation | None:
        if not isinstance(location, dict):
            return None
        latitude = location.get("latitude")
        longitude = location.get("longitude")
        if not isinstance(latitude, int | float) or not isinstance(longitude, int | float):
            return None
        return GeoLocation(latitude=float(latitude), longitude=float(longitude))
