"""Station match domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoLocation:
    """A WGS84 coordinate."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class StationMatch:
    """Result of resolving a search string against the upstream directory."""

    external_id: str
    display_name: str
    location: GeoLocation | None = None
    kind: str = "stop"  # Upstream location type: "stop", "station", "location", ...
