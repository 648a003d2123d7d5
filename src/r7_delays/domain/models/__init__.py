"""Domain models for R7 delays."""

from r7_delays.domain.models.departure_record import DepartureRecord
from r7_delays.domain.models.route_configuration import RouteConfiguration
from r7_delays.domain.models.route_summary import RouteSummary
from r7_delays.domain.models.station_match import GeoLocation, StationMatch
from r7_delays.domain.models.stop import Stop
from r7_delays.domain.models.stop_delay_snapshot import StopDelaySnapshot

__all__ = [
    "DepartureRecord",
    "GeoLocation",
    "RouteConfiguration",
    "RouteSummary",
    "StationMatch",
    "Stop",
    "StopDelaySnapshot",
]
