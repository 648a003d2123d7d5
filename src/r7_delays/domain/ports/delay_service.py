"""Delay service port."""

from typing import Protocol

from r7_delays.domain.models.route_configuration import RouteConfiguration
from r7_delays.domain.models.route_summary import RouteSummary
from r7_delays.domain.models.station_match import StationMatch
from r7_delays.domain.models.stop import Stop
from r7_delays.domain.models.stop_delay_snapshot import StopDelaySnapshot


class DelayService(Protocol):
    """Port for resolving delay information for the configured route."""

    @property
    def route(self) -> RouteConfiguration:
        """The route being reported on."""
        ...

    async def is_using_real_data(self) -> bool:
        """Whether snapshots come from the upstream API rather than simulation."""
        ...

    async def resolve_all(self) -> list[StopDelaySnapshot]:
        """Resolve a snapshot for every stop, in route order."""
        ...

    async def resolve_stop(self, stop_id: str) -> StopDelaySnapshot | None:
        """Resolve the snapshot for one stop, or None if the id is unknown."""
        ...

    def summarize(self, snapshots: list[StopDelaySnapshot]) -> RouteSummary:
        """Compute aggregate statistics over snapshots."""
        ...

    def list_stops(self) -> list[Stop]:
        """Return the static stop list in route order."""
        ...

    async def search_stations(self, query: str) -> list[StationMatch]:
        """Search stations by name."""
        ...
