"""Resolves delay snapshots for every stop on the route."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from r7_delays.application.services.availability_prober import AvailabilityProber
from r7_delays.application.services.departure_fetcher import DepartureFetcher
from r7_delays.application.services.line_filter import LineFilter
from r7_delays.application.services.route_summary_calculator import RouteSummaryCalculator
from r7_delays.application.services.station_resolver import PREFERRED_KINDS, StationResolver
from r7_delays.application.services.synthetic_data_generator import SyntheticDataGenerator
from r7_delays.domain.delay import STATUS_UNKNOWN
from r7_delays.domain.models import (
    DepartureRecord,
    GeoLocation,
    RouteConfiguration,
    RouteSummary,
    StationMatch,
    Stop,
    StopDelaySnapshot,
)
from r7_delays.domain.ports import DelayService, RandomSource, TransitApi

logger = logging.getLogger(__name__)

STATION_NOT_FOUND_ERROR = "Station not found in upstream directory"


@dataclass(frozen=True)
class DelayResolverSettings:
    """Tunables for delay resolution."""

    probe_query: str = "Saarbrücken"
    force_simulation: bool = False
    station_candidates: int = 5
    departure_results: int = 50
    lookahead_minutes: int = 120
    upcoming_departures: int = 5
    search_results: int = 10


class DelayResolver(DelayService):
    """Aggregate resolver choosing between real and simulated data.

    Owns all mutable state (availability flag, station cache), so independent
    instances never share caches. Stops are resolved one at a time in route
    order.
    """

    def __init__(
        self,
        route: RouteConfiguration,
        transit_api: TransitApi,
        settings: DelayResolverSettings | None = None,
        random_source: RandomSource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the resolver and its collaborators.

        Args:
            route: Route with its ordered stops.
            transit_api: Upstream API adapter.
            settings: Resolution tunables, defaults if omitted.
            random_source: Random source for simulated data (seedable for tests).
            clock: Clock returning timezone-aware "now".
        """
        self._route = route
        self._transit_api = transit_api
        self._settings = settings or DelayResolverSettings()
        self._clock = clock or (lambda: datetime.now(UTC))

        self.prober = AvailabilityProber(
            transit_api,
            probe_query=self._settings.probe_query,
            force_unavailable=self._settings.force_simulation,
        )
        self.station_resolver = StationResolver(
            transit_api, candidate_limit=self._settings.station_candidates
        )
        self.departure_fetcher = DepartureFetcher(
            transit_api,
            LineFilter(route.line_code, list(route.line_aliases)),
            results_limit=self._settings.departure_results,
            lookahead_minutes=self._settings.lookahead_minutes,
        )
        self.synthetic_generator = SyntheticDataGenerator(random_source, self._clock)

    @property
    def route(self) -> RouteConfiguration:
        """The route being reported on."""
        return self._route

    async def is_using_real_data(self) -> bool:
        """Whether snapshots come from the upstream API."""
        return await self.prober.check_availability()

    def list_stops(self) -> list[Stop]:
        """Static stops in route order."""
        return list(self._route.stops)

    async def resolve_all(self) -> list[StopDelaySnapshot]:
        """Resolve every stop, falling back to simulated data when upstream is down."""
        if not await self.prober.check_availability():
            logger.debug("Using simulated data")
            return self.synthetic_generator.generate(self._route)

        now = self._clock()
        snapshots: list[StopDelaySnapshot] = []
        for stop in self._route.stops:
            try:
                snapshots.append(await self._resolve_real_stop(stop, now))
            except Exception as e:
                logger.error(f"Error processing stop {stop.name}: {e}", exc_info=True)
                snapshots.append(StopDelaySnapshot.failed(stop, str(e), now))
        return snapshots

    async def resolve_stop(self, stop_id: str) -> StopDelaySnapshot | None:
        """Resolve the snapshot for one stop; unknown ids return None without any lookup."""
        if self._route.find_stop(stop_id) is None:
            return None
        for snapshot in await self.resolve_all():
            if snapshot.stop_id == stop_id:
                return snapshot
        return None

    def summarize(self, snapshots: list[StopDelaySnapshot]) -> RouteSummary:
        """Compute aggregate statistics over snapshots."""
        return RouteSummaryCalculator.summarize(snapshots)

    async def search_stations(self, query: str) -> list[StationMatch]:
        """Search stations, matching static stops by name in simulated mode."""
        if not await self.prober.check_availability():
            needle = query.lower()
            return [
                StationMatch(
                    external_id=stop.external_id or stop.id,
                    display_name=stop.name,
                    location=None,
                    kind="stop",
                )
                for stop in self._route.stops
                if needle in stop.name.lower()
            ]

        try:
            matches = await self._transit_api.search_locations(
                query, results=self._settings.search_results
            )
        except Exception as e:
            logger.error(f"Error searching stations for '{query}': {e}")
            return []
        return [m for m in matches if m.kind in PREFERRED_KINDS]

    async def _resolve_real_stop(self, stop: Stop, now: datetime) -> StopDelaySnapshot:
        station = await self.station_resolver.find_station(stop.search_name or stop.name)

        if station is None:
            if not stop.external_id:
                return StopDelaySnapshot.failed(stop, STATION_NOT_FOUND_ERROR, now)
            logger.info(
                f"Station lookup failed for {stop.name}, using configured id {stop.external_id}"
            )
            departures = await self.departure_fetcher.fetch_departures(stop.external_id)
            return self._build_snapshot(stop, stop.external_id, stop.name, None, departures, now)

        departures = await self.departure_fetcher.fetch_departures(station.external_id)
        return self._build_snapshot(
            stop, station.external_id, station.display_name, station.location, departures, now
        )

    def _build_snapshot(
        self,
        stop: Stop,
        external_id: str,
        external_name: str,
        location: GeoLocation | None,
        departures: list[DepartureRecord],
        now: datetime,
    ) -> StopDelaySnapshot:
        upcoming = departures[: self._settings.upcoming_departures]
        first = departures[0] if departures else None

        if first is None:
            return StopDelaySnapshot(
                stop_id=stop.id,
                stop_name=stop.name,
                stop_order=stop.order,
                last_updated=now,
                external_id=external_id,
                external_name=external_name,
                location=location,
                status=STATUS_UNKNOWN,
                line_name=self._route.line_code,
            )

        return StopDelaySnapshot(
            stop_id=stop.id,
            stop_name=stop.name,
            stop_order=stop.order,
            last_updated=now,
            external_id=external_id,
            external_name=external_name,
            location=location,
            scheduled_departure=first.scheduled_time,
            expected_arrival=first.expected_time,
            delay_minutes=first.delay_minutes,
            status=first.status,
            cancelled=first.cancelled,
            platform=first.platform,
            direction=first.direction,
            line_name=first.line_name or self._route.line_code,
            remarks=list(first.remarks),
            upcoming_departures=upcoming,
        )
