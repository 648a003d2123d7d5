"""Test doubles and builders shared across the test suite."""

from datetime import UTC, datetime

from r7_delays.domain.errors import UpstreamError
from r7_delays.domain.models import DepartureRecord, StationMatch

FIXED_NOW = datetime(2024, 5, 14, 10, 12, 45, tzinfo=UTC)


class FakeTransitApi:
    """In-memory TransitApi recording every call."""

    def __init__(
        self,
        locations: dict[str, list[StationMatch]] | None = None,
        departures: dict[str, list[DepartureRecord]] | None = None,
        fail_search: bool = False,
        fail_departures: bool = False,
    ) -> None:
        self.locations = locations or {}
        self.departures = departures or {}
        self.fail_search = fail_search
        self.fail_departures = fail_departures
        self.search_calls: list[tuple[str, int]] = []
        self.departure_calls: list[tuple[str, int, int]] = []

    async def search_locations(self, query: str, results: int = 5) -> list[StationMatch]:
        self.search_calls.append((query, results))
        if self.fail_search:
            raise UpstreamError("connection refused")
        return list(self.locations.get(query, []))[:results]

    async def get_departures(
        self, station_id: str, duration_minutes: int = 120, results: int = 50
    ) -> list[DepartureRecord]:
        self.departure_calls.append((station_id, duration_minutes, results))
        if self.fail_departures:
            raise UpstreamError("upstream returned 503", status_code=503)
        return list(self.departures.get(station_id, []))


def make_departure(
    delay_minutes: int = 0,
    status: str = "on-time",
    line_name: str = "RE7",
    cancelled: bool = False,
    scheduled_time: datetime | None = FIXED_NOW,
    direction: str | None = "Homburg (Saar) Hbf",
) -> DepartureRecord:
    """Build a departure record for tests."""
    return DepartureRecord(
        scheduled_time=scheduled_time,
        actual_time=None,
        delay_minutes=delay_minutes,
        status=status,
        cancelled=cancelled,
        platform="2",
        direction=direction,
        line_name=line_name,
    )
