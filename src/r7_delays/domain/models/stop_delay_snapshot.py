"""Stop delay snapshot domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from r7_delays.domain.models.departure_record import DepartureRecord
from r7_delays.domain.models.station_match import GeoLocation
from r7_delays.domain.models.stop import Stop


@dataclass(frozen=True)
class StopDelaySnapshot:
    """Delay state of one stop at a point in time.

    Produced fresh on every resolution, never cached. The first upcoming
    departure is flattened into the top-level fields.
    """

    stop_id: str
    stop_name: str
    stop_order: int
    last_updated: datetime
    external_id: str | None = None
    external_name: str | None = None
    location: GeoLocation | None = None
    scheduled_departure: datetime | None = None
    expected_arrival: datetime | None = None
    delay_minutes: int = 0
    status: str = "unknown"
    cancelled: bool = False
    platform: str | None = None
    direction: str | None = None
    line_name: str | None = None
    remarks: list[str] = field(default_factory=list)
    upcoming_departures: list[DepartureRecord] = field(default_factory=list)
    error: str | None = None
    is_simulated: bool = False

    @property
    def has_data(self) -> bool:
        """Whether this snapshot contributes to delay statistics."""
        return self.error is None and self.scheduled_departure is not None

    @classmethod
    def failed(cls, stop: Stop, error: str, last_updated: datetime) -> "StopDelaySnapshot":
        """Build a snapshot for a stop whose lookup failed."""
        return cls(
            stop_id=stop.id,
            stop_name=stop.name,
            stop_order=stop.order,
            last_updated=last_updated,
            error=error,
        )
