"""Route summary domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteSummary:
    """Aggregate delay statistics over one set of snapshots."""

    total_stops: int
    stops_with_data: int
    stops_without_data: int
    average_delay_minutes: int
    max_delay_minutes: int
    on_time_percentage: int
    stops_on_time: int
    stops_delayed: int
    cancelled_services: int
