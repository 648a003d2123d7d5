"""Route configuration domain model."""

from dataclasses import dataclass, field

from r7_delays.domain.models.stop import Stop


@dataclass(frozen=True)
class RouteConfiguration:
    """The single route being reported on, with its ordered stops."""

    name: str
    description: str
    line_code: str
    stops: list[Stop]
    line_aliases: list[str] = field(default_factory=list)  # Whole-label aliases, e.g. "RE7"
    outbound_terminus: str = ""  # Direction label for stops up to direction_split_order
    inbound_terminus: str = ""  # Direction label for the remaining stops
    direction_split_order: int = 3

    @property
    def last_order(self) -> int:
        """Order of the final stop on the route."""
        return max((stop.order for stop in self.stops), default=0)

    def find_stop(self, stop_id: str) -> Stop | None:
        """Find a stop by its stable id."""
        for stop in self.stops:
            if stop.id == stop_id:
                return stop
        return None
