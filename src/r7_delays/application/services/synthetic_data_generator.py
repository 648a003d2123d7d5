"""Synthetic delay data for when the upstream API is unavailable."""

import logging
import random
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from r7_delays.domain.delay import STATUS_CANCELLED, classify_delay
from r7_delays.domain.models.route_configuration import RouteConfiguration
from r7_delays.domain.models.stop import Stop
from r7_delays.domain.models.stop_delay_snapshot import StopDelaySnapshot
from r7_delays.domain.ports.random_source import RandomSource

logger = logging.getLogger(__name__)

MAX_BASE_DELAY_MINUTES = 15
# Base draws below this collapse to 0, biasing towards on-time (5 of 16 outcomes)
ON_TIME_BELOW_MINUTES = 5
CANCELLATION_PROBABILITY = 0.05
PLATFORM_RANGE = (1, 3)


def next_half_hour(now: datetime) -> datetime:
    """Return the next top-of-half-hour time after now (:30 or the next :00)."""
    base = now.replace(second=0, microsecond=0)
    if now.minute < 30:
        return base.replace(minute=30)
    return base.replace(minute=0) + timedelta(hours=1)


class SyntheticDataGenerator:
    """Generates plausible, well-formed snapshots for every stop on the route."""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize with an optional seeded random source and clock."""
        self._random = random_source or random.Random()
        self._clock = clock or (lambda: datetime.now(UTC))

    def generate(self, route: RouteConfiguration) -> list[StopDelaySnapshot]:
        """Generate one simulated snapshot per stop, in route order."""
        now = self._clock()
        scheduled = next_half_hour(now)
        last_order = route.last_order
        return [
            self._generate_for_stop(stop, route, scheduled, now, last_order)
            for stop in route.stops
        ]

    def draw_delay_minutes(self) -> int:
        """Draw a delay, uniformly from 0-15 with values below 5 collapsed to 0."""
        base_delay = self._random.randint(0, MAX_BASE_DELAY_MINUTES)
        return 0 if base_delay < ON_TIME_BELOW_MINUTES else base_delay

    def _generate_for_stop(
        self,
        stop: Stop,
        route: RouteConfiguration,
        scheduled: datetime,
        now: datetime,
        last_order: int,
    ) -> StopDelaySnapshot:
        drawn_delay = self.draw_delay_minutes()
        cancelled = self._random.random() < CANCELLATION_PROBABILITY
        # A cancelled service reports no delay but keeps the arrival it would have had
        delay = 0 if cancelled else drawn_delay

        platform = None
        if stop.order in (1, last_order):
            platform = str(self._random.randint(*PLATFORM_RANGE))

        direction = (
            route.outbound_terminus
            if stop.order <= route.direction_split_order
            else route.inbound_terminus
        )

        return StopDelaySnapshot(
            stop_id=stop.id,
            stop_name=stop.name,
            stop_order=stop.order,
            last_updated=now,
            external_id=stop.external_id,
            external_name=stop.name,
            location=None,
            scheduled_departure=scheduled,
            expected_arrival=scheduled + timedelta(minutes=drawn_delay),
            delay_minutes=delay,
            status=STATUS_CANCELLED if cancelled else classify_delay(delay),
            cancelled=cancelled,
            platform=platform,
            direction=direction,
            line_name=route.line_code,
            remarks=[],
            upcoming_departures=[],
            is_simulated=True,
        )
