"""Domain layer - core business logic and models."""

from r7_delays.domain.errors import UpstreamError
from r7_delays.domain.models import (
    DepartureRecord,
    RouteConfiguration,
    StationMatch,
    Stop,
    StopDelaySnapshot,
)
from r7_delays.domain.ports import DelayService, RandomSource, TransitApi

__all__ = [
    "DelayService",
    "DepartureRecord",
    "RandomSource",
    "RouteConfiguration",
    "StationMatch",
    "Stop",
    "StopDelaySnapshot",
    "TransitApi",
    "UpstreamError",
]
