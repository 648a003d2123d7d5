"""Application services."""

from r7_delays.application.services.availability_prober import AvailabilityProber
from r7_delays.application.services.delay_resolver import (
    DelayResolver,
    DelayResolverSettings,
)
from r7_delays.application.services.departure_fetcher import DepartureFetcher
from r7_delays.application.services.line_filter import LineFilter
from r7_delays.application.services.route_summary_calculator import RouteSummaryCalculator
from r7_delays.application.services.station_resolver import StationResolver
from r7_delays.application.services.synthetic_data_generator import SyntheticDataGenerator

__all__ = [
    "AvailabilityProber",
    "DelayResolver",
    "DelayResolverSettings",
    "DepartureFetcher",
    "LineFilter",
    "RouteSummaryCalculator",
    "StationResolver",
    "SyntheticDataGenerator",
]
