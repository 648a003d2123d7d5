"""Ports (interfaces) for the ports-and-adapters architecture."""

from r7_delays.domain.ports.delay_service import DelayService
from r7_delays.domain.ports.random_source import RandomSource
from r7_delays.domain.ports.transit_api import TransitApi

__all__ = [
    "DelayService",
    "RandomSource",
    "TransitApi",
]
