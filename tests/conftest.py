"""Shared fixtures for the test suite."""

from datetime import datetime

import pytest

from r7_delays.adapters.config.route_configuration_loader import (
    DEFAULT_ROUTE_DATA,
    RouteConfigurationLoader,
)
from r7_delays.domain.models import RouteConfiguration

from .fakes import FIXED_NOW


@pytest.fixture
def route() -> RouteConfiguration:
    """The built-in R7 route."""
    return RouteConfigurationLoader.load_from_data(DEFAULT_ROUTE_DATA)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed point in time used as "now"."""
    return FIXED_NOW
