"""Configuration adapters."""

from r7_delays.adapters.config.app_config import AppConfig
from r7_delays.adapters.config.route_configuration_loader import RouteConfigurationLoader

__all__ = ["AppConfig", "RouteConfigurationLoader"]
