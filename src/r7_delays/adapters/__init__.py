"""Adapters layer - external system integrations."""

from r7_delays.adapters.config import AppConfig
from r7_delays.adapters.transport_rest import TransportRestApi, TransportRestHttpClient

__all__ = [
    "AppConfig",
    "TransportRestApi",
    "TransportRestHttpClient",
]
