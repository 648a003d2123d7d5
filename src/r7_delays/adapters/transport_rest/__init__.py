"""transport.rest adapters for the upstream HAFAS API."""

from r7_delays.adapters.transport_rest.http_client import TransportRestHttpClient
from r7_delays.adapters.transport_rest.request_logger import UpstreamRequestLogger
from r7_delays.adapters.transport_rest.transport_rest_api import TransportRestApi

__all__ = ["TransportRestApi", "TransportRestHttpClient", "UpstreamRequestLogger"]
