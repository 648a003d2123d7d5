"""Route configuration loader."""

import logging
from typing import Any

from r7_delays.adapters.config.app_config import AppConfig
from r7_delays.domain.models.route_configuration import RouteConfiguration
from r7_delays.domain.models.stop import Stop

logger = logging.getLogger(__name__)

# The R7 bus between Zweibrücken and Homburg (Saarland).
# External ids are known for the two main stations only.
DEFAULT_ROUTE_DATA: dict[str, Any] = {
    "name": "R7",
    "description": "Zweibrücken - Homburg (Saarland)",
    "line_code": "R7",
    "line_aliases": ["RE7", "RB7"],
    "outbound_terminus": "Homburg (Saar) Hbf",
    "inbound_terminus": "Zweibrücken Hbf",
    "direction_split_order": 3,
    "stops": [
        {
            "id": "1",
            "name": "Zweibrücken Hauptbahnhof",
            "search_name": "Zweibrücken Hbf",
            "external_id": "8000472",
            "order": 1,
        },
        {
            "id": "2",
            "name": "Zweibrücken Rosengarten",
            "search_name": "Zweibrücken Rosengarten",
            "order": 2,
        },
        {"id": "3", "name": "Einöd", "search_name": "Einöd", "order": 3},
        {"id": "4", "name": "Ingweiler", "search_name": "Ingweiler", "order": 4},
        {"id": "5", "name": "Bierbach", "search_name": "Bierbach", "order": 5},
        {"id": "6", "name": "Beeden", "search_name": "Beeden", "order": 6},
        {
            "id": "7",
            "name": "Homburg (Saar) Hauptbahnhof",
            "search_name": "Homburg Hbf",
            "external_id": "8000176",
            "order": 7,
        },
    ],
}


class RouteConfigurationLoader:
    """Loads the route configuration from app config or the built-in default."""

    @staticmethod
    def load_stop_from_data(stop_data: dict[str, Any]) -> Stop:
        """Load a single stop from a data dict."""
        if not isinstance(stop_data, dict):
            raise ValueError("Each stop must be a table")

        stop_id = stop_data.get("id")
        name = stop_data.get("name")
        order = stop_data.get("order")
        if not stop_id or not name:
            raise ValueError("Each stop must have an 'id' and a 'name'")
        if not isinstance(order, int) or isinstance(order, bool) or order < 1:
            raise ValueError(f"Stop '{stop_id}' must have a positive integer 'order'")

        external_id = stop_data.get("external_id")
        return Stop(
            id=str(stop_id),
            name=str(name),
            search_name=str(stop_data.get("search_name") or name),
            order=order,
            external_id=str(external_id) if external_id else None,
        )

    @staticmethod
    def load_from_data(route_data: dict[str, Any]) -> RouteConfiguration:
        """Build a validated route configuration from a data dict.

        Raises ValueError if stop ids or orders are not unique, or no stops are defined.
        """
        stops_data = route_data.get("stops", [])
        if not stops_data:
            raise ValueError("Route must define at least one stop")

        stops = [RouteConfigurationLoader.load_stop_from_data(s) for s in stops_data]

        ids = [s.id for s in stops]
        if len(ids) != len(set(ids)):
            duplicates = {i for i in ids if ids.count(i) > 1}
            raise ValueError(f"Stop ids must be unique. Duplicate ids found: {duplicates}")
        orders = [s.order for s in stops]
        if len(orders) != len(set(orders)):
            duplicates_order = {o for o in orders if orders.count(o) > 1}
            raise ValueError(f"Stop orders must be unique. Duplicate orders: {duplicates_order}")

        line_code = str(route_data.get("line_code") or route_data.get("name") or "")
        if not line_code:
            raise ValueError("Route must define a 'line_code'")

        aliases = route_data.get("line_aliases", [])
        if not isinstance(aliases, list):
            aliases = []

        return RouteConfiguration(
            name=str(route_data.get("name") or line_code),
            description=str(route_data.get("description", "")),
            line_code=line_code,
            stops=sorted(stops, key=lambda s: s.order),
            line_aliases=[str(a) for a in aliases],
            outbound_terminus=str(route_data.get("outbound_terminus", "")),
            inbound_terminus=str(route_data.get("inbound_terminus", "")),
            direction_split_order=int(route_data.get("direction_split_order", 3)),
        )

    @staticmethod
    def load(config: AppConfig) -> RouteConfiguration:
        """Load the route from the configured TOML file, or the built-in R7 route."""
        route_data = config.load_route_data()
        if route_data is None:
            return RouteConfigurationLoader.load_from_data(DEFAULT_ROUTE_DATA)

        logger.info(f"Loading route configuration from {config.config_file}")
        return RouteConfigurationLoader.load_from_data(route_data)
