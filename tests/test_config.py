"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from r7_delays.adapters.config import AppConfig
from r7_delays.adapters.config.route_configuration_loader import (
    DEFAULT_ROUTE_DATA,
    RouteConfigurationLoader,
)


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.host == "0.0.0.0"
    assert config.port == 3000
    assert config.upstream_base_url == "https://v6.db.transport.rest"
    assert config.upstream_timeout_seconds == 10.0
    assert config.probe_query == "Saarbrücken"
    assert config.lookahead_minutes == 120
    assert config.departure_results == 50
    assert config.search_min_query_length == 2
    assert config.force_simulation is False
    assert config.log_upstream_requests is False
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("FORCE_SIMULATION", "true")
    monkeypatch.setenv("SIMULATION_SEED", "42")
    monkeypatch.setenv("UPSTREAM_BASE_URL", "https://v5.vbb.transport.rest")
    monkeypatch.setenv("LOG_UPSTREAM_REQUESTS", "true")

    config = AppConfig()

    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.force_simulation is True
    assert config.simulation_seed == 42
    assert config.upstream_base_url == "https://v5.vbb.transport.rest"
    assert config.log_upstream_requests is True


@pytest.mark.parametrize(
    "field", ["LOOKAHEAD_MINUTES", "DEPARTURE_RESULTS", "SEARCH_MIN_QUERY_LENGTH"]
)
def test_config_rejects_non_positive_counts(monkeypatch: pytest.MonkeyPatch, field: str) -> None:
    """Given a zero count, when loading config, then validation fails."""
    monkeypatch.setenv(field, "0")

    with pytest.raises(ValueError, match="at least 1"):
        AppConfig()


def test_config_rejects_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a zero timeout, when loading config, then validation fails."""
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError, match="must be positive"):
        AppConfig()


def test_config_rejects_negative_request_spacing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a negative minimum delay, when loading config, then validation fails."""
    monkeypatch.setenv("UPSTREAM_MIN_DELAY_SECONDS", "-1")

    with pytest.raises(ValueError, match="must not be negative"):
        AppConfig()


def test_route_data_is_none_without_config_file() -> None:
    """Given no config file, when loading route data, then None."""
    assert AppConfig(config_file=None).load_route_data() is None


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading route data, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_route_data()


def test_loader_uses_built_in_route_by_default() -> None:
    """Given no config file, when loading the route, then the built-in R7 route is returned."""
    route = RouteConfigurationLoader.load(AppConfig(config_file=None))

    assert route.name == "R7"
    assert route.line_code == "R7"
    assert route.line_aliases == ["RE7", "RB7"]
    assert [s.order for s in route.stops] == [1, 2, 3, 4, 5, 6, 7]
    assert route.stops[0].external_id == "8000472"
    assert route.stops[0].search_name == "Zweibrücken Hbf"
    assert route.stops[6].external_id == "8000176"
    assert route.stops[6].search_name == "Homburg Hbf"
    assert all(s.external_id is None for s in route.stops[1:6])


def test_loader_reads_route_from_toml() -> None:
    """Given a TOML route file, when loading, then stops are parsed and sorted by order."""
    path = _write_toml(
        """
[route]
name = "R7"
description = "Test"
line_code = "R7"
line_aliases = ["RE7"]

[[stops]]
id = "b"
name = "Beeden"
order = 2

[[stops]]
id = "a"
name = "Einöd"
search_name = "Einöd (Saar)"
external_id = 123
order = 1
"""
    )
    try:
        route = RouteConfigurationLoader.load(AppConfig(config_file=path))
    finally:
        Path(path).unlink()

    assert [s.id for s in route.stops] == ["a", "b"]
    assert route.stops[0].search_name == "Einöd (Saar)"
    assert route.stops[0].external_id == "123"
    assert route.stops[1].search_name == "Beeden"
    assert route.line_aliases == ["RE7"]


def test_loader_rejects_duplicate_ids() -> None:
    """Given two stops with the same id, when loading, then ValueError is raised."""
    data = {
        **DEFAULT_ROUTE_DATA,
        "stops": [
            {"id": "1", "name": "A", "order": 1},
            {"id": "1", "name": "B", "order": 2},
        ],
    }

    with pytest.raises(ValueError, match="Stop ids must be unique"):
        RouteConfigurationLoader.load_from_data(data)


def test_loader_rejects_duplicate_orders() -> None:
    """Given two stops with the same order, when loading, then ValueError is raised."""
    data = {
        **DEFAULT_ROUTE_DATA,
        "stops": [
            {"id": "1", "name": "A", "order": 1},
            {"id": "2", "name": "B", "order": 1},
        ],
    }

    with pytest.raises(ValueError, match="Stop orders must be unique"):
        RouteConfigurationLoader.load_from_data(data)


def test_loader_rejects_missing_order() -> None:
    """Given a stop without order, when loading, then ValueError is raised."""
    with pytest.raises(ValueError, match="positive integer 'order'"):
        RouteConfigurationLoader.load_stop_from_data({"id": "1", "name": "A"})


def test_loader_rejects_empty_route() -> None:
    """Given no stops, when loading, then ValueError is raised."""
    with pytest.raises(ValueError, match="at least one stop"):
        RouteConfigurationLoader.load_from_data({"name": "R7", "stops": []})
