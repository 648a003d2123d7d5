"""Tests for domain models."""

from datetime import UTC, datetime, timedelta

import pytest

from r7_delays.domain.models import (
    DepartureRecord,
    RouteConfiguration,
    Stop,
    StopDelaySnapshot,
)


def test_stop_is_frozen() -> None:
    """Given a Stop, when trying to modify it, then raises an error."""
    stop = Stop(id="1", name="Einöd", search_name="Einöd", order=3)

    with pytest.raises(AttributeError):
        stop.name = "Beeden"  # type: ignore[misc]


def test_departure_expected_time_prefers_actual_time() -> None:
    """Given scheduled and actual times, when reading expected_time, then actual wins."""
    scheduled = datetime(2024, 5, 14, 10, 30, tzinfo=UTC)
    actual = scheduled + timedelta(minutes=4)
    departure = DepartureRecord(
        scheduled_time=scheduled, actual_time=actual, delay_minutes=4, status="slight-delay"
    )

    assert departure.expected_time == actual


def test_departure_expected_time_falls_back_to_scheduled() -> None:
    """Given no actual time, when reading expected_time, then scheduled is returned."""
    scheduled = datetime(2024, 5, 14, 10, 30, tzinfo=UTC)
    departure = DepartureRecord(
        scheduled_time=scheduled, actual_time=None, delay_minutes=0, status="on-time"
    )

    assert departure.expected_time == scheduled


def test_failed_snapshot_carries_identity_and_error() -> None:
    """Given a stop, when building a failed snapshot, then it has no data and keeps the error."""
    stop = Stop(id="4", name="Ingweiler", search_name="Ingweiler", order=4)
    now = datetime(2024, 5, 14, 10, 0, tzinfo=UTC)

    snapshot = StopDelaySnapshot.failed(stop, "boom", now)

    assert snapshot.stop_id == "4"
    assert snapshot.stop_order == 4
    assert snapshot.error == "boom"
    assert snapshot.status == "unknown"
    assert snapshot.delay_minutes == 0
    assert snapshot.has_data is False
    assert snapshot.is_simulated is False


def test_snapshot_without_departure_has_no_data() -> None:
    """Given a snapshot with no scheduled departure, when checking has_data, then False."""
    snapshot = StopDelaySnapshot(
        stop_id="2",
        stop_name="Zweibrücken Rosengarten",
        stop_order=2,
        last_updated=datetime(2024, 5, 14, tzinfo=UTC),
    )

    assert snapshot.has_data is False


def test_route_configuration_last_order_and_find_stop() -> None:
    """Given a route, when querying it, then last order and stop lookup work."""
    stops = [
        Stop(id="a", name="A", search_name="A", order=1),
        Stop(id="b", name="B", search_name="B", order=2),
    ]
    route = RouteConfiguration(name="X", description="", line_code="X1", stops=stops)

    assert route.last_order == 2
    assert route.find_stop("b") is stops[1]
    assert route.find_stop("zzz") is None
