"""Tests for transport.rest departure parsing."""

from datetime import UTC, datetime

from r7_delays.adapters.transport_rest.departure_parser import DepartureParser


def _departure(**overrides: object) -> dict[str, object]:
    dep: dict[str, object] = {
        "tripId": "1|123|0|80|14052024",
        "plannedWhen": "2024-05-14T10:30:00+02:00",
        "when": "2024-05-14T10:37:00+02:00",
        "delay": 420,
        "platform": "2",
        "plannedPlatform": "1",
        "direction": "Homburg (Saar) Hbf",
        "line": {"name": "RE 7", "product": "regional"},
        "remarks": [{"type": "hint", "text": "Bicycles allowed"}],
    }
    dep.update(overrides)
    return dep


def test_extract_departures_from_v6_object() -> None:
    """Given a v6 response object, when extracting, then the departures list is returned."""
    data = {"departures": [_departure()], "realtimeDataUpdatedAt": 1715675400}

    assert DepartureParser.extract_departures(data) == [_departure()]


def test_extract_departures_from_plain_list() -> None:
    """Given a bare list, when extracting, then it is returned as is."""
    assert DepartureParser.extract_departures([_departure()]) == [_departure()]


def test_extract_departures_rejects_other_shapes() -> None:
    """Given a payload without a departures list, when extracting, then None."""
    assert DepartureParser.extract_departures({"error": "nope"}) is None
    assert DepartureParser.extract_departures("garbage") is None


def test_parse_departure_maps_all_fields() -> None:
    """Given a complete departure, when parsing, then all fields are mapped."""
    record = DepartureParser.parse_departure(_departure())

    assert record is not None
    assert record.scheduled_time == datetime(2024, 5, 14, 8, 30, tzinfo=UTC)
    assert record.actual_time == datetime(2024, 5, 14, 8, 37, tzinfo=UTC)
    assert record.delay_minutes == 7
    assert record.status == "delayed"
    assert record.cancelled is False
    assert record.platform == "2"
    assert record.direction == "Homburg (Saar) Hbf"
    assert record.line_name == "RE 7"
    assert record.remarks == ["Bicycles allowed"]


def test_parse_departure_uses_time_difference_without_delay() -> None:
    """Given delay null, when parsing, then delay is derived from the times."""
    record = DepartureParser.parse_departure(_departure(delay=None))

    assert record is not None
    assert record.delay_minutes == 7


def test_parse_departure_cancelled_keeps_classification() -> None:
    """Given a cancelled departure without a real-time time, when parsing, then on-time and cancelled."""
    record = DepartureParser.parse_departure(_departure(cancelled=True, when=None, delay=None))

    assert record is not None
    assert record.cancelled is True
    assert record.delay_minutes == 0
    assert record.status == "on-time"
    assert record.expected_time == record.scheduled_time


def test_parse_departure_falls_back_to_planned_platform_and_product() -> None:
    """Given no real-time platform or line name, when parsing, then fallbacks are used."""
    record = DepartureParser.parse_departure(
        _departure(platform=None, line={"product": "bus"})
    )

    assert record is not None
    assert record.platform == "1"
    assert record.line_name == "bus"


def test_parse_departures_drops_malformed_entries() -> None:
    """Given a mix of valid and malformed entries, when parsing, then only valid ones remain."""
    records = DepartureParser.parse_departures([_departure(), "not a departure", None])

    assert len(records) == 1


def test_parse_departure_ignores_unparseable_times() -> None:
    """Given an invalid timestamp, when parsing, then the time is None and delay comes from seconds."""
    record = DepartureParser.parse_departure(_departure(plannedWhen="yesterday", delay=60))

    assert record is not None
    assert record.scheduled_time is None
    assert record.delay_minutes == 1
