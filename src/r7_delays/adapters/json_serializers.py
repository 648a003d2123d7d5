"""camelCase JSON representations of domain objects for the HTTP API and CLI."""

from datetime import datetime
from typing import Any

from r7_delays.domain.models import (
    DepartureRecord,
    GeoLocation,
    RouteSummary,
    StationMatch,
    Stop,
    StopDelaySnapshot,
)


def format_timestamp(value: datetime | None) -> str | None:
    """ISO 8601 timestamp, or None."""
    return value.isoformat() if value is not None else None


def location_to_dict(location: GeoLocation | None) -> dict[str, float] | None:
    """Serialize a coordinate."""
    if location is None:
        return None
    return {"latitude": location.latitude, "longitude": location.longitude}


def departure_to_dict(departure: DepartureRecord) -> dict[str, Any]:
    """Serialize one upcoming departure."""
    return {
        "scheduledDeparture": format_timestamp(departure.scheduled_time),
        "expectedDeparture": format_timestamp(departure.expected_time),
        "delayMinutes": departure.delay_minutes,
        "status": departure.status,
        "cancelled": departure.cancelled,
        "platform": departure.platform,
        "direction": departure.direction,
        "lineName": departure.line_name,
        "remarks": list(departure.remarks),
    }


def snapshot_to_dict(snapshot: StopDelaySnapshot) -> dict[str, Any]:
    """Serialize a stop snapshot; failed snapshots only carry identity and the error."""
    if snapshot.error is not None:
        return {
            "stopId": snapshot.stop_id,
            "stopName": snapshot.stop_name,
            "stopOrder": snapshot.stop_order,
            "error": snapshot.error,
            "upcomingDepartures": [],
            "lastUpdated": format_timestamp(snapshot.last_updated),
            "isSimulated": snapshot.is_simulated,
        }

    return {
        "stopId": snapshot.stop_id,
        "stopName": snapshot.stop_name,
        "stopOrder": snapshot.stop_order,
        "externalId": snapshot.external_id,
        "externalName": snapshot.external_name,
        "location": location_to_dict(snapshot.location),
        "scheduledDeparture": format_timestamp(snapshot.scheduled_departure),
        "expectedArrival": format_timestamp(snapshot.expected_arrival),
        "delayMinutes": snapshot.delay_minutes,
        "status": snapshot.status,
        "cancelled": snapshot.cancelled,
        "platform": snapshot.platform,
        "direction": snapshot.direction,
        "lineName": snapshot.line_name,
        "remarks": list(snapshot.remarks),
        "upcomingDepartures": [departure_to_dict(d) for d in snapshot.upcoming_departures],
        "lastUpdated": format_timestamp(snapshot.last_updated),
        "isSimulated": snapshot.is_simulated,
    }


def summary_to_dict(summary: RouteSummary) -> dict[str, int]:
    """Serialize the full route summary."""
    return {
        "totalStops": summary.total_stops,
        "stopsWithData": summary.stops_with_data,
        "averageDelayMinutes": summary.average_delay_minutes,
        "maxDelayMinutes": summary.max_delay_minutes,
        "onTimePercentage": summary.on_time_percentage,
        "stopsOnTime": summary.stops_on_time,
        "stopsDelayed": summary.stops_delayed,
        "cancelledServices": summary.cancelled_services,
    }


def stop_to_dict(stop: Stop) -> dict[str, Any]:
    """Serialize a static stop."""
    return {"id": stop.id, "name": stop.name, "order": stop.order}


def station_to_dict(station: StationMatch) -> dict[str, Any]:
    """Serialize a station search result."""
    return {
        "id": station.external_id,
        "name": station.display_name,
        "type": station.kind,
        "location": location_to_dict(station.location),
    }
