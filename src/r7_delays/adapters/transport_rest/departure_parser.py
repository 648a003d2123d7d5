"""Parser for transport.rest departure boards."""

import logging
from datetime import datetime
from typing import Any

from r7_delays.domain.delay import classify_delay, compute_delay_minutes
from r7_delays.domain.models.departure_record import DepartureRecord

logger = logging.getLogger(__name__)


class DepartureParser:
    """Converts departure payloads into DepartureRecord objects."""

    @staticmethod
    def extract_departures(data: Any) -> list[Any] | None:
        """Extract the departures list; v6 wraps it in an object, older APIs do not."""
        if isinstance(data, dict):
            departures = data.get("departures")
            return departures if isinstance(departures, list) else None
        if isinstance(data, list):
            return data
        return None

    @staticmethod
    def parse_departures(departures: list[Any]) -> list[DepartureRecord]:
        """Parse departures, dropping entries that are not well-formed."""
        results = []
        for dep in departures:
            record = DepartureParser.parse_departure(dep)
            if record is not None:
                results.append(record)
        return results

    @staticmethod
    def parse_departure(dep: Any) -> DepartureRecord | None:
        """Parse a single departure, or None if it is malformed."""
        if not isinstance(dep, dict):
            return None

        try:
            scheduled_time = DepartureParser._parse_time(dep.get("plannedWhen"))
            actual_time = DepartureParser._parse_time(dep.get("when"))
            delay_seconds = dep.get("delay")
            if not isinstance(delay_seconds, int | float) or isinstance(delay_seconds, bool):
                delay_seconds = None

            delay_minutes = compute_delay_minutes(delay_seconds, scheduled_time, actual_time)

            return DepartureRecord(
                scheduled_time=scheduled_time,
                actual_time=actual_time,
                delay_minutes=delay_minutes,
                status=classify_delay(delay_minutes),
                cancelled=bool(dep.get("cancelled", False)),
                platform=DepartureParser._parse_platform(dep),
                direction=DepartureParser._optional_str(dep.get("direction")),
                line_name=DepartureParser._extract_line_name(dep.get("line")),
                remarks=DepartureParser._extract_remarks(dep.get("remarks")),
            )
        except Exception as e:
            logger.warning(f"Error parsing departure: {e}")
            return None

    @staticmethod
    def _parse_time(value: Any) -> datetime | None:
        """Parse an ISO 8601 timestamp."""
        if not isinstance(value, str) or not value:
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None

    @staticmethod
    def _parse_platform(dep: dict[str, Any]) -> str | None:
        """Real-time platform, falling back to the planned one."""
        return DepartureParser._optional_str(dep.get("platform") or dep.get("plannedPlatform"))

    @staticmethod
    def _extract_line_name(line: Any) -> str:
        """Line label, falling back to the product name."""
        if not isinstance(line, dict):
            return ""
        return str(line.get("name") or line.get("product") or "")

    @staticmethod
    def _extract_remarks(remarks: Any) -> list[str]:
        """Extract remark texts, in upstream order."""
        if not isinstance(remarks, list):
            return []

        messages = []
        for remark in remarks:
            if isinstance(remark, dict):
                text = remark.get("text")
                if text:
                    messages.append(str(text))
            elif isinstance(remark, str) and remark:
                messages.append(remark)
        return messages

    @staticmethod
    def _optional_str(value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)
