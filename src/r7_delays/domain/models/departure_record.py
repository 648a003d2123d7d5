"""Departure record domain model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class DepartureRecord:
    """One upcoming departure at a stop, normalized from the upstream payload."""

    scheduled_time: datetime | None
    actual_time: datetime | None
    delay_minutes: int  # Never negative, early departures count as 0
    status: str
    cancelled: bool = False
    platform: str | None = None
    direction: str | None = None
    line_name: str = ""
    remarks: list[str] = field(default_factory=list)

    @property
    def expected_time(self) -> datetime | None:
        """Real-time departure if known, otherwise the scheduled one."""
        return self.actual_time or self.scheduled_time
