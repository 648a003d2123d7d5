"""Delay arithmetic and classification.

Pure functions shared by the upstream parser and the synthetic generator.
"""

import math
from datetime import datetime

STATUS_ON_TIME = "on-time"
STATUS_SLIGHT_DELAY = "slight-delay"
STATUS_DELAYED = "delayed"
STATUS_HEAVILY_DELAYED = "heavily-delayed"
STATUS_CANCELLED = "cancelled"
STATUS_UNKNOWN = "unknown"

# Ordered by severity, used for monotonicity checks and sorting
DELAY_STATUSES = (
    STATUS_ON_TIME,
    STATUS_SLIGHT_DELAY,
    STATUS_DELAYED,
    STATUS_HEAVILY_DELAYED,
)

SLIGHT_DELAY_MAX_MINUTES = 5
DELAYED_MAX_MINUTES = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def classify_delay(delay_minutes: int) -> str:
    """Classify a delay in whole minutes.

    <= 0 is on-time, 1-5 slight-delay, 6-10 delayed, anything above heavily-delayed.
    """
    if delay_minutes <= 0:
        return STATUS_ON_TIME
    if delay_minutes <= SLIGHT_DELAY_MAX_MINUTES:
        return STATUS_SLIGHT_DELAY
    if delay_minutes <= DELAYED_MAX_MINUTES:
        return STATUS_DELAYED
    return STATUS_HEAVILY_DELAYED


def compute_delay_minutes(
    delay_seconds: float | None,
    scheduled_time: datetime | None,
    actual_time: datetime | None,
) -> int:
    """Compute a non-negative delay in minutes.

    An explicit, non-zero delay in seconds wins. Otherwise the difference
    between actual and scheduled time is used when both are known.
    """
    minutes = 0
    if delay_seconds:
        minutes = round_half_up(delay_seconds / 60)
    elif scheduled_time is not None and actual_time is not None:
        minutes = round_half_up((actual_time - scheduled_time).total_seconds() / 60)
    return max(0, minutes)
