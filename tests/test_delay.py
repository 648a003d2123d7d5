"""Tests for delay arithmetic and classification."""

from datetime import UTC, datetime, timedelta

import pytest

from r7_delays.domain.delay import (
    DELAY_STATUSES,
    classify_delay,
    compute_delay_minutes,
    round_half_up,
)

SCHEDULED = datetime(2024, 5, 14, 10, 30, tzinfo=UTC)


@pytest.mark.parametrize(
    ("delay", "expected"),
    [
        (-3, "on-time"),
        (0, "on-time"),
        (1, "slight-delay"),
        (5, "slight-delay"),
        (6, "delayed"),
        (10, "delayed"),
        (11, "heavily-delayed"),
        (45, "heavily-delayed"),
    ],
)
def test_classify_delay_boundaries(delay: int, expected: str) -> None:
    """Given a delay, when classifying, then the boundary rules apply."""
    assert classify_delay(delay) == expected


def test_classify_delay_is_monotonic() -> None:
    """Given increasing delays, when classifying, then severity never decreases."""
    ranks = [DELAY_STATUSES.index(classify_delay(m)) for m in range(0, 30)]

    assert ranks == sorted(ranks)


def test_round_half_up_rounds_halves_upwards() -> None:
    """Given values ending in .5, when rounding, then they round towards +infinity."""
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4) == 2
    assert round_half_up(-0.5) == 0


def test_explicit_delay_seconds_win() -> None:
    """Given delay seconds and times, when computing, then the seconds are used."""
    actual = SCHEDULED + timedelta(minutes=10)

    assert compute_delay_minutes(180, SCHEDULED, actual) == 3


def test_delay_seconds_round_to_nearest_minute() -> None:
    """Given 90 seconds, when computing, then rounds half-up to 2 minutes."""
    assert compute_delay_minutes(90, None, None) == 2
    assert compute_delay_minutes(80, None, None) == 1


def test_zero_delay_seconds_falls_back_to_time_difference() -> None:
    """Given delay 0 and differing times, when computing, then the time difference is used."""
    actual = SCHEDULED + timedelta(minutes=7)

    assert compute_delay_minutes(0, SCHEDULED, actual) == 7


def test_missing_times_give_zero() -> None:
    """Given no delay and a missing actual time, when computing, then 0."""
    assert compute_delay_minutes(None, SCHEDULED, None) == 0


def test_early_departures_are_floored_at_zero() -> None:
    """Given a negative delay, when computing, then the result is 0."""
    assert compute_delay_minutes(-120, None, None) == 0
    assert compute_delay_minutes(None, SCHEDULED, SCHEDULED - timedelta(minutes=2)) == 0
