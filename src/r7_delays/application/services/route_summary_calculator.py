"""Aggregate statistics over stop snapshots."""

from r7_delays.domain.delay import round_half_up
from r7_delays.domain.models.route_summary import RouteSummary
from r7_delays.domain.models.stop_delay_snapshot import StopDelaySnapshot


def effective_delay(snapshot: StopDelaySnapshot) -> int:
    """Delay a snapshot contributes to totals; cancelled services contribute 0."""
    return 0 if snapshot.cancelled else snapshot.delay_minutes


class RouteSummaryCalculator:
    """Computes route-level delay statistics.

    Delay figures use only snapshots with data (no error, known departure);
    cancellations are counted over every snapshot.
    """

    @staticmethod
    def summarize(snapshots: list[StopDelaySnapshot]) -> RouteSummary:
        """Summarize a list of snapshots."""
        valid = [s for s in snapshots if s.has_data]
        delays = [effective_delay(s) for s in valid]
        on_time = sum(1 for d in delays if d == 0)

        if valid:
            average = round_half_up(sum(delays) / len(valid))
            maximum = max(delays)
            on_time_percentage = round_half_up(on_time / len(valid) * 100)
        else:
            average = maximum = on_time_percentage = 0

        return RouteSummary(
            total_stops=len(snapshots),
            stops_with_data=len(valid),
            stops_without_data=len(snapshots) - len(valid),
            average_delay_minutes=average,
            max_delay_minutes=maximum,
            on_time_percentage=on_time_percentage,
            stops_on_time=on_time,
            stops_delayed=len(valid) - on_time,
            cancelled_services=sum(1 for s in snapshots if s.cancelled),
        )
