"""Command-line access to R7 delay information."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from r7_delays.adapters.config import AppConfig, RouteConfigurationLoader
from r7_delays.adapters.json_serializers import (
    snapshot_to_dict,
    station_to_dict,
    stop_to_dict,
    summary_to_dict,
)
from r7_delays.bootstrap import build_delay_resolver, open_upstream_session
from r7_delays.domain.models import StopDelaySnapshot
from r7_delays.domain.ports import DelayService

logger = logging.getLogger(__name__)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def format_snapshot_line(snapshot: StopDelaySnapshot) -> str:
    """One-line human-readable rendering of a snapshot."""
    prefix = f"{snapshot.stop_order:>2}. {snapshot.stop_name}"
    if snapshot.error is not None:
        return f"{prefix}: error - {snapshot.error}"
    if snapshot.scheduled_departure is None:
        return f"{prefix}: no departures"

    scheduled = snapshot.scheduled_departure.strftime("%H:%M")
    if snapshot.cancelled:
        detail = "cancelled"
    elif snapshot.delay_minutes > 0:
        detail = f"+{snapshot.delay_minutes} min ({snapshot.status})"
    else:
        detail = snapshot.status
    direction = f" -> {snapshot.direction}" if snapshot.direction else ""
    simulated = " [simulated]" if snapshot.is_simulated else ""
    return f"{prefix}: {scheduled}{direction} {detail}{simulated}"


async def show_delays(service: DelayService, as_json: bool) -> int:
    """Print delay snapshots for all stops."""
    snapshots = await service.resolve_all()
    if as_json:
        _print_json([snapshot_to_dict(s) for s in snapshots])
        return 0

    route = service.route
    print(f"\n{route.name}: {route.description}")
    print("=" * 70)
    for snapshot in snapshots:
        print(format_snapshot_line(snapshot))
    return 0


async def show_stop(service: DelayService, stop_id: str, as_json: bool) -> int:
    """Print the snapshot for one stop."""
    snapshot = await service.resolve_stop(stop_id)
    if snapshot is None:
        print(f"Stop {stop_id} not found.", file=sys.stderr)
        return 1

    if as_json:
        _print_json(snapshot_to_dict(snapshot))
        return 0

    print(format_snapshot_line(snapshot))
    for departure in snapshot.upcoming_departures:
        when = departure.scheduled_time.strftime("%H:%M") if departure.scheduled_time else "--:--"
        print(f"    {when} {departure.line_name} {departure.direction or ''} +{departure.delay_minutes}")
    return 0


async def show_summary(service: DelayService, as_json: bool) -> int:
    """Print aggregate statistics for the route."""
    summary = service.summarize(await service.resolve_all())
    if as_json:
        _print_json(summary_to_dict(summary))
        return 0

    print(f"Stops with data:   {summary.stops_with_data}/{summary.total_stops}")
    print(f"Average delay:     {summary.average_delay_minutes} min")
    print(f"Maximum delay:     {summary.max_delay_minutes} min")
    print(f"On time:           {summary.stops_on_time} ({summary.on_time_percentage}%)")
    print(f"Delayed:           {summary.stops_delayed}")
    print(f"Cancelled:         {summary.cancelled_services}")
    return 0


def show_stops(service: DelayService, as_json: bool) -> int:
    """Print the static stop list."""
    stops = service.list_stops()
    if as_json:
        _print_json([stop_to_dict(s) for s in stops])
        return 0

    for stop in stops:
        print(f"{stop.order:>2}. {stop.name} (id {stop.id})")
    return 0


async def search(service: DelayService, query: str, as_json: bool) -> int:
    """Print stations matching a query."""
    results = await service.search_stations(query)
    if as_json:
        _print_json([station_to_dict(s) for s in results])
        return 0

    if not results:
        print(f"No stations found for '{query}'", file=sys.stderr)
        return 1
    print(f"\nFound {len(results)} station(s):\n")
    for station in results:
        print(f"  {station.display_name}")
        print(f"    ID: {station.external_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="r7-delays",
        description="Delay information for the R7 bus line",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    delays_parser = subparsers.add_parser("delays", help="Show delays for all stops")
    delays_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stop_parser = subparsers.add_parser("stop", help="Show delays for a single stop")
    stop_parser.add_argument("stop_id", help="Stop ID (e.g., 1)")
    stop_parser.add_argument("--json", action="store_true", help="Output as JSON")

    summary_parser = subparsers.add_parser("summary", help="Show route statistics")
    summary_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stops_parser = subparsers.add_parser("stops", help="List the route's stops")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def run_command(args: argparse.Namespace, service: DelayService) -> int:
    """Dispatch a parsed command to the service, returning the exit code."""
    if args.command == "delays":
        return await show_delays(service, args.json)
    if args.command == "stop":
        return await show_stop(service, args.stop_id, args.json)
    if args.command == "summary":
        return await show_summary(service, args.json)
    if args.command == "stops":
        return show_stops(service, args.json)
    if args.command == "search":
        return await search(service, args.query, args.json)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Parse arguments, wire the service and run the command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = AppConfig()
        route = RouteConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        async with open_upstream_session(config) as session:
            service = build_delay_resolver(config, route, session)
            return await run_command(args, service)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
