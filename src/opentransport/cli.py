"""Command line tool for querying the transport API."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime

from opentransport.adapters.config import CliSettings
from opentransport.adapters.http.log_sinks import LOG_DATE_FORMAT, LOG_FORMAT
from opentransport.adapters.services import ConnectionOptions, StationboardOptions
from opentransport.client import Client
from opentransport.domain.errors import OpenTransportError
from opentransport.domain.models import (
    ConnectionResult,
    Location,
    LocationType,
    RequestContext,
    StationboardJourney,
    Transportation,
)

logger = logging.getLogger(__name__)


def build_client(settings: CliSettings) -> Client:
    """Create a client from CLI settings."""
    client = Client(
        config={
            "api_base_url": settings.api_url,
            "user_agent": settings.user_agent,
            "max_retry_attempts": settings.max_retry,
            "retry_pause_seconds": settings.retry_pause,
        }
    )
    if settings.log_requests:
        client.enable_logging()
    return client


def _format_time(value: datetime | None) -> str:
    return value.strftime("%H:%M") if value else "--:--"


def format_location(location: Location) -> str:
    """One output line per location."""
    kind = "Station" if location.is_station else "Address"
    line = f"{kind}: {location.name or 'Unknown'}"
    if location.distance is not None:
        line += f" ({location.distance} m)"
    return line


def format_connection(result: ConnectionResult) -> list[str]:
    """One output line per connection, describing its first section."""
    lines = []
    for connection in result.connections:
        if not connection.sections:
            continue
        section = connection.sections[0]
        departure = section.departure
        if section.journey is not None:
            vehicle = f"{section.journey.category or ''} {section.journey.number or ''}".strip()
        else:
            vehicle = "Walk"
        lines.append(
            f"{vehicle} at {_format_time(departure.departure)} "
            f"on platform {departure.platform or '-'} "
            f"(duration {connection.duration or 'unknown'}, "
            f"{connection.transfers or 0} transfers)"
        )
    return lines


def format_journey(journey: StationboardJourney, arrival: bool = False) -> str:
    """One output line per stationboard entry."""
    when = journey.stop.arrival if arrival else journey.stop.departure
    label = "Arrival" if arrival else "Departure"
    direction = "from" if arrival else "to"
    return (
        f"{label} at {_format_time(when)} ({journey.category or ''}){journey.number or ''} "
        f"{direction} {journey.to or 'Unknown'}"
    )


def _parse_when(value: str | None) -> datetime:
    if not value:
        return datetime.now()
    return datetime.fromisoformat(value)


def _context(settings: CliSettings) -> RequestContext:
    if settings.timeout_seconds:
        return RequestContext.with_timeout(settings.timeout_seconds)
    return RequestContext.background()


def _dump(payload: object) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


async def run_locations(
    client: Client, args: argparse.Namespace, context: RequestContext
) -> int:
    if args.coordinates:
        latitude, longitude = args.coordinates
        locations = await client.location.search_with_coordinates(latitude, longitude, context)
    else:
        if not args.query:
            print("Provide a query or --coordinates", file=sys.stderr)
            return 1
        locations = await client.location.search_with_type(
            args.query, LocationType(args.type), context
        )

    if args.json:
        _dump([location.model_dump(mode="json") for location in locations])
        return 0

    if not locations:
        print("No locations found", file=sys.stderr)
        return 1
    for location in locations:
        print(format_location(location))
    return 0


async def run_connections(
    client: Client, args: argparse.Namespace, context: RequestContext
) -> int:
    options = ConnectionOptions(
        is_arrival=args.arrival,
        transportations=tuple(Transportation(t) for t in args.transportation),
        via=tuple(args.via),
        direct=args.direct,
        limit=args.limit,
    )
    result = await client.connection.search_with_options(
        args.origin, args.destination, _parse_when(args.when), options, context
    )

    if args.json:
        _dump(result.model_dump(mode="json", by_alias=True))
        return 0

    lines = format_connection(result)
    if not lines:
        print(f"No connections found from {args.origin} to {args.destination}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


async def run_stationboard(
    client: Client, args: argparse.Namespace, context: RequestContext
) -> int:
    options = StationboardOptions(
        transportations=tuple(Transportation(t) for t in args.transportation),
        when=_parse_when(args.when),
        arrival=args.arrival,
        limit=args.limit,
    )
    result = await client.stationboard.search_with_options(args.station, options, context)

    if args.json:
        _dump(result.model_dump(mode="json", by_alias=True))
        return 0

    if result.station is not None:
        print(f"\n{result.station.name or args.station}:\n")
    for journey in result.journeys:
        print(f"  {format_journey(journey, arrival=args.arrival)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one subcommand per query family."""
    transport_choices = [t.value for t in Transportation]

    parser = argparse.ArgumentParser(
        description="Swiss public transport timetable queries (transport.opendata.ch)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for locations
  opentransport locations "Zürich Bürkliplatz"

  # Locations around a coordinate
  opentransport locations --coordinates 47.3769 8.5417

  # Connections via another station
  opentransport connections "Zürich HB" Bern --via Aarau --transportation train

  # Next departures
  opentransport stationboard "Zürich HB" --limit 5

Environment:
  OPENTRANSPORT_API_URL, OPENTRANSPORT_USER_AGENT, OPENTRANSPORT_MAX_RETRY,
  OPENTRANSPORT_RETRY_PAUSE, OPENTRANSPORT_LOG_REQUESTS, OPENTRANSPORT_TIMEOUT_SECONDS
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    locations_parser = subparsers.add_parser("locations", help="Search for locations")
    locations_parser.add_argument("query", nargs="?", help="Location name to search for")
    locations_parser.add_argument(
        "--type",
        choices=[t.value for t in LocationType],
        default=LocationType.ALL.value,
        help="Location type filter",
    )
    locations_parser.add_argument(
        "--coordinates",
        nargs=2,
        type=float,
        metavar=("LAT", "LONG"),
        help="Search around a coordinate instead of a name",
    )
    locations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    connections_parser = subparsers.add_parser("connections", help="Search for connections")
    connections_parser.add_argument("origin", help="Departure location")
    connections_parser.add_argument("destination", help="Arrival location")
    connections_parser.add_argument("--when", help="ISO date and time (default: now)")
    connections_parser.add_argument(
        "--via", action="append", default=[], help="Via location (repeatable)"
    )
    connections_parser.add_argument(
        "--transportation",
        action="append",
        default=[],
        choices=transport_choices,
        help="Means of transport filter (repeatable)",
    )
    connections_parser.add_argument(
        "--arrival", action="store_true", help="Interpret --when as arrival time"
    )
    connections_parser.add_argument(
        "--direct", action="store_true", help="Direct connections only"
    )
    connections_parser.add_argument("--limit", type=int, default=0, help="Connections (1-16)")
    connections_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stationboard_parser = subparsers.add_parser("stationboard", help="Show a stationboard")
    stationboard_parser.add_argument("station", help="Station name or id")
    stationboard_parser.add_argument("--when", help="ISO date and time (default: now)")
    stationboard_parser.add_argument(
        "--transportation",
        action="append",
        default=[],
        choices=transport_choices,
        help="Means of transport filter (repeatable)",
    )
    stationboard_parser.add_argument(
        "--arrival", action="store_true", help="Show arrivals instead of departures"
    )
    stationboard_parser.add_argument("--limit", type=int, default=15, help="Number of journeys")
    stationboard_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


_COMMANDS = {
    "locations": run_locations,
    "connections": run_connections,
    "stationboard": run_stationboard,
}


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = CliSettings()
        async with build_client(settings) as client:
            return await _COMMANDS[args.command](client, args, _context(settings))
    except (OpenTransportError, ValueError) as e:
        logger.error(f"{args.command} query failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
