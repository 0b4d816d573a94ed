"""Main entry point for the subway path finder."""

import argparse
import logging
import sys

from pydantic import TypeAdapter, ValidationError

from subway_path.adapters.cli import ErrorResponse, PathResponse, StationResponse
from subway_path.adapters.config import AppConfig, FarePolicyLoader, NetworkLoader
from subway_path.adapters.networkx_graph import DijkstraShortestPathStrategy, NetworkxMultigraph
from subway_path.application.services import FareCalculator, GraphBuilder, PathFinder
from subway_path.domain.exceptions import PathFinderError
from subway_path.domain.models import Network

logger = logging.getLogger(__name__)

STATION_NOT_FOUND = "STATION_NOT_FOUND"


def create_path_finder(config: AppConfig | None = None) -> PathFinder:
    """Wire a path finder with the NetworkX backend and the configured fare policy."""
    config = config or AppConfig()
    return PathFinder(
        graph_builder=GraphBuilder(NetworkxMultigraph),
        strategy=DijkstraShortestPathStrategy(),
        fare_calculator=FareCalculator(FarePolicyLoader.load(config)),
    )


def configure_logging(level: str) -> None:
    """Configure root logging for the command line."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _age(value: str) -> int:
    age = int(value)
    if age < 0:
        raise argparse.ArgumentTypeError(f"age must be non-negative, got {age}")
    return age


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subway-path",
        description="Shortest path and fare between two subway stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shortest path and adult fare
  subway-path path gangnam yangjae

  # Child fare as JSON, using a specific network file
  subway-path --network network.toml path gangnam yangjae --age 10 --json

  # List stations of the network
  subway-path stations
        """,
    )
    parser.add_argument("--network", help="Path to TOML network file (overrides NETWORK_FILE)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    path_parser = subparsers.add_parser("path", help="Find the shortest path and its fare")
    path_parser.add_argument("source", help="Source station id")
    path_parser.add_argument("target", help="Target station id")
    path_parser.add_argument("--age", type=_age, default=20, help="Rider age (default: 20)")
    path_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stations_parser = subparsers.add_parser("stations", help="List stations of the network")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _print_error(error: ErrorResponse) -> None:
    print(error.model_dump_json(), file=sys.stderr)


def _run_path(args: argparse.Namespace, network: Network, path_finder: PathFinder) -> int:
    try:
        source = network.station(args.source)
        target = network.station(args.target)
    except ValueError as e:
        _print_error(ErrorResponse(code=STATION_NOT_FOUND, reason=str(e)))
        return 1

    try:
        result = path_finder.find_path(source, target, network.lines, args.age)
    except PathFinderError as e:
        logger.debug(f"Path request rejected: {e.message}")
        _print_error(ErrorResponse.from_error(e))
        return 1

    response = PathResponse.of(result)
    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print(" -> ".join(station.name for station in response.stations))
        print(f"Distance: {response.distance} km")
        print(f"Fare: {response.fare}")
    return 0


def _run_stations(args: argparse.Namespace, network: Network) -> int:
    stations = [StationResponse.of(station) for station in network.stations.values()]
    if args.json:
        print(TypeAdapter(list[StationResponse]).dump_json(stations, indent=2).decode())
    else:
        for station in stations:
            print(f"  {station.name} (ID: {station.id})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig(network_file=args.network) if args.network else AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)

    try:
        network = NetworkLoader.load(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load network: {e}")
        return 1

    if args.command == "stations":
        return _run_stations(args, network)
    return _run_path(args, network, create_path_finder(config))


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
