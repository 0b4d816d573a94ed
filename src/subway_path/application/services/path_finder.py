"""Path finder service."""

import logging
from collections.abc import Sequence

from subway_path.application.services.fare_calculator import FareCalculator
from subway_path.application.services.graph_builder import GraphBuilder
from subway_path.domain.exceptions import InvalidPathRequestError
from subway_path.domain.models.fare import Fare
from subway_path.domain.models.line import Line
from subway_path.domain.models.path import Path
from subway_path.domain.models.path_result import PathResult
from subway_path.domain.models.station import Station
from subway_path.domain.ports.shortest_path_strategy import ShortestPathStrategy

logger = logging.getLogger(__name__)


class PathFinder:
    """Finds the shortest path between two stations and prices it."""

    def __init__(
        self,
        graph_builder: GraphBuilder,
        strategy: ShortestPathStrategy,
        fare_calculator: FareCalculator | None = None,
    ) -> None:
        """Initialize with a graph builder, a search strategy and a fare calculator."""
        self._graph_builder = graph_builder
        self._strategy = strategy
        self._fare_calculator = fare_calculator or FareCalculator()

    def find_path(
        self, source: Station, target: Station, lines: Sequence[Line], age: int
    ) -> PathResult:
        """Find the shortest path and the fare a rider of the given age pays for it.

        The surcharge applied is the highest surcharge of all supplied lines,
        whether or not the path rides on that line.

        Raises:
            InvalidPathRequestError: If source and target are the same station.
            NoPathError: If no route connects the stations.
        """
        path = self.shortest_path(source, target, lines)
        fare = self.fare_for(lines, path.distance, age)

        logger.info(
            f"Priced {source.id} -> {target.id}: {len(path.stations)} station(s), "
            f"distance {path.distance}, fare {fare.amount} (age {age})"
        )
        return PathResult(stations=path.stations, distance=path.distance, fare=fare)

    def shortest_path(self, source: Station, target: Station, lines: Sequence[Line]) -> Path:
        """Find the shortest path without pricing it.

        Raises:
            InvalidPathRequestError: If source and target are the same station.
            NoPathError: If no route connects the stations.
        """
        if source == target:
            logger.warning(f"Rejected path request from {source.id} to itself")
            raise InvalidPathRequestError(f"Source and target are both station {source.id}")

        graph = self._graph_builder.build(lines)
        path = self._strategy.shortest_path(graph, source, target)

        logger.debug(
            f"Shortest path {source.id} -> {target.id}: "
            f"{' -> '.join(s.id for s in path.stations)} (weight {path.weight})"
        )
        return path

    def fare_for(self, lines: Sequence[Line], distance: int, age: int) -> Fare:
        """Price a distance for a rider, applying the highest surcharge of the lines."""
        return self._fare_calculator.fare_for(age, distance, self.max_surcharge(lines))

    def max_surcharge(self, lines: Sequence[Line]) -> int:
        """Return the highest surcharge among the lines, or the minimum fare if none."""
        return max(
            (line.surcharge for line in lines),
            default=self._fare_calculator.policy.minimum_fare,
        )
