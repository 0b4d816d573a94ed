"""Shortest path strategy port."""

from typing import Protocol

from subway_path.domain.models.path import Path
from subway_path.domain.models.station import Station
from subway_path.domain.ports.weighted_graph import WeightedGraph


class ShortestPathStrategy(Protocol):
    """Port for single-source shortest path search."""

    def shortest_path(self, graph: WeightedGraph, source: Station, target: Station) -> Path:
        """Find the minimum-weight path from source to target.

        Args:
            graph: Graph to search.
            source: First station of the path.
            target: Last station of the path.

        Returns:
            The stations in traversal order and the total weight.

        Raises:
            NoPathError: If no route connects the stations, including when either
                station is not part of the graph.
        """
        ...
