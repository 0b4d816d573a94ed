"""Ports (interfaces) for the ports-and-adapters architecture."""

from subway_path.domain.ports.shortest_path_strategy import ShortestPathStrategy
from subway_path.domain.ports.weighted_graph import WeightedGraph

__all__ = [
    "ShortestPathStrategy",
    "WeightedGraph",
]
