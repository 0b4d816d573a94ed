"""Dijkstra shortest path search using NetworkX."""

import logging

import networkx as nx

from subway_path.adapters.networkx_graph.multigraph import WEIGHT, NetworkxMultigraph
from subway_path.domain.exceptions import NoPathError
from subway_path.domain.models.path import Path
from subway_path.domain.models.station import Station
from subway_path.domain.ports.shortest_path_strategy import ShortestPathStrategy
from subway_path.domain.ports.weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


class DijkstraShortestPathStrategy(ShortestPathStrategy):
    """Shortest path by Dijkstra's algorithm over non-negative edge weights.

    Parallel edges between two stations resolve to the lightest one. Among
    several equally short routes, whichever NetworkX settles first is returned.
    """

    def shortest_path(self, graph: WeightedGraph, source: Station, target: Station) -> Path:
        for station in (source, target):
            if not graph.has_vertex(station):
                raise NoPathError(f"Station {station.id} is not served by any line")

        nx_graph = self._to_networkx(graph)

        try:
            weight, stations = nx.single_source_dijkstra(
                nx_graph, source, target=target, weight=WEIGHT
            )
        except nx.NetworkXNoPath as e:
            raise NoPathError(f"No path connects {source.id} and {target.id}") from e

        return Path(stations=tuple(stations), weight=weight)

    @staticmethod
    def _to_networkx(graph: WeightedGraph) -> nx.MultiGraph:
        if isinstance(graph, NetworkxMultigraph):
            return graph.nx_graph

        logger.debug(f"Copying {type(graph).__name__} into a NetworkX multigraph")
        nx_graph = nx.MultiGraph()
        nx_graph.add_nodes_from(graph.vertices())
        for up_station, down_station, weight in graph.edges():
            nx_graph.add_edge(up_station, down_station, **{WEIGHT: weight})
        return nx_graph
