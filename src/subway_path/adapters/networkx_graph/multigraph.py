"""NetworkX-backed weighted multigraph."""

from collections.abc import Iterator

import networkx as nx

from subway_path.domain.models.station import Station
from subway_path.domain.ports.weighted_graph import WeightedGraph

WEIGHT = "weight"


class NetworkxMultigraph(WeightedGraph):
    """Undirected multigraph over stations stored in a ``networkx.MultiGraph``."""

    def __init__(self) -> None:
        self._graph: nx.MultiGraph = nx.MultiGraph()

    @property
    def nx_graph(self) -> nx.MultiGraph:
        """The underlying NetworkX graph."""
        return self._graph

    def add_vertex(self, station: Station) -> None:
        self._graph.add_node(station)

    def add_edge(self, up_station: Station, down_station: Station, weight: float) -> None:
        self._graph.add_edge(up_station, down_station, **{WEIGHT: weight})

    def has_vertex(self, station: Station) -> bool:
        return self._graph.has_node(station)

    def vertices(self) -> list[Station]:
        return list(self._graph.nodes)

    def edges(self) -> Iterator[tuple[Station, Station, float]]:
        for up_station, down_station, weight in self._graph.edges(data=WEIGHT):
            yield up_station, down_station, weight
