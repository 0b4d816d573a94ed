"""NetworkX graph adapters."""

from subway_path.adapters.networkx_graph.dijkstra_strategy import DijkstraShortestPathStrategy
from subway_path.adapters.networkx_graph.multigraph import NetworkxMultigraph

__all__ = ["DijkstraShortestPathStrategy", "NetworkxMultigraph"]
