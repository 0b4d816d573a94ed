"""Weighted graph port."""

from collections.abc import Iterable
from typing import Protocol

from subway_path.domain.models.station import Station


class WeightedGraph(Protocol):
    """Port for an undirected, weighted multigraph over stations."""

    def add_vertex(self, station: Station) -> None:
        """Add a station; adding one that is already present is a no-op."""
        ...

    def add_edge(self, up_station: Station, down_station: Station, weight: float) -> None:
        """Add one edge between two stations, keeping any existing parallel edges."""
        ...

    def has_vertex(self, station: Station) -> bool:
        """Return whether the station is a vertex of the graph."""
        ...

    def vertices(self) -> list[Station]:
        """Return all vertices."""
        ...

    def edges(self) -> Iterable[tuple[Station, Station, float]]:
        """Yield every edge as (station, station, weight), parallel edges included."""
        ...
