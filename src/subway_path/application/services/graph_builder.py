"""Graph builder service."""

import logging
from collections.abc import Callable, Iterable

from subway_path.domain.models.line import Line
from subway_path.domain.models.section import Section
from subway_path.domain.ports.weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Assembles the sections of every supplied line into one weighted multigraph."""

    def __init__(self, graph_factory: Callable[[], WeightedGraph]) -> None:
        """Initialize with a factory producing empty graphs."""
        self._graph_factory = graph_factory

    def build(self, lines: Iterable[Line]) -> WeightedGraph:
        """Build a fresh graph with one edge per section, weighted by its distance.

        Overlapping or parallel sections are all kept; distances are not
        validated.
        """
        graph = self._graph_factory()
        section_count = 0
        for line in lines:
            for section in line.sections:
                self._add_section(graph, section)
                section_count += 1

        logger.debug(
            f"Built graph with {len(graph.vertices())} station(s) and {section_count} section(s)"
        )
        return graph

    @staticmethod
    def _add_section(graph: WeightedGraph, section: Section) -> None:
        graph.add_vertex(section.up_station)
        graph.add_vertex(section.down_station)
        graph.add_edge(section.up_station, section.down_station, section.distance)
