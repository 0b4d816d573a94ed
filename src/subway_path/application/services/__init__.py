"""Application services (use cases) for path finding and fares."""

from subway_path.application.services.fare_calculator import FareCalculator
from subway_path.application.services.graph_builder import GraphBuilder
from subway_path.application.services.path_finder import PathFinder

__all__ = ["FareCalculator", "GraphBuilder", "PathFinder"]
