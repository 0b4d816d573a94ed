"""Domain layer - core business logic and models."""

from subway_path.domain.exceptions import InvalidPathRequestError, NoPathError, PathFinderError
from subway_path.domain.models import (
    Fare,
    FarePolicy,
    Line,
    Network,
    Path,
    PathResult,
    Section,
    Station,
)
from subway_path.domain.ports import ShortestPathStrategy, WeightedGraph

__all__ = [
    "Fare",
    "FarePolicy",
    "InvalidPathRequestError",
    "Line",
    "Network",
    "NoPathError",
    "Path",
    "PathFinderError",
    "PathResult",
    "Section",
    "ShortestPathStrategy",
    "Station",
    "WeightedGraph",
]
