"""Domain models for subway path finding."""

from subway_path.domain.models.fare import Fare
from subway_path.domain.models.fare_policy import DEFAULT_FARE, MINIMUM_FARE, FarePolicy
from subway_path.domain.models.line import Line
from subway_path.domain.models.network import Network
from subway_path.domain.models.path import Path
from subway_path.domain.models.path_result import PathResult
from subway_path.domain.models.section import Section
from subway_path.domain.models.station import Station

__all__ = [
    "DEFAULT_FARE",
    "MINIMUM_FARE",
    "Fare",
    "FarePolicy",
    "Line",
    "Network",
    "Path",
    "PathResult",
    "Section",
    "Station",
]
