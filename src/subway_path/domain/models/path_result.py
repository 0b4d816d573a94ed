"""Path result domain model."""

from dataclasses import dataclass

from .fare import Fare
from .station import Station


@dataclass(frozen=True)
class PathResult:
    """Shortest path between two stations together with its fare."""

    stations: tuple[Station, ...]
    distance: int
    fare: Fare

    @property
    def fare_amount(self) -> int:
        return self.fare.amount
