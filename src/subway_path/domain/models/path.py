"""Path domain model."""

from dataclasses import dataclass

from .station import Station


@dataclass(frozen=True)
class Path:
    """Result of one shortest-path search.

    ``weight`` is the raw sum of traversed edge weights as returned by the
    search; ``distance`` is that sum truncated toward zero.
    """

    stations: tuple[Station, ...]
    weight: float

    @property
    def distance(self) -> int:
        return int(self.weight)

    @property
    def source(self) -> Station:
        return self.stations[0]

    @property
    def target(self) -> Station:
        return self.stations[-1]
