"""Section domain model."""

from dataclasses import dataclass

from .station import Station


@dataclass(frozen=True)
class Section:
    """A direct connection between two adjacent stations on one line."""

    up_station: Station
    down_station: Station
    distance: int
