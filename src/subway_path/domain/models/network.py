"""Network domain model."""

from dataclasses import dataclass, field

from .line import Line
from .station import Station


@dataclass(frozen=True)
class Network:
    """Snapshot of the stations and lines a query runs against."""

    stations: dict[str, Station] = field(default_factory=dict)
    lines: tuple[Line, ...] = ()

    def station(self, station_id: str) -> Station:
        """Look up a station by identifier.

        Raises:
            ValueError: If no station with that identifier exists.
        """
        try:
            return self.stations[station_id]
        except KeyError:
            raise ValueError(f"Unknown station: {station_id}") from None
