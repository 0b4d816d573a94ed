"""Line domain model."""

from dataclasses import dataclass

from .section import Section
from .station import Station


@dataclass(frozen=True)
class Line:
    """A named route made of ordered sections, carrying a fare surcharge."""

    name: str
    sections: tuple[Section, ...] = ()
    surcharge: int = 0
    color: str = ""

    @property
    def stations(self) -> list[Station]:
        """Every station touched by this line's sections, in first-seen order."""
        seen: dict[Station, None] = {}
        for section in self.sections:
            seen.setdefault(section.up_station, None)
            seen.setdefault(section.down_station, None)
        return list(seen)
