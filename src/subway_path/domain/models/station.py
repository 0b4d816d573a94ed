"""Station domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Station:
    """Represents a station in the transit network.

    Two stations are the same station when their identifiers match; the name
    is carried for display only.
    """

    id: str
    name: str = field(default="", compare=False)
