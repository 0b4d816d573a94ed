"""Response models printed by the command line interface."""

from pydantic import BaseModel, ConfigDict

from subway_path.domain.exceptions import PathFinderError
from subway_path.domain.models.path_result import PathResult
from subway_path.domain.models.station import Station


class StationResponse(BaseModel):
    """A station as shown to the rider."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @classmethod
    def of(cls, station: Station) -> "StationResponse":
        return cls(id=station.id, name=station.name)


class PathResponse(BaseModel):
    """Shortest path, its distance and its fare."""

    model_config = ConfigDict(frozen=True)

    stations: list[StationResponse]
    distance: int
    fare: int

    @classmethod
    def of(cls, result: PathResult) -> "PathResponse":
        return cls(
            stations=[StationResponse.of(station) for station in result.stations],
            distance=result.distance,
            fare=result.fare_amount,
        )


class ErrorResponse(BaseModel):
    """A rejected request, with a stable error code."""

    model_config = ConfigDict(frozen=True)

    code: str
    reason: str

    @classmethod
    def from_error(cls, error: PathFinderError) -> "ErrorResponse":
        return cls(code=error.code, reason=error.message)
