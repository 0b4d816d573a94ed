"""Command line adapters."""

from subway_path.adapters.cli.responses import ErrorResponse, PathResponse, StationResponse

__all__ = ["ErrorResponse", "PathResponse", "StationResponse"]
