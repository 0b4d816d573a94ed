"""Errors raised for path requests the network cannot answer."""


class PathFinderError(Exception):
    """Base class for rejected path requests."""

    code = "PATH_FINDER_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPathRequestError(PathFinderError):
    """Source and target are the same station."""

    code = "INVALID_PATH_REQUEST"

    def __init__(self, message: str = "Source and target stations must differ") -> None:
        super().__init__(message)


class NoPathError(PathFinderError):
    """No route connects the source and target stations."""

    code = "NO_PATH"

    def __init__(self, message: str = "No path connects the requested stations") -> None:
        super().__init__(message)
