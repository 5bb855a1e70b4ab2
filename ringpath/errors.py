"""Exceptions raised by ringpath."""


class InvalidArgumentError(ValueError):
    """Raised when a graph, label, or neighbor pair fails validation."""


class PathNotFoundError(LookupError):
    """Raised in strict mode when no candidate walk reaches the end node."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(f"No path from '{start}' to '{end}' within the walk bound.")
        self.start = start
        self.end = end
