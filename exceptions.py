"""
Error types for pathfinder.

Every failure surfaced to a caller is a PathfinderError carrying a
human-readable message. The top-level runner logs the message and exits
non-zero.
"""


class PathfinderError(Exception):
    """Base class for all pathfinder failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(PathfinderError):
    """Insufficient or invalid command-line / YAML configuration."""


class GraphLoadError(PathfinderError):
    """The graph file could not be read or parsed."""


class GraphInsertionError(PathfinderError):
    """A node or edge could not be added to a graph."""


class ExecutionError(PathfinderError):
    """A path finder could not produce a SearchResult."""
