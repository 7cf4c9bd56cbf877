"""
Algorithm interfaces for path finding.

Keeps the search algorithms separate from graph storage and from the
command-line wiring.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import logging

from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Answer to a shortest-path query.

    path runs from the start node to the end node and always holds at least
    two nodes; distance is the sum of the edge weights along it.
    """

    path: Tuple[Node, ...]
    distance: int

    def __post_init__(self) -> None:
        if len(self.path) < 2:
            raise ValueError(
                "There need to be at least 2 nodes in the path from one node to another! "
                "Couldn't create a SearchResult."
            )
        # Callers may pass a list.
        object.__setattr__(self, "path", tuple(self.path))

    def __str__(self) -> str:
        return f"Path: {' -> '.join(n.id for n in self.path)}\nDistance: {self.distance}"


class PathFinder(ABC):
    """
    Interface for point-to-point shortest-path computation.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, start: Node, end: Node) -> SearchResult:
        """
        Find a minimum-weight path from start to end.

        Raises:
            ExecutionError: the request cannot be satisfied on this graph.
        """
        raise NotImplementedError


class Algorithm(Enum):
    """Path finding algorithms selectable from the command line."""

    DIJKSTRA = "Dijkstra"

    @classmethod
    def from_string(cls, name: str) -> "Algorithm":
        """Map a user supplied name to an Algorithm; unknown names fall back to Dijkstra."""
        for algo in cls:
            if algo.value.lower() == name.strip().lower():
                return algo
        logger.warning("unknown algorithm %r, falling back to %s", name, cls.DIJKSTRA.value)
        return cls.DIJKSTRA


def build_path_finder(algorithm: Algorithm) -> PathFinder:
    """Instantiate the PathFinder for algorithm."""
    # Imported here: dijkstra_engine depends on this module.
    from dijkstra_engine import DijkstraEngine

    if algorithm is Algorithm.DIJKSTRA:
        return DijkstraEngine()
    raise ValueError(f"No path finder registered for {algorithm}")
