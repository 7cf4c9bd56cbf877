"""
Weighted graph abstraction for pathfinder.

Nodes are Node instances.
Edges are DirectedEdge or UndirectedEdge values with integer weights.
Path finders only talk to a graph through this interface.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence, Tuple, Union
import uuid

from edges import DirectedEdge, UndirectedEdge
from nodes import Node

Edge = Union[DirectedEdge, UndirectedEdge]


class Graph(ABC):
    """Weighted graph over Node objects, either directed or undirected."""

    # --- Mutation ------------------------------------------------------------

    @abstractmethod
    def insert_node(self, node: Node) -> None:
        """Add node unless a node with the same id is already present."""
        raise NotImplementedError

    @abstractmethod
    def insert_edge(self, edge: Edge) -> None:
        """
        Append edge to the graph.

        Raises GraphInsertionError if an edge with the same identifying pair
        exists or if either endpoint is not a node of the graph. The graph is
        left untouched on failure.
        """
        raise NotImplementedError

    # --- Queries -------------------------------------------------------------

    @abstractmethod
    def does_node_already_exist(self, node: Node) -> bool:
        raise NotImplementedError

    @abstractmethod
    def does_edge_already_exist(self, edge: Edge) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_node_by_id(self, node_id: str) -> Optional[Node]:
        raise NotImplementedError

    @abstractmethod
    def get_edge_by_id(self, edge_id: uuid.UUID) -> Optional[Edge]:
        raise NotImplementedError

    @abstractmethod
    def get_all_nodes(self) -> Sequence[Node]:
        """Return all nodes in insertion order (read-only)."""
        raise NotImplementedError

    @abstractmethod
    def get_all_edges(self) -> Sequence[Edge]:
        """Return all edges in insertion order (read-only)."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, node: Node) -> Iterator[Tuple[Node, int]]:
        """
        Lazily yield (neighbor, weight) pairs reachable from node by one edge.

        Recomputed on every call. Yields nothing for a node without edges.
        """
        raise NotImplementedError

    @abstractmethod
    def is_directed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_weighted(self) -> bool:
        raise NotImplementedError
