"""
Concrete directed and undirected graph implementations for pathfinder.

Both store nodes and edges as insertion-ordered lists and answer queries
with linear scans. They differ in how an edge is identified and in which
edges count as a node's neighbours.
"""

from typing import Iterator, List, Optional, Sequence, Tuple
import logging
import uuid

from edges import DirectedEdge, UndirectedEdge
from exceptions import GraphInsertionError
from graph import Edge, Graph
from nodes import Node

logger = logging.getLogger(__name__)


class _EdgeListGraph(Graph):
    """
    Shared storage for both representations.

    Subclasses set `edge_type` and implement `neighbors` and `is_directed`.
    """

    edge_type: type = object

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    # --- Mutation ------------------------------------------------------------

    def insert_node(self, node: Node) -> None:
        if self.does_node_already_exist(node):
            return
        self._nodes.append(node)

    def insert_edge(self, edge: Edge) -> None:
        if not isinstance(edge, self.edge_type):
            raise GraphInsertionError(
                f"{type(self).__name__} only accepts {self.edge_type.__name__}, "
                f"got {type(edge).__name__} {edge}!"
            )
        if self.does_edge_already_exist(edge):
            raise GraphInsertionError(f"The edge {edge} already exists in the graph!")
        missing = [n.id for n in edge.endpoints if not self.does_node_already_exist(n)]
        if missing:
            raise GraphInsertionError(
                f"The edge {edge} references nodes that are not in the graph: "
                f"{', '.join(missing)}!"
            )
        self._edges.append(edge)
        logger.debug("inserted edge %s into %s", edge, type(self).__name__)

    # --- Graph interface -----------------------------------------------------

    def does_node_already_exist(self, node: Node) -> bool:
        return any(n.id == node.id for n in self._nodes)

    def does_edge_already_exist(self, edge: Edge) -> bool:
        key = edge.key
        return any(e.key == key for e in self._edges)

    def get_node_by_id(self, node_id: str) -> Optional[Node]:
        for n in self._nodes:
            if n.id == node_id:
                return n
        return None

    def get_edge_by_id(self, edge_id: uuid.UUID) -> Optional[Edge]:
        for e in self._edges:
            if e.edge_id == edge_id:
                return e
        return None

    def get_all_nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    def get_all_edges(self) -> Sequence[Edge]:
        return tuple(self._edges)

    def is_weighted(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        nodes = ", ".join(str(n) for n in self._nodes)
        edges = ", ".join(str(e) for e in self._edges)
        return f"{type(self).__name__}(nodes=[{nodes}], edges=[{edges}])"


class DirectedGraph(_EdgeListGraph):
    """
    Directed, weighted graph. An edge source -> target is only walkable
    from source, and (A, B) and (B, A) are different edges.
    """

    edge_type = DirectedEdge

    def neighbors(self, node: Node) -> Iterator[Tuple[Node, int]]:
        for e in self._edges:
            if e.source.id == node.id:
                yield e.target, e.weight

    def is_directed(self) -> bool:
        return True


class UndirectedGraph(_EdgeListGraph):
    """
    Undirected, weighted graph. Every edge is walkable from either end and
    (A, B) and (B, A) are the same edge.
    """

    edge_type = UndirectedEdge

    def neighbors(self, node: Node) -> Iterator[Tuple[Node, int]]:
        for e in self._edges:
            if e.a.id == node.id:
                yield e.b, e.weight
            elif e.b.id == node.id:
                yield e.a, e.weight

    def is_directed(self) -> bool:
        return False
