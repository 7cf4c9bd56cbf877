"""
Heap-based Dijkstra implementation for pathfinder.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface, then walks predecessors
back from the requested end node.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import heapq
import logging
import math

from algorithms import PathFinder, SearchResult
from exceptions import ExecutionError
from graph import Graph
from nodes import Node

logger = logging.getLogger(__name__)


@dataclass
class ShortestDistance:
    """
    Best known cost from the source to one node during a search.

    predecessor is the node the cost was reached from. The source is its own
    predecessor; unreached nodes have none.
    """

    distance: float = math.inf
    predecessor: Optional[Node] = None


class DijkstraEngine(PathFinder):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) heap work, times the linear neighbour scan of the graph.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_path(self, graph: Graph, start: Node, end: Node) -> SearchResult:
        if not graph.is_weighted():
            raise ExecutionError("The graph that was created needs to be weighted!")
        if graph.get_node_by_id(start.id) is None:
            raise ExecutionError(f"The node {start.id} is not in the graph!")
        if graph.get_node_by_id(end.id) is None:
            raise ExecutionError(f"The node {end.id} is not in the graph!")

        distances = self.shortest_paths(graph, start)

        path: List[Node] = []
        current = end
        while True:
            entry = distances.get(current.id)
            if entry is None:
                raise ExecutionError(
                    f"Couldn't find the node {current.id} in the graph! "
                    "Please check if the input data is valid!"
                )
            path.append(current)
            prev = entry.predecessor
            if prev is None:
                raise ExecutionError(f"No path found from {start.id} to {end.id}!")
            if prev.id == start.id:
                path.append(start)
                break
            current = prev

        path.reverse()
        distance = distances[end.id].distance
        logger.debug(
            "dijkstra %s -> %s: distance=%s pops=%d pushes=%d",
            start.id, end.id, distance, self.last_heap_pops, self.last_heap_pushes,
        )
        return SearchResult(path, int(distance))

    def shortest_paths(self, graph: Graph, source: Node) -> Dict[str, ShortestDistance]:
        """
        Run Dijkstra from source over the whole graph.

        Returns one ShortestDistance per graph node, keyed by node id.
        Unreachable nodes keep an infinite distance and no predecessor.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

        dist: Dict[str, ShortestDistance] = {
            n.id: ShortestDistance() for n in graph.get_all_nodes()
        }
        dist[source.id] = ShortestDistance(0, source)
        pq: List[Tuple[float, Node]] = [(0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Skip outdated entries
            if d_u > self._lookup(dist, u).distance:
                continue

            for v, w in graph.neighbors(u):
                self.last_edges_examined += 1
                alt = d_u + w
                entry = self._lookup(dist, v)
                if alt < entry.distance:
                    entry.distance = alt
                    entry.predecessor = u
                    heapq.heappush(pq, (alt, v))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        return dist

    @staticmethod
    def _lookup(dist: Dict[str, ShortestDistance], node: Node) -> ShortestDistance:
        try:
            return dist[node.id]
        except KeyError:
            raise ExecutionError(
                f"Couldn't find the node {node.id} in the graph! "
                "Please check if the input data is valid!"
            ) from None
