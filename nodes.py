"""
Node identity for pathfinder graphs.

Nodes are immutable values shared by every graph representation and
every path finding algorithm.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Node:
    """Named point in a graph. Equality, hashing and ordering use id only."""

    id: str

    def __str__(self) -> str:
        return self.id
