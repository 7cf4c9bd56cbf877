"""
Weighted edge value types for directed and undirected graphs.

Every edge gets a random edge_id at construction. The id is only used for
direct lookup; duplicate detection goes through `key`, which is built from
the endpoint ids.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple
import uuid

from nodes import Node

# Largest weight the text format accepts (16-bit field).
MAX_WEIGHT = 2**16 - 1


def _check_weight(weight: int) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an integer, got {weight!r}")
    if weight < 0 or weight > MAX_WEIGHT:
        raise ValueError(f"Edge weight {weight} is outside 0..{MAX_WEIGHT}")


@dataclass(frozen=True)
class DirectedEdge:
    """One-way edge: walkable from source to target only."""

    source: Node
    target: Node
    weight: int
    edge_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        _check_weight(self.weight)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.source.id, self.target.id)

    @property
    def endpoints(self) -> Tuple[Node, Node]:
        return (self.source, self.target)

    def __str__(self) -> str:
        return f"{self.source}->{self.target}:{self.weight}"


@dataclass(frozen=True)
class UndirectedEdge:
    """Two-way edge between a and b; (a, b) and (b, a) are the same edge."""

    a: Node
    b: Node
    weight: int
    edge_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        _check_weight(self.weight)

    @property
    def key(self) -> FrozenSet[str]:
        return frozenset((self.a.id, self.b.id))

    @property
    def endpoints(self) -> Tuple[Node, Node]:
        return (self.a, self.b)

    def __str__(self) -> str:
        return f"{self.a}-{self.b}:{self.weight}"
