"""
Unit tests for DirectedGraph and UndirectedGraph.
"""

import pytest

from edge_list_graph import DirectedGraph, UndirectedGraph
from edges import DirectedEdge, UndirectedEdge
from exceptions import GraphInsertionError
from nodes import Node


def _directed(*names: str) -> DirectedGraph:
    g = DirectedGraph()
    for name in names:
        g.insert_node(Node(name))
    return g


def _undirected(*names: str) -> UndirectedGraph:
    g = UndirectedGraph()
    for name in names:
        g.insert_node(Node(name))
    return g


def test_insert_nodes_and_edges():
    g = _directed("A", "B", "C")
    a, b, c = Node("A"), Node("B"), Node("C")

    g.insert_edge(DirectedEdge(a, b, 1))
    g.insert_edge(DirectedEdge(a, c, 2))
    g.insert_edge(DirectedEdge(b, c, 3))

    assert list(g.get_all_nodes()) == [a, b, c]
    assert [str(e) for e in g.get_all_edges()] == ["A->B:1", "A->C:2", "B->C:3"]
    assert g.is_directed()
    assert g.is_weighted()


def test_insert_node_is_idempotent():
    g = _directed("A")
    g.insert_node(Node("A"))

    assert len(g) == 1
    assert g.get_node_by_id("A") == Node("A")


def test_get_all_nodes_is_read_only_view():
    g = _directed("A", "B")

    nodes = g.get_all_nodes()
    with pytest.raises((TypeError, AttributeError)):
        nodes.append(Node("C"))  # type: ignore[attr-defined]

    assert len(g) == 2


def test_directed_neighbors_only_follow_outgoing_edges():
    g = _directed("A", "B", "C")
    a, b, c = Node("A"), Node("B"), Node("C")
    g.insert_edge(DirectedEdge(a, b, 4))
    g.insert_edge(DirectedEdge(c, a, 9))

    assert list(g.neighbors(a)) == [(b, 4)]
    assert list(g.neighbors(b)) == []
    assert list(g.neighbors(c)) == [(a, 9)]


def test_undirected_neighbors_follow_both_orientations():
    g = _undirected("A", "B", "C")
    a, b, c = Node("A"), Node("B"), Node("C")
    g.insert_edge(UndirectedEdge(a, b, 7))
    g.insert_edge(UndirectedEdge(c, b, 3))

    assert list(g.neighbors(a)) == [(b, 7)]
    assert list(g.neighbors(b)) == [(a, 7), (c, 3)]
    assert list(g.neighbors(c)) == [(b, 3)]
    assert not g.is_directed()


def test_neighbors_is_recomputed_per_call():
    g = _undirected("A", "B", "C")
    a, b, c = Node("A"), Node("B"), Node("C")
    g.insert_edge(UndirectedEdge(a, b, 1))

    assert list(g.neighbors(a)) == [(b, 1)]
    g.insert_edge(UndirectedEdge(a, c, 2))
    assert list(g.neighbors(a)) == [(b, 1), (c, 2)]


def test_neighbors_of_isolated_or_unknown_node_is_empty():
    g = _directed("A")

    assert list(g.neighbors(Node("A"))) == []
    assert list(g.neighbors(Node("Z"))) == []


def test_directed_duplicate_edge_rejected_but_reverse_allowed():
    g = _directed("A", "B")
    a, b = Node("A"), Node("B")
    g.insert_edge(DirectedEdge(a, b, 1))

    with pytest.raises(GraphInsertionError, match="already exists"):
        g.insert_edge(DirectedEdge(a, b, 5))
    assert len(g.get_all_edges()) == 1

    g.insert_edge(DirectedEdge(b, a, 5))
    assert len(g.get_all_edges()) == 2


def test_undirected_duplicate_edge_rejected_in_either_orientation():
    g = _undirected("A", "B")
    a, b = Node("A"), Node("B")
    g.insert_edge(UndirectedEdge(a, b, 1))

    with pytest.raises(GraphInsertionError):
        g.insert_edge(UndirectedEdge(b, a, 1))
    with pytest.raises(GraphInsertionError):
        g.insert_edge(UndirectedEdge(a, b, 2))
    assert len(g.get_all_edges()) == 1


def test_edge_with_missing_endpoint_leaves_graph_unchanged():
    g = _undirected("A")

    with pytest.raises(GraphInsertionError, match="B"):
        g.insert_edge(UndirectedEdge(Node("A"), Node("B"), 3))

    assert list(g.get_all_nodes()) == [Node("A")]
    assert list(g.get_all_edges()) == []


def test_wrong_edge_variant_is_rejected():
    g = _directed("A", "B")

    with pytest.raises(GraphInsertionError, match="DirectedEdge"):
        g.insert_edge(UndirectedEdge(Node("A"), Node("B"), 1))  # type: ignore[arg-type]
    assert list(g.get_all_edges()) == []


def test_existence_checks_and_lookups():
    g = _directed("A", "B")
    edge = DirectedEdge(Node("A"), Node("B"), 2)
    g.insert_edge(edge)

    assert g.does_node_already_exist(Node("A"))
    assert not g.does_node_already_exist(Node("C"))
    assert g.does_edge_already_exist(DirectedEdge(Node("A"), Node("B"), 99))
    assert not g.does_edge_already_exist(DirectedEdge(Node("B"), Node("A"), 2))
    assert g.get_node_by_id("C") is None

    assert g.get_edge_by_id(edge.edge_id) is edge
    # Structurally equal edge, different identity.
    assert g.get_edge_by_id(DirectedEdge(Node("A"), Node("B"), 2).edge_id) is None
