import logging

import pytest

from algorithms import Algorithm, SearchResult, build_path_finder
from dijkstra_engine import DijkstraEngine
from nodes import Node


def test_search_result_requires_two_nodes():
    with pytest.raises(ValueError, match="at least 2 nodes"):
        SearchResult([Node("A")], 0)
    with pytest.raises(ValueError):
        SearchResult([], 0)


def test_search_result_stores_path_as_tuple():
    path = [Node("A"), Node("B")]
    result = SearchResult(path, 3)
    path.append(Node("C"))

    assert result.path == (Node("A"), Node("B"))


def test_search_result_str():
    result = SearchResult([Node("A"), Node("B"), Node("C")], 10)

    assert str(result) == "Path: A -> B -> C\nDistance: 10"


def test_algorithm_from_string_is_case_insensitive():
    assert Algorithm.from_string("Dijkstra") is Algorithm.DIJKSTRA
    assert Algorithm.from_string("dijkstra") is Algorithm.DIJKSTRA


def test_unknown_algorithm_falls_back_to_dijkstra(caplog):
    with caplog.at_level(logging.WARNING):
        assert Algorithm.from_string("A*") is Algorithm.DIJKSTRA
    assert "unknown algorithm" in caplog.text


def test_build_path_finder_returns_engine():
    assert isinstance(build_path_finder(Algorithm.DIJKSTRA), DijkstraEngine)
