"""
Build graphs from the pathfinder text format.

One edge per line:

    A->B:7      directed edge A to B with weight 7
    A-B:7       undirected edge between A and B with weight 7

The first non-blank line decides whether the whole file describes a
DirectedGraph or an UndirectedGraph. For example

    A-B:7
    B-C:3
    A-C:15
    B-D:2
    C-D:4

describes an undirected graph where the cheapest A to C route is A-B-C.
"""

from pathlib import Path
from typing import Iterable, Tuple, Union
import logging
import re

from edge_list_graph import DirectedGraph, UndirectedGraph
from edges import MAX_WEIGHT, DirectedEdge, UndirectedEdge
from exceptions import GraphInsertionError, GraphLoadError
from nodes import Node

logger = logging.getLogger(__name__)

DIRECTED_LINE = re.compile(r"^(?P<a>[A-Za-z0-9]+)->(?P<b>[A-Za-z0-9]+):(?P<weight>[0-9]{1,5})$")
UNDIRECTED_LINE = re.compile(r"^(?P<a>[A-Za-z0-9]+)-(?P<b>[A-Za-z0-9]+):(?P<weight>[0-9]{1,5})$")

LoadedGraph = Union[DirectedGraph, UndirectedGraph]


def _parse_line(line: str, lineno: int, pattern: "re.Pattern[str]") -> Tuple[Node, Node, int]:
    match = pattern.match(line)
    if match is None:
        raise GraphLoadError(
            f"Invalid line syntax on line {lineno}: {line!r}! "
            "Please use only 'A->B:2' or only 'A-B:5' throughout the file."
        )
    weight = int(match.group("weight"))
    if weight > MAX_WEIGHT:
        raise GraphLoadError(
            f"Weight {weight} on line {lineno} is larger than the maximum of {MAX_WEIGHT}!"
        )
    return Node(match.group("a")), Node(match.group("b")), weight


def _numbered_lines(lines: Iterable[str]) -> Iterable[Tuple[int, str]]:
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if line:
            yield lineno, line


def load_graph_from_text(text: str) -> LoadedGraph:
    """
    Parse text into a DirectedGraph or UndirectedGraph.

    Duplicate edges after the first occurrence are skipped. Any malformed
    line aborts the whole load.

    Raises:
        GraphLoadError: empty input, malformed line, mixed syntax or a weight
            outside the accepted range.
    """
    lines = iter(_numbered_lines(text.splitlines()))
    first = next(lines, None)
    if first is None:
        raise GraphLoadError("The specified graph file is empty!")

    lineno, line = first
    graph: LoadedGraph
    if DIRECTED_LINE.match(line):
        graph, pattern, edge_cls = DirectedGraph(), DIRECTED_LINE, DirectedEdge
    elif UNDIRECTED_LINE.match(line):
        graph, pattern, edge_cls = UndirectedGraph(), UNDIRECTED_LINE, UndirectedEdge
    else:
        raise GraphLoadError(
            f"The first line of the graph file is in a wrong format: {line!r}! "
            "Please use these formats: (directed) 'A->B:4' OR (undirected) 'A-B:46'."
        )

    skipped = 0
    for lineno, line in [(lineno, line), *lines]:
        a, b, weight = _parse_line(line, lineno, pattern)
        edge = edge_cls(a, b, weight)
        if graph.does_edge_already_exist(edge):
            logger.debug("skipping duplicate edge %s on line %d", edge, lineno)
            skipped += 1
            continue
        graph.insert_node(a)
        graph.insert_node(b)
        try:
            graph.insert_edge(edge)
        except GraphInsertionError as exc:
            raise GraphLoadError(f"Line {lineno}: {exc.message}") from exc

    logger.info(
        "loaded %s graph with %d nodes and %d edges (%d duplicates skipped)",
        "directed" if graph.is_directed() else "undirected",
        len(graph.get_all_nodes()),
        len(graph.get_all_edges()),
        skipped,
    )
    return graph


def load_graph_from_file(path: Union[str, Path]) -> LoadedGraph:
    """Read path and parse it with load_graph_from_text."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphLoadError(f"Couldn't read the graph file {path}: {exc}") from exc
    return load_graph_from_text(text)
