"""
Process entry point: parse arguments, load the graph, run the search.

Prints the SearchResult and returns 0 on success. Any failure is logged
and returns 1.
"""

from typing import Optional, Sequence
import logging
import sys

from algorithms import SearchResult, build_path_finder
from app_config import AppConfig, InputOrigin, parse_args
from exceptions import ConfigurationError, PathfinderError
from graph import Graph
from graph_loader import load_graph_from_file

logger = logging.getLogger("pathfinder")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def load_graph(config: AppConfig) -> Graph:
    """Build the graph from the configured input origin."""
    if config.origin is InputOrigin.COMMAND_LINE:
        raise ConfigurationError("Reading graph data from the command line is not supported yet.")
    return load_graph_from_file(config.graph_file)


def run(config: AppConfig) -> SearchResult:
    graph = load_graph(config)
    finder = build_path_finder(config.algorithm)
    logger.info(
        "searching %s -> %s with %s in %s",
        config.start, config.end, config.algorithm.value, config.graph_file,
    )
    return finder.shortest_path(graph, config.start, config.end)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_args(argv)
    except PathfinderError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error(exc.message)
        return 1

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    try:
        result = run(config)
    except PathfinderError as exc:
        logger.error(exc.message)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
