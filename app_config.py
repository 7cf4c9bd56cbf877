"""
Command-line configuration for the pathfinder runner.

Flags:
    --graph-file <path>         graph file to load (default graph.txt)
    --start <node>              node to start from (required)
    --end <node>                destination node (required)
    --algo <name>               path finding algorithm (default Dijkstra)
    --origin <file|cmd-line>    where the graph data comes from (default file)
    --config <yaml>             optional YAML file with defaults for the above
    --log-level <level>         logging level (default WARNING)

An optional YAML run config may set graph_file, algo, origin and log_level.
Flags given on the command line win over the YAML values.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, NoReturn, Sequence
import argparse
import logging

from algorithms import Algorithm
from exceptions import ConfigurationError
from nodes import Node

logger = logging.getLogger(__name__)

USAGE = (
    "pathfinder [--origin <file / cmd-line> --graph-file <path_to_file> "
    "--algo <algorithm_name>] --start <node> --end <node>"
)

DEFAULTS: Dict[str, str] = {
    "graph_file": "graph.txt",
    "algo": Algorithm.DIJKSTRA.value,
    "origin": "file",
    "log_level": "WARNING",
}

# Arguments after the program name; anything shorter is rejected outright.
MIN_ARGS = 3


class InputOrigin(Enum):
    """Where the graph data is read from."""

    FILE = "file"
    COMMAND_LINE = "cmd-line"

    @classmethod
    def from_string(cls, src: str) -> "InputOrigin":
        """Unknown values fall back to FILE."""
        for origin in cls:
            if origin.value == src:
                return origin
        logger.warning("unknown input origin %r, falling back to %s", src, cls.FILE.value)
        return cls.FILE


@dataclass(frozen=True)
class AppConfig:
    graph_file: Path
    start: Node
    end: Node
    algorithm: Algorithm
    origin: InputOrigin
    log_level: str


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(f"{message} (usage: {USAGE})")


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(
        prog="pathfinder",
        description="Find the shortest path between two nodes of a weighted graph.",
        usage=USAGE,
    )
    # No argparse defaults: None marks "not given" so YAML values can apply.
    parser.add_argument("--graph-file", dest="graph_file")
    parser.add_argument("--start")
    parser.add_argument("--end")
    parser.add_argument("--algo")
    parser.add_argument("--origin")
    parser.add_argument("--config", type=Path)
    parser.add_argument("--log-level", dest="log_level")
    return parser


def load_run_config(path: Path) -> Dict[str, Any]:
    """
    Read a YAML run config.

    The document must be a mapping using only the keys in DEFAULTS.
    """
    import yaml

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Couldn't read the config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"The config file {path} is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"The config file {path} must contain a mapping!")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in config file {path}: {', '.join(map(str, unknown))}"
        )
    # null values leave the default in place
    return {key: str(value) for key, value in data.items() if value is not None}


def parse_args(argv: Sequence[str]) -> AppConfig:
    """
    Turn command-line arguments (without the program name) into an AppConfig.

    Raises:
        ConfigurationError: too few arguments, a missing --start or --end,
            an unknown flag or an unusable YAML config.
    """
    argv = list(argv)
    if len(argv) < MIN_ARGS:
        raise ConfigurationError(f"Not enough arguments passed! ('{USAGE}')")

    args = build_parser().parse_args(argv)

    settings: Dict[str, str] = dict(DEFAULTS)
    if args.config is not None:
        settings.update(load_run_config(args.config))
    for key in DEFAULTS:
        value = getattr(args, key)
        if value is not None:
            settings[key] = value

    if not args.start:
        raise ConfigurationError("A start node hasn't been specified! ('--start A')")
    if not args.end:
        raise ConfigurationError("An end node hasn't been specified! ('--end B')")

    log_level = settings["log_level"].upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level {settings['log_level']!r}!")

    return AppConfig(
        graph_file=Path(settings["graph_file"]),
        start=Node(args.start),
        end=Node(args.end),
        algorithm=Algorithm.from_string(settings["algo"]),
        origin=InputOrigin.from_string(settings["origin"]),
        log_level=log_level,
    )
