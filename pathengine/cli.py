"""Command-line entry point.

    pathengine route Home School
    pathengine routes Home --data-dir ./data

Reads the CSV graph configured in GraphConfig (or ``--data-dir``) and
prints shortest routes. Exit status is 2 on any engine error.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import AppConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import PathEngineError
from .domain.models import AllPathsResult, PathResult
from .observability import configure_logging
from .services import RouteService

logger = logging.getLogger(__name__)


def _format_distance(distance: float) -> str:
    return "unreachable" if math.isinf(distance) else f"{distance:g}"


def format_route(result: PathResult) -> str:
    if not result.is_reachable:
        return f"No path from {result.source} to {result.target}"
    return (
        f"{result.source} -> {result.target}: distance = "
        f"{_format_distance(result.distance)}, path = "
        + " -> ".join(str(v) for v in result.path)
    )


def format_routes(result: AllPathsResult) -> List[str]:
    lines = [f"All shortest paths from {result.source}:"]
    for vertex, distance in result.distances.items():
        if vertex == result.source:
            continue
        path = result.paths.get(vertex)
        route = " -> ".join(str(v) for v in path) if path else "no path"
        lines.append(f"  To {vertex}: distance = {_format_distance(distance)}, path = {route}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathengine",
        description="Shortest routes over a directed, weighted road graph.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="directory holding the vertices and edges CSV files",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log at DEBUG level"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="shortest path between two vertices")
    route.add_argument("start")
    route.add_argument("end")

    routes = sub.add_parser("routes", help="shortest paths from one vertex to all")
    routes.add_argument("start")
    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = get_config()
    updates = {}
    if args.data_dir is not None:
        graph = GraphConfig(
            data_dir=args.data_dir,
            vertices_file=config.graph.vertices_file,
            edges_file=config.graph.edges_file,
        )
        updates["graph"] = graph
    if args.verbose:
        updates["observability"] = config.observability.model_copy(
            update={"level": "DEBUG"}
        )
    return config.model_copy(update=updates) if updates else config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _load_config(args)
    configure_logging(config.observability)

    service: RouteService = Container.create_default(config).resolve(RouteService)
    try:
        if args.command == "route":
            print(format_route(service.shortest_route(args.start, args.end)))
        else:
            print("\n".join(format_routes(service.routes_from(args.start))))
    except PathEngineError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
