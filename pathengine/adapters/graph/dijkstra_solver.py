"""Dijkstra Route Solver adapter.

This adapter runs ShortestPathEngine queries and adds:
- Engine settings from configuration (deadline, check interval)
- Logging of every solved route
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from ...config import EngineConfig, get_config
from ...domain.models import AllPathsResult, PathResult, VertexId
from ...graph.engine import ShortestPathEngine
from ...graph.model import GraphModel


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    Implements RouteSolverPort. The solver is stateless between calls;
    each call builds a lightweight engine around the given graph.

    Attributes:
        config: Engine configuration
    """

    config: EngineConfig = field(default_factory=lambda: get_config().engine)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphModel,
        start: VertexId,
        end: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Raises:
            UnknownVertexError: If start or end is not in the graph.
            QueryCancelledError: If the query is cancelled or times out.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        result = self._engine(graph).query(start, end, cancel=cancel)

        if result.is_reachable:
            self._logger.info(
                "Route found",
                extra={
                    "start": start,
                    "end": end,
                    "hops": result.hops,
                    "distance": result.distance,
                },
            )
        else:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
        return result

    def solve_all(
        self,
        graph: GraphModel,
        start: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> AllPathsResult:
        """Find shortest paths from ``start`` to every reachable vertex.

        Raises:
            UnknownVertexError: If start is not in the graph.
            QueryCancelledError: If the query is cancelled or times out.
        """
        result = self._engine(graph).query_all(start, cancel=cancel)
        self._logger.info(
            "Routes computed",
            extra={
                "start": start,
                "reachable": len(result.paths),
                "unreachable": len(graph) - len(result.paths) - 1,
            },
        )
        return result

    def _engine(self, graph: GraphModel) -> ShortestPathEngine:
        return ShortestPathEngine(
            graph,
            timeout_seconds=self.config.timeout_seconds,
            check_interval=self.config.check_interval,
        )
