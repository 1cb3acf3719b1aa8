"""Route service - Main orchestrator.

Loads the road graph once through the repository port, answers
point-to-point and single-source queries through the solver port, and
memoises results in the injected cache. Cache keys carry the graph they
were computed on, so a result finished after reload() is never served
for the new graph.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.errors import UnknownVertexError
from ..domain.models import AllPathsResult, PathResult, VertexId
from ..graph.model import GraphModel
from ..ports.cache import CachePort
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


def _require(graph: GraphModel, *vertices: VertexId) -> None:
    for vertex in vertices:
        if vertex not in graph:
            raise UnknownVertexError(
                f"Vertex not in graph: {vertex!r}",
                vertex_id=vertex,
            )


@dataclass
class RouteService:
    """Main service for shortest-route queries.

    Attributes:
        graph_repository: Loads the road graph
        route_solver: Computes shortest paths
        cache: Optional result cache (no caching when None)
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    cache: Optional[CachePort[Any]] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> GraphModel:
        """The loaded graph (loaded on first access)."""
        return self.graph_repository.load()

    def shortest_route(
        self,
        start: VertexId,
        end: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> PathResult:
        """Shortest distance and path from ``start`` to ``end``.

        Raises:
            UnknownVertexError: If start or end is not in the graph.
            QueryCancelledError: If the query is cancelled or times out.
            GraphError: If the graph cannot be loaded.
        """
        graph = self.graph
        _require(graph, start, end)

        def compute() -> PathResult:
            return self.route_solver.solve(graph, start, end, cancel=cancel)

        if self.cache is None:
            return compute()
        # GraphModel hashes by identity, so each loaded graph gets its own keys
        return self.cache.get_or_compute(("route", graph, start, end), compute)

    def routes_from(
        self,
        start: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> AllPathsResult:
        """Shortest distances and paths from ``start`` to every vertex.

        Raises:
            UnknownVertexError: If start is not in the graph.
            QueryCancelledError: If the query is cancelled or times out.
            GraphError: If the graph cannot be loaded.
        """
        graph = self.graph
        _require(graph, start)

        def compute() -> AllPathsResult:
            return self.route_solver.solve_all(graph, start, cancel=cancel)

        if self.cache is None:
            return compute()
        return self.cache.get_or_compute(("routes", graph, start), compute)

    def reload(self) -> GraphModel:
        """Re-read the graph and drop every cached result."""
        self.graph_repository.clear_cache()
        dropped = self.cache.clear() if self.cache is not None else 0
        graph = self.graph_repository.load()
        self._logger.info(
            "Graph reloaded",
            extra={"vertices": len(graph), "results_dropped": dropped},
        )
        return graph
