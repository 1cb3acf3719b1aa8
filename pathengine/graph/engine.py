"""Shortest-path computation using Dijkstra's algorithm.

The engine answers point-to-point and single-source queries against an
immutable GraphModel. Every query allocates its own distance map,
predecessor map, settled set and frontier, so one engine (and one
graph) can serve concurrent queries from several threads.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Dict, Optional, Set, Tuple

from ..domain.errors import QueryCancelledError, UnknownVertexError
from ..domain.models import AllPathsResult, PathResult, VertexId
from .frontier import PriorityFrontier
from .model import GraphModel
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

Distances = Dict[VertexId, float]
Previous = Dict[VertexId, VertexId]


class ShortestPathEngine:
    """Dijkstra over a non-negatively weighted directed graph.

    Parameters
    ----------
    graph:
        The graph to query. It is never mutated.
    timeout_seconds:
        Optional per-query deadline. A query still running after this
        many seconds raises ``QueryCancelledError``.
    check_interval:
        Number of settled vertices between two deadline/cancel checks.
    """

    def __init__(
        self,
        graph: GraphModel,
        timeout_seconds: Optional[float] = None,
        check_interval: int = 256,
    ) -> None:
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        if check_interval < 1:
            raise ValueError(f"check_interval must be >= 1, got {check_interval}")
        self.graph = graph
        self.timeout_seconds = timeout_seconds
        self.check_interval = check_interval

    def query(
        self,
        start: VertexId,
        end: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> PathResult:
        """Compute the shortest path from ``start`` to ``end``.

        Returns:
            PathResult with the distance and path; ``inf`` and an empty
            path when ``end`` is unreachable.

        Raises:
            UnknownVertexError: If ``start`` or ``end`` is not in the graph.
            QueryCancelledError: If the deadline passes or ``cancel`` is set.
        """
        self._require(start)
        self._require(end)

        if start == end:
            return PathResult(start, end, 0.0, (start,))

        distances, previous, settled = self._relax(start, end, cancel)
        distance = distances.get(end, math.inf)
        path = reconstruct_path(previous, start, end)

        logger.debug(
            "Point query finished",
            extra={
                "start": start,
                "end": end,
                "distance": distance,
                "settled": settled,
            },
        )
        return PathResult(start, end, distance, path)

    def query_all(
        self,
        start: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> AllPathsResult:
        """Compute shortest distances and paths from ``start`` to every vertex.

        Returns:
            AllPathsResult whose distances cover every vertex of the graph
            (``inf`` when unreachable) and whose paths cover every
            reachable vertex other than ``start``.

        Raises:
            UnknownVertexError: If ``start`` is not in the graph.
            QueryCancelledError: If the deadline passes or ``cancel`` is set.
        """
        self._require(start)

        distances, previous, settled = self._relax(start, None, cancel)
        full = {vertex: distances.get(vertex, math.inf) for vertex in self.graph}
        paths = {
            vertex: reconstruct_path(previous, start, vertex)
            for vertex in previous
        }

        logger.debug(
            "Single-source query finished",
            extra={"start": start, "reachable": len(paths) + 1, "settled": settled},
        )
        return AllPathsResult(start, full, paths)

    def _require(self, vertex: VertexId) -> None:
        if vertex not in self.graph:
            raise UnknownVertexError(
                f"Vertex not in graph: {vertex!r}",
                vertex_id=vertex,
            )

    def _relax(
        self,
        start: VertexId,
        stop_at: Optional[VertexId],
        cancel: Optional[threading.Event],
    ) -> Tuple[Distances, Previous, int]:
        """Run the relaxation loop.

        Stops when ``stop_at`` is extracted, or when the frontier is
        exhausted if ``stop_at`` is None. Distances holds only vertices
        reached so far; a missing vertex is at ``inf``.
        """
        adjacency = self.graph.adjacency
        deadline = (
            time.monotonic() + self.timeout_seconds
            if self.timeout_seconds is not None
            else None
        )

        distances: Distances = {start: 0.0}
        previous: Previous = {}
        settled: Set[VertexId] = set()
        frontier = PriorityFrontier()
        frontier.insert(start, 0.0)
        self._check_cancelled(start, 0, deadline, cancel)

        while not frontier.is_empty():
            current, priority = frontier.extract_min()
            if current in settled or priority > distances[current]:
                continue  # stale
            if current == stop_at:
                break
            settled.add(current)

            if len(settled) % self.check_interval == 0:
                self._check_cancelled(start, len(settled), deadline, cancel)

            base = distances[current]
            for neighbor, weight in adjacency[current]:
                candidate = base + weight
                if candidate < distances.get(neighbor, math.inf):
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    frontier.insert(neighbor, candidate)

        return distances, previous, len(settled)

    def _check_cancelled(
        self,
        start: VertexId,
        settled: int,
        deadline: Optional[float],
        cancel: Optional[threading.Event],
    ) -> None:
        if cancel is not None and cancel.is_set():
            raise QueryCancelledError(
                f"Query from {start!r} cancelled",
                source=start,
                settled=settled,
            )
        if deadline is not None and time.monotonic() > deadline:
            raise QueryCancelledError(
                f"Query from {start!r} exceeded {self.timeout_seconds}s",
                source=start,
                settled=settled,
            )
