"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts between the services and the
adapters that load a road graph and compute shortest paths on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    import threading

    from ..domain.models import AllPathsResult, PathResult, VertexId
    from ..graph.model import GraphModel


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    road graph from persistent storage.
    """

    def load(self) -> GraphModel:
        """Load the graph.

        Returns:
            The immutable graph model.
        """
        ...

    def list_vertices(self) -> Sequence[VertexId]:
        """List all vertex ids in the graph."""
        ...

    def clear_cache(self) -> None:
        """Drop the loaded graph so the next load() reads it again."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: GraphModel,
        start: VertexId,
        end: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The road graph.
            start: Start vertex id.
            end: End vertex id.
            cancel: Optional event that aborts the query when set.

        Returns:
            PathResult; an unreachable target has an infinite distance
            and an empty path.
        """
        ...

    def solve_all(
        self,
        graph: GraphModel,
        start: VertexId,
        cancel: Optional[threading.Event] = None,
    ) -> AllPathsResult:
        """Find shortest paths from one vertex to every reachable vertex.

        Args:
            graph: The road graph.
            start: Start vertex id.
            cancel: Optional event that aborts the query when set.

        Returns:
            AllPathsResult with every distance and every reachable path.
        """
        ...
