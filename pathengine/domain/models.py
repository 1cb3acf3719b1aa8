"""Immutable domain models for the shortest-path engine.

All models are frozen dataclasses with slots. They carry no behaviour
beyond small read-only helpers and have no external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, Mapping, Tuple

VertexId = Hashable
Path = Tuple[VertexId, ...]


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection ``source -> target``.

    Attributes:
        source: Id of the tail vertex
        target: Id of the head vertex
        weight: Non-negative traversal cost (e.g. travel time in seconds)
    """

    source: VertexId
    target: VertexId
    weight: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a point-to-point query.

    Attributes:
        source: Start vertex of the query
        target: End vertex of the query
        distance: Total weight of the shortest path, ``inf`` if unreachable
        path: Vertex ids from source to target, empty if unreachable
    """

    source: VertexId
    target: VertexId
    distance: float
    path: Path = field(default_factory=tuple)

    @property
    def is_reachable(self) -> bool:
        """Check if a path to the target exists."""
        return not math.isinf(self.distance)

    @property
    def hops(self) -> int:
        """Return the number of edges on the path (0 if unreachable)."""
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True, slots=True)
class AllPathsResult:
    """Result of a single-source query.

    Attributes:
        source: Start vertex of the query
        distances: Distance to every vertex of the graph, ``inf`` if unreachable
        paths: Path to every reachable vertex other than the source
    """

    source: VertexId
    distances: Mapping[VertexId, float]
    paths: Mapping[VertexId, Path]

    def reachable(self) -> tuple[VertexId, ...]:
        """Return the vertices with a finite distance, source included."""
        return tuple(v for v, d in self.distances.items() if not math.isinf(d))

    def path_to(self, target: VertexId) -> PathResult:
        """Project the result onto a single target vertex."""
        if target == self.source:
            return PathResult(self.source, target, 0.0, (self.source,))
        return PathResult(
            source=self.source,
            target=target,
            distance=self.distances.get(target, math.inf),
            path=self.paths.get(target, ()),
        )
