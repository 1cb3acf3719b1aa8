"""Immutable adjacency-list graph.

This module defines GraphModel, the read-only structure every query
runs against. It is built once from a vertex list and an ordered edge
list and then shared by any number of queries, including concurrent
ones, without locking.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from ..domain.errors import ConstructionError, InvalidWeightError, UnknownVertexError
from ..domain.models import Edge, VertexId

Neighbor = Tuple[VertexId, float]
Adjacency = Mapping[VertexId, Tuple[Neighbor, ...]]
EdgeLike = Union[Edge, Tuple[VertexId, VertexId, float]]


def _as_edge(raw: EdgeLike) -> Edge:
    if isinstance(raw, Edge):
        return raw
    try:
        source, target, weight = raw
    except (TypeError, ValueError) as e:
        raise ConstructionError(
            f"Edge must be a (source, target, weight) triple, got {raw!r}",
            edge=raw,
            cause=e,
        )
    return Edge(source, target, weight)


def _is_known(staging: Mapping[VertexId, object], vertex: object) -> bool:
    try:
        return vertex in staging
    except TypeError:
        return False


def _check_weight(edge: Edge) -> float:
    weight = edge.weight
    # bool is a Real subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, (Real, Decimal)):
        raise InvalidWeightError(
            f"Edge weight must be a real number, got {weight!r}",
            edge=edge,
            weight=weight,
        )
    try:
        value = float(weight)
    except OverflowError:
        # ints and fractions past the float range saturate
        value = -math.inf if weight < 0 else math.inf
    except ValueError as e:
        # signalling Decimal NaN refuses conversion
        raise InvalidWeightError(
            f"Edge weight must be a real number, got {weight!r}",
            edge=edge,
            weight=weight,
            cause=e,
        )
    if math.isnan(value) or value < 0:
        raise InvalidWeightError(
            f"Edge weight must be non-negative, got {weight!r} "
            f"on {edge.source!r} -> {edge.target!r}",
            edge=edge,
            weight=edge.weight,
        )
    return value


_EMPTY: Adjacency = MappingProxyType({})


@dataclass(frozen=True, eq=False, repr=False)
class GraphModel:
    """Directed, non-negatively weighted multigraph.

    Only :meth:`build` populates a graph; the bare constructor takes no
    arguments and yields the empty graph. The adjacency mapping is a
    read-only view; neighbour sequences are tuples in edge input order,
    so parallel edges are kept and relaxed independently.
    """

    _adjacency: Adjacency = field(default_factory=lambda: _EMPTY, init=False)
    edge_count: int = field(default=0, init=False)

    @classmethod
    def build(
        cls, vertices: Iterable[VertexId], edges: Iterable[EdgeLike]
    ) -> GraphModel:
        """Build a graph from vertex ids and directed edges.

        Args:
            vertices: Unique vertex ids.
            edges: Ordered ``Edge`` instances or ``(source, target, weight)``
                triples. Weights may be any real number or ``Decimal``;
                they are stored as floats, and values past the float
                range become ``inf``.

        Returns:
            The immutable graph.

        Raises:
            ConstructionError: On a duplicate vertex id or an edge
                referencing an unknown vertex.
            InvalidWeightError: On a negative or non-real weight.
        """
        staging: Dict[VertexId, List[Neighbor]] = {}
        for vertex in vertices:
            try:
                duplicate = vertex in staging
            except TypeError as e:
                raise ConstructionError(
                    f"Vertex id must be hashable, got {vertex!r}",
                    cause=e,
                )
            if duplicate:
                raise ConstructionError(
                    f"Duplicate vertex id: {vertex!r}",
                    vertex_id=vertex,
                )
            staging[vertex] = []

        count = 0
        for raw in edges:
            edge = _as_edge(raw)
            for endpoint in (edge.source, edge.target):
                if not _is_known(staging, endpoint):
                    raise ConstructionError(
                        f"Edge {edge.source!r} -> {edge.target!r} references "
                        f"unknown vertex {endpoint!r}",
                        vertex_id=endpoint,
                        edge=edge,
                    )
            weight = _check_weight(edge)
            staging[edge.source].append((edge.target, weight))
            count += 1

        adjacency = {vertex: tuple(out) for vertex, out in staging.items()}
        graph = cls()
        object.__setattr__(graph, "_adjacency", MappingProxyType(adjacency))
        object.__setattr__(graph, "edge_count", count)
        return graph

    @property
    def adjacency(self) -> Adjacency:
        """Read-only view of vertex id -> outgoing (neighbor, weight) pairs."""
        return self._adjacency

    def neighbors(self, vertex: VertexId) -> Tuple[Neighbor, ...]:
        """Return the outgoing (neighbor, weight) pairs of ``vertex``.

        Raises:
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(
                f"Vertex not in graph: {vertex!r}",
                vertex_id=vertex,
            ) from None

    def vertices(self) -> Tuple[VertexId, ...]:
        """Return all vertex ids in input order."""
        return tuple(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._adjacency
        except TypeError:
            return False

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"GraphModel(vertices={len(self)}, edges={self.edge_count})"
