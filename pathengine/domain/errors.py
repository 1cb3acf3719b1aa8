"""Typed domain errors for the shortest-path engine.

Every failure is a programmer or input error raised at the point of
violation: construction errors abort ``GraphModel.build`` and query
errors abort the query. No partial graph or partial result is ever
returned, and none of these errors is retryable.

All errors inherit from PathEngineError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional


@dataclass
class PathEngineError(Exception):
    """Base error for the path engine domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConstructionError(PathEngineError):
    """The vertex/edge input cannot form a valid graph.

    Raised for a duplicate vertex id and for an edge whose source or
    target is not in the vertex list.

    Attributes:
        vertex_id: The offending vertex id, if any
        edge: The offending edge, if any
    """

    vertex_id: Optional[Hashable] = None
    edge: Optional[Any] = None


@dataclass
class InvalidWeightError(ConstructionError):
    """An edge weight is negative or not a real number.

    Attributes:
        weight: The rejected weight value
    """

    weight: Any = None


@dataclass
class UnknownVertexError(PathEngineError):
    """A query referenced a vertex id absent from the graph.

    Attributes:
        vertex_id: The id that was not found
    """

    vertex_id: Optional[Hashable] = None


@dataclass
class QueryCancelledError(PathEngineError):
    """A query was aborted by its deadline or cancel event.

    Attributes:
        source: Source vertex of the aborted query
        settled: Number of vertices settled before the abort
    """

    source: Optional[Hashable] = None
    settled: int = 0


@dataclass
class GraphError(PathEngineError):
    """Graph data could not be read or parsed.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None
