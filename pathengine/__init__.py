"""Single-source shortest paths over directed, non-negatively weighted graphs.

Build a graph once, then query it as often as needed:

    graph = GraphModel.build(["A", "B", "C"], [("A", "B", 1.0), ("B", "C", 2.0)])
    engine = ShortestPathEngine(graph)
    engine.query("A", "C")       # PathResult(distance=3.0, path=("A", "B", "C"))
    engine.query_all("A")        # AllPathsResult(distances=..., paths=...)

Loading graphs from CSV, caching results and configuration live in the
adapters, services and config modules.
"""

from .domain.errors import (
    ConstructionError,
    GraphError,
    InvalidWeightError,
    PathEngineError,
    QueryCancelledError,
    UnknownVertexError,
)
from .domain.models import AllPathsResult, Edge, PathResult
from .graph import GraphModel, PriorityFrontier, ShortestPathEngine, reconstruct_path

__all__ = [
    "GraphModel",
    "PriorityFrontier",
    "ShortestPathEngine",
    "reconstruct_path",
    "Edge",
    "PathResult",
    "AllPathsResult",
    "PathEngineError",
    "ConstructionError",
    "InvalidWeightError",
    "UnknownVertexError",
    "QueryCancelledError",
    "GraphError",
]
