"""Domain layer - Core result models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConstructionError,
    GraphError,
    InvalidWeightError,
    PathEngineError,
    QueryCancelledError,
    UnknownVertexError,
)
from .models import AllPathsResult, Edge, Path, PathResult, VertexId

__all__ = [
    # Models
    "VertexId",
    "Path",
    "Edge",
    "PathResult",
    "AllPathsResult",
    # Errors
    "PathEngineError",
    "ConstructionError",
    "InvalidWeightError",
    "UnknownVertexError",
    "QueryCancelledError",
    "GraphError",
]
