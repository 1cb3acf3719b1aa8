"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the services and the adapters
that load graphs, solve routes and cache results. They enable
dependency injection and make the services testable.
"""

from .cache import CachePort
from .graph import GraphRepositoryPort, RouteSolverPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Cache
    "CachePort",
]
