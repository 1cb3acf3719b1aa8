"""Graph core - immutable graph model and Dijkstra path-finding.

This subpackage contains the in-memory graph built once from vertex and
edge lists, the priority frontier, the shortest-path engine that runs
on top of them, and path reconstruction from predecessor maps.
"""

from .engine import ShortestPathEngine
from .frontier import PriorityFrontier
from .model import GraphModel
from .reconstruct import reconstruct_path

__all__ = [
    "GraphModel",
    "PriorityFrontier",
    "ShortestPathEngine",
    "reconstruct_path",
]
