"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads a GraphModel from vertex and edge CSV files
- DijkstraRouteSolver: Finds shortest paths using ShortestPathEngine
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver"]
