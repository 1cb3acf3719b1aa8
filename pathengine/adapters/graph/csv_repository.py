"""CSV Graph Repository adapter.

Loads a GraphModel from two CSV files:

- vertices file with a ``vertex_id`` column;
- edges file with ``from_vertex_id``, ``to_vertex_id`` and ``weight``
  columns, one directed edge per row, in file order.

Rows with a blank field are skipped with a warning. Integrity problems
(duplicate ids, edges to unknown vertices, negative weights) are left to
``GraphModel.build`` and surface as its construction errors.
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Edge, VertexId
from ...graph.model import GraphModel


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    Implements GraphRepositoryPort. The graph is read once and kept
    until clear_cache() is called.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    _graph: Optional[GraphModel] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphModel:
        """Load the graph from CSV files.

        Returns:
            The immutable graph model.

        Raises:
            GraphError: If a file cannot be read or a weight is not a number.
            ConstructionError: If the data does not form a valid graph.
        """
        with self._lock:
            if self._graph is not None:
                return self._graph

            self._logger.debug(
                "Loading graph",
                extra={
                    "vertices_path": str(self.config.vertices_path),
                    "edges_path": str(self.config.edges_path),
                },
            )

            vertices = self._read_vertices()
            edges = self._read_edges()
            graph = GraphModel.build(vertices, edges)

            self._graph = graph
            self._logger.info(
                "Graph loaded",
                extra={"vertices": len(graph), "edges": graph.edge_count},
            )
            return graph

    def list_vertices(self) -> Sequence[VertexId]:
        """List all vertex ids in file order."""
        return self.load().vertices()

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        with self._lock:
            self._graph = None
        self._logger.debug("Graph cache cleared")

    def _read_vertices(self) -> List[str]:
        path = self.config.vertices_path
        vertices: List[str] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(reader, ("vertex_id",), str(path))
                for line, row in enumerate(reader, start=2):
                    vertex_id = (row.get("vertex_id") or "").strip()
                    if not vertex_id:
                        self._logger.warning(
                            "Skipping vertex row with blank id",
                            extra={"file_path": str(path), "line": line},
                        )
                        continue
                    vertices.append(vertex_id)
        except OSError as e:
            raise GraphError(
                f"Failed to read vertices from {path}",
                file_path=str(path),
                cause=e,
            )
        return vertices

    def _read_edges(self) -> List[Edge]:
        path = self.config.edges_path
        edges: List[Edge] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(
                    reader, ("from_vertex_id", "to_vertex_id", "weight"), str(path)
                )
                for line, row in enumerate(reader, start=2):
                    source = (row.get("from_vertex_id") or "").strip()
                    target = (row.get("to_vertex_id") or "").strip()
                    weight_str = (row.get("weight") or "").strip()

                    if not source or not target or not weight_str:
                        self._logger.warning(
                            "Skipping incomplete edge row",
                            extra={"file_path": str(path), "line": line},
                        )
                        continue

                    try:
                        weight = float(weight_str)
                    except ValueError as e:
                        raise GraphError(
                            f"Invalid weight {weight_str!r} on line {line} of {path}",
                            file_path=str(path),
                            cause=e,
                        )
                    edges.append(Edge(source, target, weight))
        except OSError as e:
            raise GraphError(
                f"Failed to read edges from {path}",
                file_path=str(path),
                cause=e,
            )
        return edges

    @staticmethod
    def _require_columns(
        reader: csv.DictReader, columns: Sequence[str], file_path: str
    ) -> None:
        missing = [c for c in columns if c not in (reader.fieldnames or ())]
        if missing:
            raise GraphError(
                f"Missing column(s) {', '.join(missing)} in {file_path}",
                file_path=file_path,
            )
