"""Tests for CSVGraphRepository."""

from pathlib import Path

import pytest

from pathengine.adapters.graph import CSVGraphRepository
from pathengine.config import GraphConfig
from pathengine.domain.errors import ConstructionError, GraphError, InvalidWeightError

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _write(directory: Path, vertices: str, edges: str) -> GraphConfig:
    (directory / "vertices.csv").write_text(vertices, encoding="utf-8")
    (directory / "edges.csv").write_text(edges, encoding="utf-8")
    return GraphConfig(data_dir=directory)


def test_bundled_data_loads_every_vertex():
    repository = CSVGraphRepository(GraphConfig(data_dir=DATA_DIR))

    graph = repository.load()

    with (DATA_DIR / "vertices.csv").open(encoding="utf-8") as f:
        f.readline()
        vertex_ids = [line.split(",")[0] for line in f if line.strip()]

    assert list(graph.vertices()) == vertex_ids
    assert graph.edge_count == 9


def test_load_builds_directed_edges_in_file_order(tmp_path):
    config = _write(
        tmp_path,
        "vertex_id\nA\nB\nC\n",
        "from_vertex_id,to_vertex_id,weight\nA,C,2.5\nA,B,1\n",
    )

    graph = CSVGraphRepository(config).load()

    assert graph.neighbors("A") == (("C", 2.5), ("B", 1.0))
    assert graph.neighbors("B") == ()


def test_load_is_cached_until_cleared(tmp_path):
    config = _write(tmp_path, "vertex_id\nA\n", "from_vertex_id,to_vertex_id,weight\n")
    repository = CSVGraphRepository(config)

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first


def test_list_vertices(tmp_path):
    config = _write(tmp_path, "vertex_id\nX\nY\n", "from_vertex_id,to_vertex_id,weight\n")

    assert list(CSVGraphRepository(config).list_vertices()) == ["X", "Y"]


def test_blank_rows_are_skipped(tmp_path, caplog):
    config = _write(
        tmp_path,
        "vertex_id\nA\n \nB\n",
        "from_vertex_id,to_vertex_id,weight\nA,B,\nA,B,3\n",
    )

    with caplog.at_level("WARNING"):
        graph = CSVGraphRepository(config).load()

    assert graph.vertices() == ("A", "B")
    assert graph.neighbors("A") == (("B", 3.0),)
    assert "Skipping incomplete edge row" in caplog.text


def test_missing_file_raises_graph_error(tmp_path):
    repository = CSVGraphRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as exc_info:
        repository.load()

    assert exc_info.value.file_path == str(tmp_path / "vertices.csv")
    assert isinstance(exc_info.value.cause, OSError)


def test_missing_column_raises_graph_error(tmp_path):
    config = _write(tmp_path, "id\nA\n", "from_vertex_id,to_vertex_id,weight\n")

    with pytest.raises(GraphError, match="vertex_id"):
        CSVGraphRepository(config).load()


def test_non_numeric_weight_raises_graph_error(tmp_path):
    config = _write(
        tmp_path,
        "vertex_id\nA\nB\n",
        "from_vertex_id,to_vertex_id,weight\nA,B,fast\n",
    )

    with pytest.raises(GraphError, match="line 2"):
        CSVGraphRepository(config).load()


def test_edge_to_unknown_vertex_raises_construction_error(tmp_path):
    config = _write(
        tmp_path,
        "vertex_id\nA\n",
        "from_vertex_id,to_vertex_id,weight\nA,B,1\n",
    )

    with pytest.raises(ConstructionError):
        CSVGraphRepository(config).load()


def test_negative_weight_raises_invalid_weight_error(tmp_path):
    config = _write(
        tmp_path,
        "vertex_id\nA\nB\n",
        "from_vertex_id,to_vertex_id,weight\nA,B,-4\n",
    )

    with pytest.raises(InvalidWeightError):
        CSVGraphRepository(config).load()


def test_duplicate_vertex_raises_construction_error(tmp_path):
    config = _write(tmp_path, "vertex_id\nA\nA\n", "from_vertex_id,to_vertex_id,weight\n")

    with pytest.raises(ConstructionError):
        CSVGraphRepository(config).load()
