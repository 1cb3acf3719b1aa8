"""Tests for the command-line entry point and logging setup."""

import json
import logging
from pathlib import Path

import pytest

from pathengine.cli import main
from pathengine.config import ObservabilityConfig
from pathengine.observability import JsonFormatter, configure_logging

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def restore_pathengine_logger():
    logger = logging.getLogger("pathengine")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_route_command(capsys):
    code = main(["--data-dir", str(DATA_DIR), "route", "Home", "Work"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Home -> Work: distance = 8, path = Home -> Store -> Work" in out


def test_routes_command(capsys):
    code = main(["--data-dir", str(DATA_DIR), "routes", "Home"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("All shortest paths from Home:")
    assert "To Work: distance = 8, path = Home -> Store -> Work" in out
    assert "To School: distance = 17" in out


def test_unreachable_route(capsys, tmp_path):
    (tmp_path / "vertices.csv").write_text("vertex_id\nA\nB\n", encoding="utf-8")
    (tmp_path / "edges.csv").write_text(
        "from_vertex_id,to_vertex_id,weight\nB,A,1\n", encoding="utf-8"
    )

    code = main(["--data-dir", str(tmp_path), "route", "A", "B"])

    assert code == 0
    assert "No path from A to B" in capsys.readouterr().out


def test_unknown_vertex_exits_with_error(capsys):
    code = main(["--data-dir", str(DATA_DIR), "route", "Home", "Moon"])

    assert code == 2
    assert "Vertex not in graph: 'Moon'" in capsys.readouterr().err


def test_missing_data_exits_with_error(capsys, tmp_path):
    code = main(["--data-dir", str(tmp_path), "routes", "Home"])

    assert code == 2
    assert "Failed to read vertices" in capsys.readouterr().err


def test_configure_logging_replaces_its_own_handler():
    logger = logging.getLogger("pathengine")

    first = configure_logging(ObservabilityConfig(level="debug"))
    second = configure_logging(ObservabilityConfig())

    assert first not in logger.handlers
    assert second in logger.handlers
    assert logger.level == logging.INFO


def test_structured_logging_emits_extra_fields():
    handler = configure_logging(ObservabilityConfig(structured=True))
    assert isinstance(handler.formatter, JsonFormatter)

    record = logging.LogRecord(
        "pathengine.test", logging.INFO, __file__, 1, "Route found", None, None
    )
    record.start = "A"
    record.distance = 6.0

    payload = json.loads(handler.formatter.format(record))

    assert payload["message"] == "Route found"
    assert payload["level"] == "INFO"
    assert payload["start"] == "A"
    assert payload["distance"] == 6.0
