"""Shared fixtures for the pathengine test suite."""

import pytest

from pathengine.config import reset_config
from pathengine.container import reset_container
from pathengine.graph import GraphModel


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def weighted_graph() -> GraphModel:
    """A->B(4), A->C(2), B->E(3), C->D(2), C->B(1), D->E(3)."""
    return GraphModel.build(
        ["A", "B", "C", "D", "E"],
        [
            ("A", "B", 4),
            ("A", "C", 2),
            ("B", "E", 3),
            ("C", "D", 2),
            ("C", "B", 1),
            ("D", "E", 3),
        ],
    )


@pytest.fixture
def disconnected_graph() -> GraphModel:
    """A->B(1), C->D(1)."""
    return GraphModel.build(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 1)])


@pytest.fixture
def diamond_graph() -> GraphModel:
    """A->B(1), A->C(4), B->C(2), B->D(5), C->D(1)."""
    return GraphModel.build(
        ["A", "B", "C", "D"],
        [
            ("A", "B", 1),
            ("A", "C", 4),
            ("B", "C", 2),
            ("B", "D", 5),
            ("C", "D", 1),
        ],
    )


@pytest.fixture
def city_graph() -> GraphModel:
    """Small road network between everyday places."""
    return GraphModel.build(
        ["Home", "Work", "Gym", "Store", "Park", "School"],
        [
            ("Home", "Work", 10),
            ("Home", "Store", 5),
            ("Store", "Work", 3),
            ("Store", "Gym", 4),
            ("Gym", "Work", 2),
            ("Work", "Park", 6),
            ("Park", "School", 3),
            ("Gym", "School", 8),
            ("Home", "Park", 15),
        ],
    )
