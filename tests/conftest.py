"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from config import VisualizerConfig
from graph import GraphStore
from main import create_app


@pytest.fixture
def store() -> GraphStore:
    """Return an empty graph store."""
    return GraphStore()


@pytest.fixture
def chain_store() -> GraphStore:
    """A-B-C-D chain plus a direct A-D shortcut, every distance 1."""
    s = GraphStore()
    s.add_path("A", "B", 1)
    s.add_path("B", "C", 1)
    s.add_path("C", "D", 1)
    s.add_path("A", "D", 1)
    return s


@pytest.fixture
def weighted_store() -> GraphStore:
    """Two cheap hops beat one expensive direct path: A-B 5, B-C 5, A-C 100."""
    s = GraphStore()
    s.add_path("A", "B", 5)
    s.add_path("B", "C", 5)
    s.add_path("A", "C", 100)
    return s


@pytest.fixture
def diamond_store() -> GraphStore:
    """A-B, A-C, B-D, C-D: two equally short routes from A to D."""
    s = GraphStore()
    s.add_path("A", "B", 1)
    s.add_path("A", "C", 1)
    s.add_path("B", "D", 1)
    s.add_path("C", "D", 1)
    return s


@pytest.fixture
def config() -> VisualizerConfig:
    """Deterministic config: fixed layout seed and secret key."""
    return VisualizerConfig(layout_seed=7, secret_key="test-secret")


@pytest.fixture
def app(config: VisualizerConfig):
    flask_app = create_app(config)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def branch_store() -> GraphStore:
    """A-B, A-C, C-T: only the second branch out of A reaches T."""
    s = GraphStore()
    s.add_path("A", "B", 1)
    s.add_path("A", "C", 1)
    s.add_path("C", "T", 1)
    return s
