"""Pytest configuration and shared fixtures for costgraph tests.

This module provides:
- The undirected and directed sample graphs used across test modules
- A fresh configuration for every test
"""

import pytest

from costgraph import get_config, new_directed_graph, new_undirected_graph, pyedge, reset_config


UNDIRECTED_EDGES = [
    ("a", "b", 3),
    ("b", "c", 5),
    ("a", "c", 8),
    ("a", "d", 1),
    ("d", "e", 10),
    ("e", "c", 4),
    ("c", "d", 6),
]

DAG_EDGES = [
    ("5", "11", 3),
    ("5", "7", 4),
    ("11", "2", 5),
    ("11", "9", 7),
    ("11", "10", 10),
    ("7", "11", 1),
    ("7", "8", 2),
    ("8", "9", 4),
    ("3", "8", 6),
    ("3", "10", 2),
    ("9", "13", 3),
]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Make every test start from the default configuration."""
    monkeypatch.delenv("COSTGRAPH_MAX_SHORTEST_PATHS", raising=False)
    reset_config()
    yield get_config()
    reset_config()


@pytest.fixture
def undirected_graph():
    graph = new_undirected_graph()
    for node, neighbor, cost in UNDIRECTED_EDGES:
        graph.add_with_cost_both(pyedge(node, neighbor, cost))
    return graph


@pytest.fixture
def dag():
    graph = new_directed_graph()
    for node, neighbor, cost in DAG_EDGES:
        graph.add_with_cost(pyedge(node, neighbor, cost))
    return graph
