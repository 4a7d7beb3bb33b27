"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
graph fixtures available to all test files.
"""

import pytest

from weightgraph import pygraph


@pytest.fixture
def empty_graph() -> pygraph:
    """Return a graph with no vertices."""
    return pygraph[int]()


@pytest.fixture
def triangle_graph() -> pygraph:
    """Return the triangle A-B(1), B-C(2), C-A(3) with a self-loop on A."""
    graph = pygraph[int]()
    graph.add_edge("A", 10, "B", 20, 1)
    graph.add_edge("B", 20, "C", 40, 2)
    graph.add_edge("C", 110, "A", 10, 3)
    graph.add_edge("A", 10, "A", 10, 0)
    return graph


@pytest.fixture
def path_graph() -> pygraph:
    """Return the path A-B(1), B-C(2), C-D(5), D-E(4)."""
    graph = pygraph[int]()
    graph.add_edge("A", 1, "B", 2, 1)
    graph.add_edge("B", 2, "C", 3, 2)
    graph.add_edge("C", 3, "D", 4, 5)
    graph.add_edge("D", 4, "E", 5, 4)
    return graph


@pytest.fixture
def shortcut_graph(path_graph) -> pygraph:
    """Return the path graph with an extra B-E(1) shortcut."""
    path_graph.add_edge("B", 2, "E", 5, 1)
    return path_graph


@pytest.fixture
def tree_graph() -> pygraph:
    """Return the tree A-B, A-C, B-D, C-E with unit weights."""
    graph = pygraph[int]()
    graph.add_edge("A", 0, "B", 0, 1)
    graph.add_edge("A", 0, "C", 0, 1)
    graph.add_edge("B", 0, "D", 0, 1)
    graph.add_edge("C", 0, "E", 0, 1)
    return graph


@pytest.fixture
def dressing_dag() -> pygraph:
    """Return a directed acyclic graph of clothing dependencies."""
    graph = pygraph[str]()
    for before, after in [
        ("undershorts", "pants"),
        ("undershorts", "shoes"),
        ("pants", "belt"),
        ("pants", "shoes"),
        ("shirt", "belt"),
        ("shirt", "tie"),
        ("tie", "jacket"),
        ("belt", "jacket"),
        ("socks", "shoes"),
    ]:
        graph.add_directed_edge(before, before, after, after, 1)
    graph.add_vertex("watch", "watch")
    return graph
