"""
weightgraph - Weighted Graph Algorithms Library

A small embeddable Python library holding an in-memory weighted graph with a
fixed family of classical algorithms: breadth-first and depth-first traversal,
topological ordering with cycle detection, Dijkstra's shortest path and Prim's
minimum spanning tree.

Main Classes:
    pygraph: Main class for building and analyzing a graph (facade)
    pyvertex: Vertex representation in the graph
    pyedge: Weighted adjacency entry

Example:
    >>> from weightgraph import pygraph
    >>> graph = pygraph()
    >>> graph.add_edge("A", 1, "B", 2, 5)
    >>> graph.dijkstra("A", "B")
    [('B', 5), ('A', 0)]
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from weightgraph.classes.vertex import pyvertex
from weightgraph.classes.edge import pyedge
from weightgraph.classes.exceptions import (
    AllocationError,
    CycleDetected,
    GraphEmptyError,
    GraphError,
    NegativeWeightError,
    VertexNotFound,
)
from weightgraph.core.pygraph import pygraph

__all__ = [
    'pygraph',
    'pyvertex',
    'pyedge',
    'GraphError',
    'AllocationError',
    'GraphEmptyError',
    'VertexNotFound',
    'NegativeWeightError',
    'CycleDetected',
]
