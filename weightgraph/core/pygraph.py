"""
Main facade class for weighted graph analysis.

This module provides the pygraph class that owns a graph store and delegates
every algorithm to a specialized component.
"""

import logging
import sys
from typing import Generic, List, Optional, TextIO, Tuple, TypeVar

import numpy as np

from .. import config
from ..classes.edge import pyedge
from ..classes.vertex import pyvertex
from .graph import WeightedGraph
from ..analysis.traversal import GraphTraverser
from ..analysis.pathfinding import PathFinder
from ..analysis.spanning import SpanningTreeBuilder
from ..operations.topology import TopologicalSorter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class pygraph(Generic[T]):
    """
    Main facade class for weighted graph analysis.

    A pygraph is created empty, grows by vertex and edge insertion, and is
    analyzed by traversal, ordering, shortest path and spanning tree
    algorithms. Algorithms never modify the graph.

    Example:
        >>> graph = pygraph[int]()
        >>> graph.add_edge("A", 10, "B", 20, 1)
        >>> [vertex.name for vertex in graph.bfs()]
        ['B']
    """

    def __init__(self, unreachable: float = config.UNREACHABLE_DISTANCE):
        """
        Initialize an empty graph.

        Args:
            unreachable: Sentinel distance used by shortest path and spanning tree
        """
        # Initialize core graph
        self._graph: WeightedGraph[T] = WeightedGraph()

        # Initialize analysis components
        self._traverser = GraphTraverser(self._graph)
        self._pathfinder = PathFinder(self._graph, unreachable)
        self._spanning = SpanningTreeBuilder(self._graph, unreachable)

        # Initialize operation components
        self._topology = TopologicalSorter(self._graph)

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, name) -> bool:
        return name in self._graph

    def __repr__(self):
        return f"pygraph(N={self.N}, root={self.root.name if self.root else None!r})"

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    @property
    def N(self) -> int:
        """Number of vertices in the graph."""
        return self._graph.N

    @property
    def root(self) -> Optional[pyvertex]:
        """First vertex ever inserted, None while the graph is empty."""
        return self._graph.root

    @property
    def connected(self) -> int:
        """Number of depth-first trees found by the last topological sort."""
        return self._topology.connected

    def add_vertex(self, name: str, data: T) -> pyvertex:
        """Insert a vertex unless the name already exists."""
        return self._graph.add_vertex(name, data)

    def add_edge(self, name1: str, data1: T, name2: str, data2: T, weight: int):
        """Insert an undirected edge, creating missing endpoints."""
        self._graph.add_undirected_edge(name1, data1, name2, data2, weight)

    def add_undirected_edge(self, name1: str, data1: T, name2: str, data2: T, weight: int):
        """Insert reciprocal adjacency entries between two vertices."""
        self._graph.add_undirected_edge(name1, data1, name2, data2, weight)

    def add_directed_edge(self, name1: str, data1: T, name2: str, data2: T, weight: int):
        """Insert a single adjacency entry from name1 toward name2."""
        self._graph.add_directed_edge(name1, data1, name2, data2, weight)

    def has_vertex(self, name: str) -> bool:
        return self._graph.has_vertex(name)

    def get_vertex(self, name: str) -> pyvertex:
        """Get a vertex by name, raising VertexNotFound if absent."""
        return self._graph.get_vertex(name)

    def get_vertices(self) -> List[pyvertex]:
        """Get all vertices in insertion order."""
        return self._graph.get_vertices()

    def get_neighbors(self, name: str) -> List[pyedge]:
        """Get the adjacency entries of a vertex in insertion order."""
        return self._graph.get_neighbors(name)

    def get_edge_count(self) -> int:
        """Number of stored adjacency entries."""
        return self._graph.get_edge_count()

    def to_weight_matrix(self) -> np.ndarray:
        """Dense weight matrix with inf for missing edges."""
        return self._graph.to_weight_matrix()

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        self._graph.dump(out)

    def destroy(self):
        """Release every vertex and edge owned by the graph."""
        self._graph.clear()
        self._topology.connected = 0

    # ========================================================================
    # TRAVERSAL & ORDERING
    # ========================================================================

    def bfs(self) -> List[pyvertex]:
        """Breadth-first traversal from the root, root excluded."""
        return self._traverser.bfs()

    def dfs(self) -> List[pyvertex]:
        """Depth-first traversal from the root, root excluded."""
        return self._traverser.dfs()

    def topo_sort(self) -> List[pyvertex]:
        """Topological order of a directed graph, raising CycleDetected on a cycle."""
        return self._topology.topo_sort()

    # ========================================================================
    # PATH FINDING & SPANNING TREE
    # ========================================================================

    def dijkstra(self, src: str, dst: str) -> List[Tuple[str, int]]:
        """Shortest path as (name, distance) pairs from dst back to src."""
        return self._pathfinder.dijkstra(src, dst)

    def shortest_distance(self, src: str, dst: str) -> Optional[int]:
        """Shortest distance from src to dst, or None if there is no path."""
        return self._pathfinder.shortest_distance(src, dst)

    def find_all_paths(self, src: str, dst: str,
                       max_depth: int = config.DEFAULT_MAX_PATH_DEPTH) -> List[Tuple[List[str], int]]:
        """All simple paths from src to dst with their total weights."""
        return self._pathfinder.find_all_paths(src, dst, max_depth)

    def prim(self, src: str) -> List[List[pyvertex]]:
        """Minimum spanning tree from src as root-to-leaf chains."""
        return self._spanning.prim(src)

    def spanning_edges(self, src: str) -> List[Tuple[str, str, int]]:
        """Minimum spanning tree from src as (parent, child, weight) edges."""
        return self._spanning.spanning_edges(src)

    def spanning_weight(self, src: str) -> int:
        """Total weight of the minimum spanning tree from src."""
        return self._spanning.spanning_weight(src)
