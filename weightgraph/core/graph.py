"""
Core graph data structure for weighted graph representation.

This module provides the fundamental graph store without any algorithms.
"""

import logging
import sys
from typing import Dict, Generic, Iterator, List, Optional, TextIO, TypeVar

import numpy as np

from ..classes.edge import pyedge
from ..classes.exceptions import AllocationError, NegativeWeightError, VertexNotFound
from ..classes.vertex import pyvertex

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WeightedGraph(Generic[T]):
    """
    Core store for a weighted graph.

    This class owns every vertex and adjacency entry. It provides:
    - Name to vertex lookup
    - Stable integer vertex IDs in insertion order
    - Adjacency list maintenance keyed by vertex ID
    - Basic graph queries (neighbors, edge count, weight matrix)

    The store is single-writer: algorithms only read it, and it must not be
    mutated while an algorithm is running.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.root: Optional[pyvertex] = None

        # Vertex mappings
        self.vertices: Dict[str, pyvertex] = {}
        self.id_to_vertex: Dict[int, pyvertex] = {}

        # Graph structure
        self.adjacency_list: Dict[int, List[pyedge]] = {}

        logger.debug("Initializing WeightedGraph")

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, name) -> bool:
        return name in self.vertices

    def __iter__(self) -> Iterator[pyvertex]:
        return iter(self.vertices.values())

    def __repr__(self):
        return f"WeightedGraph(N={self.N}, edges={self.get_edge_count()})"

    @property
    def N(self) -> int:
        """Number of vertices in the graph."""
        return len(self.vertices)

    def add_vertex(self, name: str, data: T) -> pyvertex:
        """
        Insert a vertex unless one with the same name already exists.

        The first vertex ever inserted becomes the root. Inserting an existing
        name leaves the stored vertex and its payload untouched.

        Args:
            name: Unique vertex name
            data: Payload for the vertex

        Returns:
            The stored vertex with that name

        Raises:
            AllocationError: If memory runs out during insertion
        """
        existing = self.vertices.get(name)
        if existing is not None:
            logger.debug(f"Vertex {name!r} already present, keeping original payload")
            return existing

        vertex_id = len(self.id_to_vertex)
        try:
            vertex = pyvertex(name, data, vertex_id)
            self.vertices[name] = vertex
            self.id_to_vertex[vertex_id] = vertex
            self.adjacency_list[vertex_id] = []
        except MemoryError as e:
            self.vertices.pop(name, None)
            self.id_to_vertex.pop(vertex_id, None)
            self.adjacency_list.pop(vertex_id, None)
            raise AllocationError(f"out of memory inserting vertex {name!r}") from e

        if self.root is None:
            self.root = vertex
            logger.debug(f"Set root vertex: {name!r}")

        logger.debug(f"Added vertex {name!r} with ID {vertex_id}")
        return vertex

    def add_directed_edge(self, name1: str, data1: T, name2: str, data2: T, weight: int):
        """
        Append a single adjacency entry from name1 toward name2.

        Missing endpoints are created with the supplied payloads.

        Args:
            name1: Source vertex name
            data1: Payload used if the source is created
            name2: Target vertex name
            data2: Payload used if the target is created
            weight: Non-negative edge weight
        """
        self._check_weight(weight)
        source = self.add_vertex(name1, data1)
        target = self.add_vertex(name2, data2)
        self._append_edge(source, target, weight)
        logger.debug(f"Added directed edge {name1!r} -> {name2!r} (weight {weight})")

    def add_undirected_edge(self, name1: str, data1: T, name2: str, data2: T, weight: int):
        """
        Append reciprocal adjacency entries between name1 and name2.

        A self-loop produces a single entry. Missing endpoints are created with
        the supplied payloads.

        Args:
            name1: First endpoint name
            data1: Payload used if the first endpoint is created
            name2: Second endpoint name
            data2: Payload used if the second endpoint is created
            weight: Non-negative edge weight
        """
        self._check_weight(weight)
        vertex1 = self.add_vertex(name1, data1)
        vertex2 = self.add_vertex(name2, data2)
        self._append_edge(vertex1, vertex2, weight)
        if vertex1 != vertex2:
            try:
                self._append_edge(vertex2, vertex1, weight)
            except AllocationError:
                # Keep the pair symmetric: drop the half already stored
                self.adjacency_list[vertex1.lVertexID].pop()
                raise
        logger.debug(f"Added undirected edge {name1!r} -- {name2!r} (weight {weight})")

    add_edge = add_undirected_edge

    def _check_weight(self, weight: int):
        if weight < 0:
            raise NegativeWeightError(f"edge weight must be non-negative, got {weight}")

    def _append_edge(self, source: pyvertex, target: pyvertex, weight: int):
        try:
            self.adjacency_list[source.lVertexID].append(pyedge(target, weight))
        except MemoryError as e:
            raise AllocationError(
                f"out of memory inserting edge {source.name!r} -> {target.name!r}"
            ) from e

    def has_vertex(self, name: str) -> bool:
        return name in self.vertices

    def get_vertex(self, name: str) -> pyvertex:
        """
        Get a vertex by name.

        Raises:
            VertexNotFound: If no vertex has that name
        """
        try:
            return self.vertices[name]
        except KeyError:
            raise VertexNotFound(name) from None

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        """Get a vertex by its internal graph ID, or None if not found."""
        return self.id_to_vertex.get(vertex_id)

    def get_vertices(self) -> List[pyvertex]:
        """Get all vertices in insertion order."""
        return list(self.vertices.values())

    def get_vertex_count(self) -> int:
        return len(self.vertices)

    def get_edges(self, vertex: pyvertex) -> List[pyedge]:
        """Get the adjacency entries of a stored vertex, in insertion order."""
        return self.adjacency_list[vertex.lVertexID]

    def get_neighbors(self, name: str) -> List[pyedge]:
        """
        Get a copy of the adjacency entries of the named vertex.

        Raises:
            VertexNotFound: If no vertex has that name
        """
        return list(self.get_edges(self.get_vertex(name)))

    def get_edge_count(self) -> int:
        """Number of stored adjacency entries (an undirected edge counts twice)."""
        return sum(len(edges) for edges in self.adjacency_list.values())

    def to_weight_matrix(self) -> np.ndarray:
        """
        Build a dense weight matrix of the graph.

        Rows and columns follow vertex insertion order. Missing edges are inf,
        parallel edges keep the lowest weight.

        Returns:
            Square float array of shape (N, N)
        """
        nVertex = self.N
        aWeight = np.full((nVertex, nVertex), np.inf)
        for vertex_id, edges in self.adjacency_list.items():
            for edge in edges:
                target_id = edge.target.lVertexID
                aWeight[vertex_id, target_id] = min(aWeight[vertex_id, target_id], edge.weight)
        return aWeight

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        out.write(f"Size: {self.N}\n")
        out.write(f"Root: {self.root!r}\n")
        out.write("Vertices:\n")
        for vertex in self.vertices.values():
            out.write(f"  {vertex!r}\n")
        out.write("Graph:\n")
        for vertex_id, edges in self.adjacency_list.items():
            name = self.id_to_vertex[vertex_id].name
            connections = "  ".join(f"{edge.target.name}({edge.weight})" for edge in edges)
            out.write(f"  {name} => {connections}\n")

    def clear(self):
        """Release every vertex and adjacency entry owned by the graph."""
        nVertex = self.N
        self.adjacency_list.clear()
        self.id_to_vertex.clear()
        self.vertices.clear()
        self.root = None
        logger.debug(f"Cleared graph, released {nVertex} vertices")
