"""Exception types raised by :mod:`weightgraph`."""

from typing import List, Optional


class GraphError(Exception):
    """Base class for all package-specific errors."""


class AllocationError(GraphError, MemoryError):
    """Raised when inserting a vertex or edge runs out of memory."""


class GraphEmptyError(GraphError, ValueError):
    """Raised when a traversal is requested on a graph without a root."""


class VertexNotFound(GraphError, KeyError):
    """Raised when a vertex name is not present in the graph."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"vertex {self.name!r} not found"


class NegativeWeightError(GraphError, ValueError):
    """Raised when an edge is given a negative weight."""


class CycleDetected(GraphError):
    """
    Raised by topological sorting when the graph contains a cycle.

    Attributes:
        partial_order: Vertices finished before the cycle was found, in the
            same orientation as a successful result
        vertex: The vertex reached again while still in progress
    """

    def __init__(self, partial_order: List, vertex: Optional[object] = None):
        name = getattr(vertex, "name", vertex)
        super().__init__(f"cycle detected at vertex {name!r}")
        self.partial_order = partial_order
        self.vertex = vertex


__all__ = [
    "GraphError",
    "AllocationError",
    "GraphEmptyError",
    "VertexNotFound",
    "NegativeWeightError",
    "CycleDetected",
]
