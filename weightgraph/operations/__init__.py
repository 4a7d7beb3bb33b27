"""
Ordering operations on directed graphs.
"""

from .topology import TopologicalSorter, VertexState

__all__ = ['TopologicalSorter', 'VertexState']
