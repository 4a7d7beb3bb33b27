"""
Graph analysis modules for traversal, path finding and spanning trees.
"""

from .traversal import GraphTraverser
from .pathfinding import PathFinder
from .spanning import SpanningTreeBuilder

__all__ = ['GraphTraverser', 'PathFinder', 'SpanningTreeBuilder']
