"""
Core graph data structures and management.

This module contains the graph store and the facade built on top of it.
"""

from .graph import WeightedGraph
from .pygraph import pygraph

__all__ = ['WeightedGraph', 'pygraph']
