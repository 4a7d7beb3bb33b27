"""
Core data classes for weighted graph representation.

This module contains the fundamental data structures used throughout
the weightgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .utils import IndexedPriorityQueue

__all__ = [
    'pyvertex',
    'pyedge',
    'IndexedPriorityQueue',
]
