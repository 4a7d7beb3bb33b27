"""
Adjacency entry for the weighted graph.
"""

from typing import NamedTuple

from .vertex import pyvertex


class pyedge(NamedTuple):
    """Weighted connection toward a target vertex, stored per source vertex."""

    target: pyvertex
    weight: int

    def __repr__(self):
        return f"pyedge(target={self.target.name!r}, weight={self.weight})"
