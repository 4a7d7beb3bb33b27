"""
Topological ordering for weighted graphs.

This module provides three-color depth-first topological sorting with cycle
detection. The ordering is only meaningful for graphs built with directed
edges: every undirected edge is a two-vertex cycle.
"""

import logging
from enum import Enum
from typing import Dict, List

from ..classes.exceptions import CycleDetected
from ..classes.vertex import pyvertex
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class VertexState(Enum):
    """Coloring used by the depth-first driver."""
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class TopologicalSorter:
    """
    Topological sorting of a directed graph.

    Attributes:
        connected: Number of depth-first trees completed by the last sort
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the topological sorter.

        Args:
            graph: WeightedGraph instance to sort
        """
        self.graph = graph
        self.connected = 0

    def topo_sort(self) -> List[pyvertex]:
        """
        Order the vertices so that every edge u -> v has u before v.

        Vertices are visited in insertion order; each one still unvisited starts
        a new depth-first tree.

        Returns:
            Vertices in topological order

        Raises:
            CycleDetected: On the first back edge found. The exception carries the
                order of the vertices finished so far.
        """
        state: Dict[int, VertexState] = {
            vertex_id: VertexState.UNVISITED for vertex_id in self.graph.id_to_vertex
        }
        finished: List[pyvertex] = []
        self.connected = 0

        for vertex_id in self.graph.id_to_vertex:
            if state[vertex_id] is VertexState.UNVISITED:
                self._visit(vertex_id, state, finished)
                self.connected += 1

        logger.info(f"Topological sort ordered {len(finished)} vertices in {self.connected} trees")
        return finished[::-1]

    def _visit(self, start_id: int, state: Dict[int, VertexState], finished: List[pyvertex]):
        """
        Depth-first driver with an explicit stack of (vertex ID, next edge index) frames.

        Finished vertices are appended to finished in post-order.
        """
        state[start_id] = VertexState.IN_PROGRESS
        stack = [(start_id, 0)]

        while stack:
            vertex_id, edge_index = stack[-1]
            edges = self.graph.adjacency_list[vertex_id]

            if edge_index < len(edges):
                stack[-1] = (vertex_id, edge_index + 1)
                neighbor_id = edges[edge_index].target.lVertexID
                neighbor_state = state[neighbor_id]
                if neighbor_state is VertexState.IN_PROGRESS:
                    vertex = self.graph.id_to_vertex[neighbor_id]
                    logger.warning(f"Cycle detected at vertex {vertex.name!r}")
                    raise CycleDetected(finished[::-1], vertex)
                if neighbor_state is VertexState.UNVISITED:
                    state[neighbor_id] = VertexState.IN_PROGRESS
                    stack.append((neighbor_id, 0))
                continue

            stack.pop()
            state[vertex_id] = VertexState.DONE
            finished.append(self.graph.id_to_vertex[vertex_id])
