"""
Minimum spanning tree construction for weighted graphs (Prim's algorithm).
"""

import logging
from typing import Dict, List, Tuple

from .. import config
from ..classes.exceptions import VertexNotFound
from ..classes.utils import IndexedPriorityQueue
from ..classes.vertex import pyvertex
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class SpanningTreeBuilder:
    """
    Builds the minimum spanning tree of the component containing a source.

    The tree is reported either as root-to-leaf chains (prim) or as a flat
    list of (parent, child, weight) edges (spanning_edges).
    """

    def __init__(self, graph: WeightedGraph, unreachable: float = config.UNREACHABLE_DISTANCE):
        """
        Initialize the spanning tree builder.

        Args:
            graph: WeightedGraph instance to analyze
            unreachable: Sentinel key for vertices no edge has reached yet
        """
        self.graph = graph
        self.unreachable = unreachable

    def prim(self, src: str) -> List[List[pyvertex]]:
        """
        Decompose the minimum spanning tree into root-to-leaf chains.

        Args:
            src: Source vertex name, the root of every chain

        Returns:
            One chain of vertices per tree leaf, leaves in the order they joined
            the tree. A source without edges yields a single one-vertex chain.
            Empty if src is unknown.
        """
        try:
            source = self.graph.get_vertex(src)
        except VertexNotFound as e:
            logger.warning(f"Prim skipped: {e}")
            return []

        order, predecessors, _ = self._grow(source.lVertexID)

        parents = {history[-1] for history in predecessors.values()}
        leaves = [vertex_id for vertex_id in order if vertex_id not in parents]

        segments = []
        for leaf_id in leaves:
            segment = [leaf_id]
            history = predecessors.get(leaf_id)
            while history:
                segment.append(history[-1])
                history = predecessors.get(history[-1])
            segments.append([self.graph.id_to_vertex[vertex_id] for vertex_id in reversed(segment)])

        logger.info(f"Prim from {src!r} spans {len(order)} vertices in {len(segments)} chains")
        return segments

    def spanning_edges(self, src: str) -> List[Tuple[str, str, int]]:
        """
        List the minimum spanning tree edges in the order they were chosen.

        Returns:
            List of (parent name, child name, weight). Empty if src is unknown.
        """
        try:
            source = self.graph.get_vertex(src)
        except VertexNotFound as e:
            logger.warning(f"Prim skipped: {e}")
            return []

        order, predecessors, keys = self._grow(source.lVertexID)
        vertex = self.graph.id_to_vertex
        return [
            (vertex[predecessors[vertex_id][-1]].name, vertex[vertex_id].name, keys[vertex_id])
            for vertex_id in order
            if vertex_id in predecessors
        ]

    def spanning_weight(self, src: str) -> int:
        """Total weight of the minimum spanning tree containing src."""
        return sum(weight for _, _, weight in self.spanning_edges(src))

    def _grow(self, source_id: int) -> Tuple[List[int], Dict[int, List[int]], Dict[int, int]]:
        """
        Run the priority queue loop of Prim's algorithm.

        Every time a vertex offers a cheaper connecting edge to a neighbor, it is
        appended to that neighbor's predecessor list; the last entry is the
        neighbor's tree parent.

        Returns:
            Tuple of (vertex IDs in the order they joined the tree,
            predecessor lists, best connecting edge weight per vertex)
        """
        keys: Dict[int, int] = {}
        queue = IndexedPriorityQueue()
        for vertex_id in self.graph.id_to_vertex:
            keys[vertex_id] = 0 if vertex_id == source_id else self.unreachable
            queue.push(vertex_id, keys[vertex_id])

        order: List[int] = []
        predecessors: Dict[int, List[int]] = {}

        while queue:
            current_id, key = queue.pop()
            if key >= self.unreachable:
                break
            order.append(current_id)

            current = self.graph.id_to_vertex[current_id]
            for edge in self.graph.get_edges(current):
                neighbor_id = edge.target.lVertexID
                if neighbor_id not in queue:
                    continue
                if edge.weight < keys[neighbor_id]:
                    keys[neighbor_id] = edge.weight
                    predecessors.setdefault(neighbor_id, []).append(current_id)
                    queue.decrease_key(neighbor_id, edge.weight)

        return order, predecessors, keys
