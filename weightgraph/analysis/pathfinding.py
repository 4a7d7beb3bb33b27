"""
Path finding for weighted graphs.

This module provides Dijkstra's single-source shortest path and exhaustive
simple path enumeration.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from .. import config
from ..classes.exceptions import VertexNotFound
from ..classes.utils import IndexedPriorityQueue
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for weighted graphs.

    This class provides methods for:
    - Finding the shortest path between two vertices (Dijkstra)
    - Finding all simple paths between two vertices
    """

    def __init__(self, graph: WeightedGraph, unreachable: float = config.UNREACHABLE_DISTANCE):
        """
        Initialize the path finder.

        Args:
            graph: WeightedGraph instance to analyze
            unreachable: Sentinel distance for vertices not reached yet
        """
        self.graph = graph
        self.unreachable = unreachable

    def dijkstra(self, src: str, dst: str) -> List[Tuple[str, int]]:
        """
        Find the shortest path from src to dst.

        The search stops as soon as dst is popped from the queue.

        Args:
            src: Source vertex name
            dst: Destination vertex name

        Returns:
            List of (vertex name, distance from src) pairs ordered from dst back
            to src. Empty if either vertex is unknown or dst is unreachable.
        """
        try:
            source = self.graph.get_vertex(src)
            target = self.graph.get_vertex(dst)
        except VertexNotFound as e:
            logger.warning(f"Dijkstra skipped: {e}")
            return []

        distances, predecessors = self._search(source.lVertexID, target.lVertexID)

        if target.lVertexID != source.lVertexID and target.lVertexID not in predecessors:
            logger.info(f"No path from {src!r} to {dst!r}")
            return []

        path = []
        vertex_id: Optional[int] = target.lVertexID
        while vertex_id is not None:
            path.append((self.graph.id_to_vertex[vertex_id].name, distances[vertex_id]))
            vertex_id = predecessors.get(vertex_id)

        logger.debug(f"Shortest path {src!r} -> {dst!r}: distance {path[0][1]}, {len(path)} vertices")
        return path

    def shortest_distance(self, src: str, dst: str) -> Optional[int]:
        """Finalized distance from src to dst, or None if there is no path."""
        path = self.dijkstra(src, dst)
        return path[0][1] if path else None

    def _search(self, source_id: int, target_id: int) -> Tuple[Dict[int, int], Dict[int, int]]:
        """
        Run the priority queue loop of Dijkstra's algorithm.

        Returns:
            Tuple of (finalized distances, predecessor map) keyed by vertex ID
        """
        tentative: Dict[int, int] = {}
        queue = IndexedPriorityQueue()
        for vertex_id in self.graph.id_to_vertex:
            tentative[vertex_id] = 0 if vertex_id == source_id else self.unreachable
            queue.push(vertex_id, tentative[vertex_id])

        distances: Dict[int, int] = {}
        predecessors: Dict[int, int] = {}
        visited: Set[int] = set()

        while queue:
            current_id, current_distance = queue.pop()
            if current_distance >= self.unreachable:
                break

            distances[current_id] = current_distance
            visited.add(current_id)
            if current_id == target_id:
                break

            current = self.graph.id_to_vertex[current_id]
            for edge in self.graph.get_edges(current):
                neighbor_id = edge.target.lVertexID
                if neighbor_id in visited:
                    continue
                candidate = current_distance + edge.weight
                if candidate < tentative[neighbor_id]:
                    tentative[neighbor_id] = candidate
                    predecessors[neighbor_id] = current_id
                    queue.decrease_key(neighbor_id, candidate)

        logger.debug(f"Dijkstra finalized {len(distances)} vertices")
        return distances, predecessors

    def find_all_paths(self, src: str, dst: str,
                       max_depth: int = config.DEFAULT_MAX_PATH_DEPTH) -> List[Tuple[List[str], int]]:
        """
        Find all simple paths from src to dst using DFS.

        Args:
            src: Source vertex name
            dst: Destination vertex name
            max_depth: Maximum number of edges in a path

        Returns:
            List of (vertex names, total weight) tuples
        """
        if src not in self.graph or dst not in self.graph:
            return []

        paths = []
        source = self.graph.get_vertex(src)
        # Frames of (vertex, path so far, weight so far, visited names)
        stack = [(source, [src], 0, {src})]

        while stack:
            current, path, weight, visited = stack.pop()
            if current.name == dst:
                paths.append((path, weight))
                continue
            if len(path) > max_depth:
                continue
            for edge in reversed(self.graph.get_edges(current)):
                name = edge.target.name
                if name not in visited:
                    stack.append((edge.target, path + [name], weight + edge.weight, visited | {name}))

        return paths
