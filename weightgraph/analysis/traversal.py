"""
Breadth-first and depth-first traversal of a weighted graph.
"""

import logging
from collections import deque
from typing import List

from ..classes.exceptions import GraphEmptyError
from ..classes.vertex import pyvertex
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphTraverser:
    """
    Traversal algorithms starting from the graph root.

    Both traversals mark a vertex visited when it is discovered, so each
    reachable vertex is reported exactly once and the root itself is never
    reported. Unreachable vertices are omitted.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the traverser.

        Args:
            graph: WeightedGraph instance to traverse
        """
        self.graph = graph

    def bfs(self) -> List[pyvertex]:
        """
        Breadth-first traversal from the root.

        Returns:
            Newly discovered vertices in level order

        Raises:
            GraphEmptyError: If the graph has no root
        """
        root = self._require_root("bfs")
        visited = {root.lVertexID}
        result = []
        queue = deque([root])

        while queue:
            current = queue.popleft()
            for edge in self.graph.get_edges(current):
                target = edge.target
                if target.lVertexID not in visited:
                    visited.add(target.lVertexID)
                    result.append(target)
                    queue.append(target)

        logger.info(f"BFS from {root.name!r} discovered {len(result)} vertices")
        return result

    def dfs(self) -> List[pyvertex]:
        """
        Depth-first traversal from the root using an explicit stack.

        Returns:
            Newly discovered vertices in discovery order

        Raises:
            GraphEmptyError: If the graph has no root
        """
        root = self._require_root("dfs")
        visited = {root.lVertexID}
        result = []
        stack = [root]

        while stack:
            current = stack.pop()
            for edge in self.graph.get_edges(current):
                target = edge.target
                if target.lVertexID not in visited:
                    visited.add(target.lVertexID)
                    result.append(target)
                    stack.append(target)

        logger.info(f"DFS from {root.name!r} discovered {len(result)} vertices")
        return result

    def _require_root(self, operation: str) -> pyvertex:
        if self.graph.root is None:
            raise GraphEmptyError(f"{operation} requires a non-empty graph")
        return self.graph.root
