"""
Unit tests for Prim's minimum spanning tree.
"""

import itertools
import random
import sys

import pytest

from weightgraph import pygraph


def names(segments):
    return [[vertex.name for vertex in segment] for segment in segments]


def brute_force_mst_weight(graph: pygraph) -> int:
    """Lowest weight over every (n-1)-edge subset that connects all vertices."""
    vertices = [vertex.name for vertex in graph.get_vertices()]
    edges = {}
    for name in vertices:
        for edge in graph.get_neighbors(name):
            key = tuple(sorted((name, edge.target.name)))
            if key[0] != key[1]:
                edges[key] = min(edges.get(key, edge.weight), edge.weight)

    best = None
    for subset in itertools.combinations(edges.items(), len(vertices) - 1):
        parent = {name: name for name in vertices}

        def find(name):
            while parent[name] != name:
                name = parent[name]
            return name

        for (first, second), _ in subset:
            parent[find(first)] = find(second)
        if len({find(name) for name in vertices}) == 1:
            weight = sum(weight for _, weight in subset)
            best = weight if best is None else min(best, weight)
    return best


class TestPrim:
    """Test spanning tree chains."""

    def test_shortcut_graph_chains(self, shortcut_graph):
        assert names(shortcut_graph.prim("A")) == [["A", "B", "C"], ["A", "B", "E", "D"]]

    def test_shortcut_graph_weight(self, shortcut_graph):
        assert shortcut_graph.spanning_edges("A") == [
            ("A", "B", 1),
            ("B", "E", 1),
            ("B", "C", 2),
            ("E", "D", 4),
        ]
        assert shortcut_graph.spanning_weight("A") == 8

    def test_tree_covers_connected_graph(self, shortcut_graph):
        segments = shortcut_graph.prim("A")
        covered = {vertex.name for segment in segments for vertex in segment}
        assert covered == {"A", "B", "C", "D", "E"}
        assert len(shortcut_graph.spanning_edges("A")) == shortcut_graph.N - 1

    def test_every_chain_starts_at_source(self, tree_graph):
        segments = names(tree_graph.prim("C"))
        assert all(segment[0] == "C" for segment in segments)
        assert segments == [["C", "E"], ["C", "A", "B", "D"]]

    def test_path_graph_single_chain(self, path_graph):
        assert names(path_graph.prim("A")) == [["A", "B", "C", "D", "E"]]

    def test_isolated_source(self, empty_graph):
        empty_graph.add_vertex("Z", 0)
        assert names(empty_graph.prim("Z")) == [["Z"]]
        assert empty_graph.spanning_edges("Z") == []

    def test_unknown_source_returns_empty(self, path_graph):
        assert path_graph.prim("missing") == []
        assert path_graph.spanning_edges("missing") == []
        assert path_graph.spanning_weight("missing") == 0

    def test_only_source_component_spanned(self, path_graph):
        path_graph.add_edge("X", 0, "Y", 0, 1)
        covered = {vertex.name for segment in path_graph.prim("A") for vertex in segment}
        assert covered == {"A", "B", "C", "D", "E"}

    def test_self_loop_ignored(self, triangle_graph):
        assert triangle_graph.spanning_weight("A") == 3


class TestAgainstBruteForce:
    """Compare Prim with exhaustive subset search on small graphs."""

    @pytest.mark.parametrize("seed", range(5))
    def test_minimum_weight(self, seed):
        rng = random.Random(seed)
        graph = pygraph[int]()
        nVertex = 6
        for i in range(1, nVertex):
            graph.add_edge(f"v{rng.randrange(i)}", 0, f"v{i}", 0, rng.randint(1, 9))
        for _ in range(4):
            first, second = rng.sample(range(nVertex), 2)
            graph.add_edge(f"v{first}", 0, f"v{second}", 0, rng.randint(1, 9))

        assert graph.spanning_weight("v0") == brute_force_mst_weight(graph)
        covered = {vertex.name for segment in graph.prim("v0") for vertex in segment}
        assert len(covered) == nVertex


class TestLargeWeights:
    """Weights are unbounded integers and never collide with the unreached marker."""

    def test_edge_of_maxsize_joins_tree(self, empty_graph):
        empty_graph.add_edge("A", 0, "B", 0, sys.maxsize)
        assert names(empty_graph.prim("A")) == [["A", "B"]]
        assert empty_graph.spanning_weight("A") == sys.maxsize

    def test_weights_beyond_maxsize(self, empty_graph):
        empty_graph.add_edge("A", 0, "B", 0, 2 * sys.maxsize)
        empty_graph.add_edge("B", 0, "C", 0, 3 * sys.maxsize)
        empty_graph.add_edge("A", 0, "C", 0, 4 * sys.maxsize)
        assert names(empty_graph.prim("A")) == [["A", "B", "C"]]
        assert empty_graph.spanning_weight("A") == 5 * sys.maxsize
