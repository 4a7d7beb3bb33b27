"""
Unit tests for topological sorting.
"""

import pytest

from weightgraph import CycleDetected


def names(vertices):
    return [vertex.name for vertex in vertices]


class TestAcyclic:
    """Test ordering of directed acyclic graphs."""

    def test_chain(self, empty_graph):
        empty_graph.add_directed_edge("A", 0, "B", 0, 1)
        empty_graph.add_directed_edge("B", 0, "C", 0, 1)
        assert names(empty_graph.topo_sort()) == ["A", "B", "C"]
        assert empty_graph.connected == 1

    def test_every_edge_respected(self, dressing_dag):
        order = names(dressing_dag.topo_sort())
        position = {name: i for i, name in enumerate(order)}
        assert len(order) == dressing_dag.N
        for vertex in dressing_dag.get_vertices():
            for edge in dressing_dag.get_neighbors(vertex.name):
                assert position[vertex.name] < position[edge.target.name]

    def test_counts_depth_first_trees(self, empty_graph):
        empty_graph.add_directed_edge("A", 0, "B", 0, 1)
        empty_graph.add_directed_edge("C", 0, "D", 0, 1)
        assert names(empty_graph.topo_sort()) == ["C", "D", "A", "B"]
        assert empty_graph.connected == 2

    def test_empty_graph(self, empty_graph):
        assert empty_graph.topo_sort() == []
        assert empty_graph.connected == 0

    def test_deep_chain(self, empty_graph):
        for i in range(5000):
            empty_graph.add_directed_edge(f"v{i}", i, f"v{i + 1}", i + 1, 1)
        order = names(empty_graph.topo_sort())
        assert order[0] == "v0"
        assert order[-1] == "v5000"


class TestCycles:
    """Test cycle detection."""

    def test_directed_cycle(self, empty_graph):
        empty_graph.add_directed_edge("A", 0, "B", 0, 1)
        empty_graph.add_directed_edge("B", 0, "C", 0, 1)
        empty_graph.add_directed_edge("C", 0, "A", 0, 1)
        with pytest.raises(CycleDetected) as excinfo:
            empty_graph.topo_sort()
        assert excinfo.value.partial_order == []
        assert excinfo.value.vertex.name == "A"

    def test_partial_order_kept(self, empty_graph):
        empty_graph.add_directed_edge("A", 0, "B", 0, 1)
        empty_graph.add_directed_edge("C", 0, "D", 0, 1)
        empty_graph.add_directed_edge("D", 0, "C", 0, 1)
        with pytest.raises(CycleDetected) as excinfo:
            empty_graph.topo_sort()
        assert names(excinfo.value.partial_order) == ["A", "B"]
        assert empty_graph.connected == 1

    def test_undirected_edge_is_a_cycle(self, empty_graph):
        empty_graph.add_edge("A", 0, "B", 0, 1)
        with pytest.raises(CycleDetected):
            empty_graph.topo_sort()

    def test_self_loop_is_a_cycle(self, empty_graph):
        empty_graph.add_directed_edge("A", 0, "A", 0, 1)
        with pytest.raises(CycleDetected):
            empty_graph.topo_sort()
