"""
Tests for the Graph base class using a minimal alternative storage.
"""

from collections import OrderedDict
from typing import List

import pytest

from graph import AdjacencyTable, Graph, NodeNotInGraph


class RecordingGraph(Graph):
    """
    Graph variant that only supplies storage, and counts accessor calls.
    """

    def __init__(self) -> None:
        self._table: AdjacencyTable = OrderedDict()
        self.calls: List[str] = []

    def adjacency_table_mutable(self) -> AdjacencyTable:
        self.calls.append("mutable")
        return self._table

    def adjacency_table(self) -> AdjacencyTable:
        self.calls.append("read")
        return self._table


def test_graph_is_abstract():
    with pytest.raises(TypeError):
        Graph()  # type: ignore[abstract]


def test_operations_work_through_accessors_only():
    g = RecordingGraph()

    assert g.add_node("a") is True
    g.add_edge(("a", "b", 2))
    g.add_edge(("b", "c", 3))

    assert g.nodes() == {"a", "b", "c"}
    assert g.neighbours("b") == [("c", 3)]
    assert g.contains("c")
    assert len(g) == 3
    assert "mutable" in g.calls and "read" in g.calls


def test_edges_follow_table_order():
    g = RecordingGraph()
    g.add_edge(("x", "y", 1))
    g.add_edge(("y", "x", 2))
    g.add_edge(("x", "z", 3))

    assert g.edges() == [("x", "y", 1), ("x", "z", 3), ("y", "x", 2)]


def test_queries_do_not_mutate():
    g = RecordingGraph()
    g.add_node("a")
    g.calls.clear()

    g.contains("missing")
    g.nodes()
    g.edges()
    with pytest.raises(NodeNotInGraph):
        g.neighbours("missing")

    assert "mutable" not in g.calls
    assert g.nodes() == {"a"}
