import pytest

from graphwalk.graph import IndexedDiGraph, IndexedGraph, LabelGraph
from graphwalk.graph.protocols import is_indexed
from graphwalk.types import Edge


def test_protocol_membership(weighted_dag_indexed):
    assert isinstance(weighted_dag_indexed, LabelGraph)
    assert isinstance(weighted_dag_indexed, IndexedGraph)
    assert is_indexed(weighted_dag_indexed)


def test_counts(weighted_dag_indexed):
    assert weighted_dag_indexed.number_of_nodes == 4
    assert weighted_dag_indexed.number_of_edges == 4
    assert list(weighted_dag_indexed.nodes()) == [0, 1, 2, 3]


def test_constructor_validation():
    with pytest.raises(ValueError):
        IndexedDiGraph(-1)
    with pytest.raises(ValueError):
        IndexedDiGraph(2, labels=["only one"])


def test_labels():
    g = IndexedDiGraph(2, labels=["x", "y"])
    assert g.node_label(1) == "y"
    g.set_node_label(1, "z")
    assert g.node_label(1) == "z"
    assert IndexedDiGraph(1).node_label(0) is None


@pytest.mark.parametrize("bad", [4, -1, "A", True, 1.0])
def test_bad_index_raises(weighted_dag_indexed, bad):
    with pytest.raises(IndexError):
        weighted_dag_indexed.neighbors(bad)
    with pytest.raises(IndexError):
        weighted_dag_indexed.contains_edge(0, bad)
    with pytest.raises(IndexError):
        weighted_dag_indexed.add_edge(bad, 0)


def test_edge_queries(weighted_dag_indexed):
    assert weighted_dag_indexed.out_edges(0) == [Edge(0, 1, 1), Edge(0, 2, 5)]
    assert weighted_dag_indexed.parents(2) == [1, 0]
    assert weighted_dag_indexed.get_edge_label(1, 2) == 2
    assert weighted_dag_indexed.try_get_edge(2, 1) is None
    with pytest.raises(KeyError):
        weighted_dag_indexed.get_edge_label(3, 0)


def test_duplicate_edge_and_remove(weighted_dag_indexed):
    with pytest.raises(ValueError):
        weighted_dag_indexed.add_edge(0, 1)
    weighted_dag_indexed.remove_edge(0, 1)
    assert weighted_dag_indexed.number_of_edges == 3
    with pytest.raises(ValueError):
        weighted_dag_indexed.remove_edge(0, 1)


def test_transpose_keeps_node_count_and_labels():
    g = IndexedDiGraph(3, labels=["a", "b", "c"])
    g.add_edge(0, 1, 4)
    reverse = g.transpose()
    assert isinstance(reverse, IndexedDiGraph)
    assert reverse.number_of_nodes == 3
    assert reverse.out_edges(1) == [Edge(1, 0, 4)]
    assert reverse.node_label(2) == "c"


def test_undirected_counts_arcs(triangle_indexed_undirected):
    assert triangle_indexed_undirected.number_of_edges == 6
    assert triangle_indexed_undirected.transpose().number_of_edges == 6
