import networkx as nx
import pytest

from graphwalk.graph import (
    IndexedDiGraph,
    LabelDiGraph,
    NodeMap,
    from_networkx,
    grid_graph,
    label_graph_from_networkx,
    to_networkx,
)


def test_node_map():
    node_map = NodeMap.from_names(["A", "B", "C"])
    assert node_map.to_index["C"] == 2
    assert node_map.to_name[1] == "B"
    assert node_map.names([2, 0]) == ["C", "A"]
    assert len(node_map) == 3


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("B", "A", weight=3)
    G.add_edge("A", "C")

    graph, node_map = from_networkx(G)
    assert isinstance(graph, IndexedDiGraph)
    assert graph.directed
    # Sorted node order by default
    assert [node_map.to_name[i] for i in graph.nodes()] == ["A", "B", "C"]
    assert graph.node_label(node_map.to_index["B"]) == "B"

    b, a, c = (node_map.to_index[name] for name in "BAC")
    assert graph.get_edge_label(b, a) == 3
    # Missing attribute falls back to the default value
    assert graph.get_edge_label(a, c) == 1


def test_from_networkx_insertion_order_and_custom_attr():
    G = nx.DiGraph()
    G.add_edge("z", "a", cost=7)
    graph, node_map = from_networkx(G, value_attr="cost", default_value=0, sort_nodes=False)
    assert node_map.to_index == {"z": 0, "a": 1}
    assert graph.get_edge_label(0, 1) == 7


def test_from_networkx_undirected():
    G = nx.path_graph(3)
    graph, _ = from_networkx(G)
    assert not graph.directed
    assert graph.number_of_edges == 4


def test_from_networkx_multigraph_collapses_parallel_edges():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", weight=1)
    G.add_edge("A", "B", weight=2)
    graph, node_map = from_networkx(G)
    assert graph.number_of_edges == 1
    assert graph.get_edge_label(node_map.to_index["A"], node_map.to_index["B"]) == 1


def test_from_networkx_rejects_other_types():
    with pytest.raises(TypeError, match="Expected NetworkX graph"):
        from_networkx({"A": ["B"]})
    with pytest.raises(TypeError):
        label_graph_from_networkx([("A", "B")])


def test_label_graph_from_networkx():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=2)
    G.add_node("isolated")
    graph = label_graph_from_networkx(G)
    assert isinstance(graph, LabelDiGraph)
    assert graph.nodes() == ["A", "B", "isolated"]
    assert graph.get_edge_label("A", "B") == 2


def test_to_networkx_round_trip():
    G = nx.DiGraph()
    G.add_edge("x", "y", weight=4)
    G.add_edge("y", "z", weight=1)
    graph, node_map = from_networkx(G)

    back = to_networkx(graph, node_map)
    assert isinstance(back, nx.DiGraph)
    assert set(back.edges()) == set(G.edges())
    assert back["x"]["y"]["weight"] == 4

    plain = to_networkx(graph)
    assert set(plain.nodes()) == {0, 1, 2}


def test_to_networkx_undirected(triangle_undirected):
    back = to_networkx(triangle_undirected, value_attr="value")
    assert isinstance(back, nx.Graph) and not back.is_directed()
    assert back.number_of_edges() == 3


def test_grid_graph():
    grid = grid_graph(3, 2)
    assert grid.number_of_nodes == 6
    assert not grid.directed
    # (3 - 1) * 2 horizontal + 3 * (2 - 1) vertical edges, two arcs each
    assert grid.number_of_edges == 14
    assert grid.node_label(4) == (1, 1)
    assert set(grid.neighbors(4)) == {1, 3, 5}
    assert grid.get_edge_label(0, 1) == 1


def test_grid_graph_rejects_negative():
    with pytest.raises(ValueError):
        grid_graph(-1, 2)
