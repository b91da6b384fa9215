import networkx as nx

from graphwalk.algorithms.connectivity import (
    connected_components,
    number_of_components,
    number_of_strongly_connected_components,
    strongly_connected_components,
)
from graphwalk.graph import from_networkx, to_networkx


def as_sets(components):
    return sorted(sorted(component) for component in components)


def test_strongly_connected_components(scc8):
    components = strongly_connected_components(scc8, scc8.transpose())
    assert as_sets(components) == [[0, 1, 2], [3, 4, 5], [6, 7]]
    assert number_of_strongly_connected_components(scc8, scc8.transpose()) == 3


def test_scc_matches_networkx(scc8):
    expected = as_sets(nx.strongly_connected_components(to_networkx(scc8)))
    assert as_sets(strongly_connected_components(scc8, scc8.transpose())) == expected


def test_scc_of_dag_are_singletons(weighted_dag):
    components = strongly_connected_components(weighted_dag, weighted_dag.transpose())
    assert as_sets(components) == [["A"], ["B"], ["C"], ["D"]]


def test_scc_of_cycle_is_one_component(cycle3):
    assert as_sets(strongly_connected_components(cycle3, cycle3.transpose())) == [
        [0, 1, 2]
    ]


def test_scc_random_graph_matches_networkx():
    G = nx.gnp_random_graph(30, 0.08, seed=11, directed=True)
    graph, node_map = from_networkx(G)
    found = [
        sorted(node_map.names(component))
        for component in strongly_connected_components(graph, graph.transpose())
    ]
    expected = [sorted(c) for c in nx.strongly_connected_components(G)]
    assert sorted(found) == sorted(expected)


def test_connected_components_undirected(two_components):
    assert as_sets(connected_components(two_components)) == [[0, 1], [2, 3, 4], [5]]
    assert number_of_components(two_components) == 3


def test_connected_components_grid(grid10):
    assert number_of_components(grid10) == 1
