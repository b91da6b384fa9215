import random

import networkx as nx
import pytest

from graphwalk.algorithms.paths import SourceShortestPaths, find_path
from graphwalk.graph import LabelDiGraph, from_networkx
from graphwalk.types import INF, EdgeCost


def pairs(edges):
    return [(e.src, e.dst) for e in edges]


def manhattan_to(goal, width):
    def estimate(node):
        return abs(node // width - goal // width) + abs(node % width - goal % width)

    return estimate


def test_source_shortest_paths(weighted_dag):
    paths = SourceShortestPaths(weighted_dag, "A", EdgeCost.VALUE)
    assert paths.get_cost("A") == 0.0
    assert paths.get_cost("B") == 1.0
    assert paths.get_cost("C") == 3.0
    assert paths.get_cost("D") == 4.0
    assert pairs(paths.get_path("D")) == [("A", "B"), ("B", "C"), ("C", "D")]
    assert set(paths.parents) == {"B", "C", "D"}


def test_source_shortest_paths_source_and_unreachable():
    g = LabelDiGraph.from_edges([("A", "B", 1)], nodes=["A", "B", "E"])
    paths = SourceShortestPaths(g, "A", EdgeCost.VALUE)

    assert list(paths.get_path("A")) == []
    assert paths.reachable("A")

    assert paths.get_cost("E") == INF
    assert list(paths.get_path("E")) == []
    assert not paths.reachable("E")


def test_source_shortest_paths_from_sink(weighted_dag):
    paths = SourceShortestPaths(weighted_dag, "D", EdgeCost.VALUE)
    assert paths.get_cost("A") == INF
    assert paths.parents == {}


def test_source_shortest_paths_bad_index(weighted_dag_indexed):
    with pytest.raises(IndexError):
        SourceShortestPaths(weighted_dag_indexed, 7)


def test_find_path(weighted_dag):
    assert pairs(find_path(weighted_dag, "A", "D", EdgeCost.VALUE)) == [
        ("A", "B"),
        ("B", "C"),
        ("C", "D"),
    ]
    # Fewest hops with the default unit cost
    assert pairs(find_path(weighted_dag, "A", "D")) == [("A", "C"), ("C", "D")]


def test_find_path_trivial_and_unreachable(weighted_dag):
    assert find_path(weighted_dag, "A", "A") == []
    assert find_path(weighted_dag, "D", "A") == []


def test_find_path_astar_on_grid(grid10):
    goal = 99
    path = find_path(grid10, 0, goal, heuristic=manhattan_to(goal, 10))
    assert len(path) == 18
    assert path[0].src == 0
    assert path[-1].dst == goal
    for previous, current in zip(path, path[1:]):
        assert previous.dst == current.src


def test_astar_costs_match_dijkstra(grid10):
    goal = 47
    plain = SourceShortestPaths(grid10, 0)
    guided = SourceShortestPaths(grid10, 0, heuristic=manhattan_to(goal, 10))
    assert guided.get_cost(goal) == plain.get_cost(goal) == 11.0


def test_blocked_edges_are_avoided():
    #   a ──ok──► b ──ok──► d
    #   └────────blocked───►┘
    g = LabelDiGraph.from_edges(
        [("a", "b", True), ("b", "d", True), ("a", "d", False)]
    )
    assert pairs(find_path(g, "a", "d", EdgeCost.BOOL)) == [("a", "b"), ("b", "d")]


def test_costs_match_networkx_dijkstra():
    G = nx.gnp_random_graph(25, 0.15, seed=7, directed=True)
    rng = random.Random(3)
    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 9)

    graph, node_map = from_networkx(G)
    for source in (0, 5, 13):
        expected = nx.single_source_dijkstra_path_length(G, source)
        paths = SourceShortestPaths(graph, node_map.to_index[source], EdgeCost.VALUE)
        for name in G.nodes():
            cost = paths.get_cost(node_map.to_index[name])
            if name in expected:
                assert cost == float(expected[name])
                path = list(paths.get_path(node_map.to_index[name]))
                assert sum(edge.value for edge in path) == expected[name]
            else:
                assert cost == INF


def test_inconsistent_heuristic_can_settle_above_true_cost():
    #   S ──1──► A ──1──► C ──3──► G
    #   └───────3────────►┘
    # h(A) = 3 never overestimates (A to G costs 4) but is not consistent:
    # it exceeds cost(A, C) + h(C). C is settled through S -> C before A.
    g = LabelDiGraph.from_edges(
        [("S", "A", 1), ("A", "C", 1), ("S", "C", 3), ("C", "G", 3)]
    )
    estimates = {"S": 0.0, "A": 3.0, "C": 0.0, "G": 0.0}

    exact = SourceShortestPaths(g, "S", EdgeCost.VALUE)
    guided = SourceShortestPaths(g, "S", EdgeCost.VALUE, heuristic=estimates.get)

    assert exact.get_cost("G") == 5.0
    assert guided.get_cost("C") == 3.0
    assert guided.get_cost("G") == 6.0
    assert pairs(guided.get_path("G")) == [("S", "C"), ("C", "G")]
