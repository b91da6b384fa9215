import pytest

from graphwalk.algorithms.costs import (
    IndexedPathCostComparer,
    PathCostComparer,
    edge_cost_fabric,
    resolve_edge_cost,
)
from graphwalk.config import TRAVERSAL_CONFIG
from graphwalk.types import INF, Edge, EdgeCost


def test_edge_cost_fabric_unit_and_value():
    edge = Edge("A", "B", 7)
    assert edge_cost_fabric(EdgeCost.UNIT)(edge) == 1.0
    assert edge_cost_fabric(EdgeCost.VALUE)(edge) == 7.0


def test_edge_cost_fabric_bool_uses_blocked_cost():
    cost = edge_cost_fabric(EdgeCost.BOOL)
    assert cost(Edge(0, 1, True)) == 1.0
    assert cost(Edge(0, 1, False)) == 1.0e7

    custom = edge_cost_fabric(EdgeCost.BOOL, blocked_cost=99.0)
    assert custom(Edge(0, 1, False)) == 99.0


def test_edge_cost_fabric_reads_blocked_cost_from_config():
    TRAVERSAL_CONFIG.blocked_edge_cost = 50.0
    assert edge_cost_fabric(EdgeCost.BOOL)(Edge(0, 1, False)) == 50.0


def test_edge_cost_fabric_unsupported():
    with pytest.raises(ValueError):
        edge_cost_fabric(99)


def test_resolve_edge_cost():
    edge = Edge("A", "B", 4)
    assert resolve_edge_cost(None)(edge) == 1.0
    assert resolve_edge_cost(EdgeCost.VALUE)(edge) == 4.0

    def doubled(e):
        return 2.0 * e.value

    assert resolve_edge_cost(doubled) is doubled


def test_comparer_initial_costs(weighted_dag):
    comparer = PathCostComparer(weighted_dag, "A", EdgeCost.VALUE)
    assert comparer.cost_of("A") == 0.0
    assert comparer.cost_of("D") == INF
    assert comparer.costs == {"A": 0.0}


def test_comparer_update_cost_relaxes_only_when_cheaper(weighted_dag):
    comparer = PathCostComparer(weighted_dag, "A", EdgeCost.VALUE)

    assert comparer.update_cost(Edge("A", "C", 5)) is True
    assert comparer.cost_of("C") == 5.0

    assert comparer.update_cost(Edge("A", "B", 1)) is True
    assert comparer.update_cost(Edge("B", "C", 2)) is True
    assert comparer.cost_of("C") == 3.0

    # Going back through the expensive edge does not raise the cost
    assert comparer.update_cost(Edge("A", "C", 5)) is False
    assert comparer.cost_of("C") == 3.0


def test_comparer_path_cost_and_compare(weighted_dag):
    comparer = PathCostComparer(weighted_dag, "A", EdgeCost.VALUE)
    cheap = Edge("A", "B", 1)
    expensive = Edge("A", "C", 5)

    assert comparer.path_cost(cheap) == 1.0
    assert comparer.path_cost(expensive) == 5.0
    assert comparer.compare(cheap, expensive) < 0
    assert comparer.compare(expensive, cheap) > 0
    assert comparer.compare(cheap, cheap) == 0


def test_comparer_heuristic_and_weight(weighted_dag):
    estimates = {"A": 3.0, "B": 2.0, "C": 1.0, "D": 0.0}
    comparer = PathCostComparer(
        weighted_dag, "A", EdgeCost.VALUE, heuristic=estimates.get
    )
    assert comparer.heuristic_cost("B") == 2.0
    assert comparer.path_cost(Edge("A", "B", 1)) == 3.0

    weighted = PathCostComparer(
        weighted_dag, "A", EdgeCost.VALUE, heuristic=estimates.get, heuristic_weight=0.5
    )
    assert weighted.path_cost(Edge("A", "B", 1)) == 2.0


def test_comparer_heuristic_weight_from_config(weighted_dag):
    TRAVERSAL_CONFIG.heuristic_weight = 2.0
    comparer = PathCostComparer(weighted_dag, "A", heuristic=lambda node: 1.0)
    assert comparer.heuristic_cost("B") == 2.0


def test_comparer_initialize_resets_table(weighted_dag):
    comparer = PathCostComparer(weighted_dag, "A")
    comparer.update_cost(Edge("A", "B"))
    comparer.initialize("C")
    assert comparer.start == "C"
    assert comparer.costs == {"C": 0.0}


def test_indexed_comparer_is_list_backed(weighted_dag_indexed):
    comparer = IndexedPathCostComparer(weighted_dag_indexed, 0, EdgeCost.VALUE)
    assert comparer.cost_of(0) == 0.0
    assert comparer.cost_of(3) == INF

    comparer.update_cost(Edge(0, 1, 1))
    assert comparer.costs == {0: 0.0, 1: 1.0}


def test_indexed_comparer_rejects_out_of_range(weighted_dag_indexed):
    comparer = IndexedPathCostComparer(weighted_dag_indexed, 0)
    with pytest.raises(IndexError):
        comparer.cost_of(4)
    with pytest.raises(IndexError):
        comparer.set_cost(-1, 0.0)
    with pytest.raises(IndexError):
        IndexedPathCostComparer(weighted_dag_indexed, 10)


def test_indexed_comparer_rejects_non_int_nodes(weighted_dag_indexed):
    comparer = IndexedPathCostComparer(weighted_dag_indexed, 0)
    with pytest.raises(IndexError):
        comparer.cost_of("A")
    with pytest.raises(IndexError):
        comparer.cost_of(True)
    with pytest.raises(IndexError):
        comparer.update_cost(Edge(0, 1.0))
