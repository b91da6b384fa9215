"""Cost model for best-first traversals.

A `PathCostComparer` owns the tentative-cost table of one search. The
traversal driver orders its heap frontier with `path_cost` (or `compare`)
and calls `update_cost` on every edge it accepts, so later comparisons see
the settled cost of the edge's source node.

With a zero heuristic the search is Dijkstra; an admissible heuristic (one
that never overestimates the remaining cost) turns it into A*. Edge costs
must be non-negative for settled costs to be final. This is not checked.
An admissible heuristic that is not consistent can settle a node above its
true cost, since settled nodes are never reopened.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Union

from graphwalk.config import TRAVERSAL_CONFIG
from graphwalk.graph.protocols import LabelGraph, check_index
from graphwalk.types import INF, Cost, Edge, EdgeCost, NodeID

EdgeCostFunc = Callable[[Edge], float]
HeuristicFunc = Callable[[NodeID], float]
EdgeCostSpec = Union[EdgeCost, EdgeCostFunc, None]


def edge_cost_fabric(
    edge_cost: EdgeCost, blocked_cost: Optional[float] = None
) -> EdgeCostFunc:
    """Fabric producing a default edge cost function.

    Args:
        edge_cost: EdgeCost enum selecting the conversion.
        blocked_cost: Cost of a False edge under ``EdgeCost.BOOL``. Defaults
            to ``TRAVERSAL_CONFIG.blocked_edge_cost``.

    Returns:
        A callable mapping an Edge to a float cost.
    """
    if blocked_cost is None:
        blocked_cost = TRAVERSAL_CONFIG.blocked_edge_cost

    def unit_cost(edge: Edge) -> float:
        return 1.0

    def value_cost(edge: Edge) -> float:
        return float(edge.value)

    def bool_cost(edge: Edge) -> float:
        return 1.0 if edge.value else blocked_cost

    if edge_cost == EdgeCost.UNIT:
        return unit_cost
    elif edge_cost == EdgeCost.VALUE:
        return value_cost
    elif edge_cost == EdgeCost.BOOL:
        return bool_cost
    else:
        raise ValueError(f"Unsupported edge cost: {edge_cost}")


def resolve_edge_cost(edge_cost: EdgeCostSpec) -> EdgeCostFunc:
    """Turn an edge cost argument into a callable (None means unit cost)."""
    if edge_cost is None:
        return edge_cost_fabric(EdgeCost.UNIT)
    if isinstance(edge_cost, EdgeCost):
        return edge_cost_fabric(edge_cost)
    return edge_cost


class PathCostComparer:
    """Tentative path costs of one single-source search over a label graph.

    Every node starts at ``INF`` except ``start``, which starts at 0.

    Args:
        graph: The graph being searched.
        start: Source node.
        edge_cost: Edge cost callable or `EdgeCost` kind (default: unit cost).
        heuristic: Optional estimate of the remaining cost from a node to the
            goal. Settled costs stay exact only if it is consistent (for
            example Manhattan distance on a unit-cost grid).
        heuristic_weight: Multiplier on the heuristic term. Defaults to
            ``TRAVERSAL_CONFIG.heuristic_weight``.
    """

    def __init__(
        self,
        graph: LabelGraph,
        start: NodeID,
        edge_cost: EdgeCostSpec = None,
        heuristic: Optional[HeuristicFunc] = None,
        heuristic_weight: Optional[float] = None,
    ) -> None:
        self._graph = graph
        self._edge_cost = resolve_edge_cost(edge_cost)
        self._heuristic = heuristic
        self._heuristic_weight = (
            TRAVERSAL_CONFIG.heuristic_weight
            if heuristic_weight is None
            else heuristic_weight
        )
        self.start = start
        self.initialize(start)

    #
    # Cost table
    #
    def initialize(self, start: NodeID) -> None:
        """Reset the cost table for a new search from ``start``."""
        self.start = start
        self._costs: Dict[NodeID, float] = {start: 0.0}

    def cost_of(self, node: NodeID) -> float:
        """Return the best known cost of reaching ``node`` (INF if unreached)."""
        return self._costs.get(node, INF)

    def set_cost(self, node: NodeID, cost: Cost) -> None:
        self._costs[node] = float(cost)

    @property
    def costs(self) -> Dict[NodeID, float]:
        """Costs of every reached node."""
        return dict(self._costs)

    #
    # Ordering
    #
    @property
    def edge_cost(self) -> EdgeCostFunc:
        return self._edge_cost

    def heuristic_cost(self, node: NodeID) -> float:
        if self._heuristic is None:
            return 0.0
        return self._heuristic_weight * self._heuristic(node)

    def path_cost(self, edge: Edge) -> float:
        """Estimated total cost of a path ending with ``edge``.

        This is the heap key: ``cost[src] + edge_cost(edge) + h(dst)``.
        """
        return (
            self.cost_of(edge.src)
            + self._edge_cost(edge)
            + self.heuristic_cost(edge.dst)
        )

    def compare(self, a: Edge, b: Edge) -> int:
        """Three-way comparison of two pending edges by `path_cost`."""
        cost_a = self.path_cost(a)
        cost_b = self.path_cost(b)
        return (cost_a > cost_b) - (cost_a < cost_b)

    def update_cost(self, edge: Edge) -> bool:
        """Relax ``edge``: lower ``cost[dst]`` if going through ``src`` is cheaper.

        Returns:
            True if the cost of ``edge.dst`` was lowered.
        """
        cost = self.cost_of(edge.src) + self._edge_cost(edge)
        if cost < self.cost_of(edge.dst):
            self.set_cost(edge.dst, cost)
            return True
        return False


class IndexedPathCostComparer(PathCostComparer):
    """`PathCostComparer` with a list-backed table for indexed graphs.

    Node references that are not ints in range raise IndexError.
    """

    def initialize(self, start: int) -> None:
        self.start = start
        self._table: List[float] = [INF] * self._graph.number_of_nodes
        self._check(start)
        self._table[start] = 0.0

    def _check(self, node: int) -> None:
        check_index(node, len(self._table))

    def cost_of(self, node: int) -> float:
        self._check(node)
        return self._table[node]

    def set_cost(self, node: int, cost: Cost) -> None:
        self._check(node)
        self._table[node] = float(cost)

    @property
    def costs(self) -> Dict[int, float]:
        return {node: cost for node, cost in enumerate(self._table) if cost != INF}
