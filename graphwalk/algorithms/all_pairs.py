"""All-pairs shortest path costs (Floyd-Warshall) over an indexed graph.

Builds a dense ``N x N`` numpy cost matrix: the diagonal starts at 0, each
edge seeds its own cost, everything else is ``INF``. The matrix is then
relaxed with ``cost[i, j] = min(cost[i, j], cost[i, k] + cost[k, j])`` for
every intermediate node ``k``, one vectorized sweep per ``k``.

Only costs are produced. Use `SourceShortestPaths` or `find_path` to recover
the edges of a particular path.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from graphwalk.algorithms.costs import EdgeCostSpec, resolve_edge_cost
from graphwalk.graph.protocols import IndexedGraph
from graphwalk.logging import get_logger
from graphwalk.types import INF

logger = get_logger(__name__)

PairCost = Tuple[int, int, float]


class AllPairsShortestPath:
    """Shortest path costs between every pair of nodes of an indexed graph.

    Args:
        graph: Indexed graph.
        edge_cost: Edge cost callable or `EdgeCost` kind (default: unit cost).
    """

    def __init__(self, graph: IndexedGraph, edge_cost: EdgeCostSpec = None) -> None:
        self._graph = graph
        self._edge_cost = resolve_edge_cost(edge_cost)
        self._costs = self._compute_costs()

    def _compute_costs(self) -> np.ndarray:
        n = self._graph.number_of_nodes
        costs = np.full((n, n), INF, dtype=np.float64)
        np.fill_diagonal(costs, 0.0)
        for edge in self._graph.edges():
            cost = float(self._edge_cost(edge))
            # A self-loop never raises the zero diagonal
            if cost < costs[edge.src, edge.dst]:
                costs[edge.src, edge.dst] = cost

        for k in range(n):
            np.minimum(costs, costs[:, k, np.newaxis] + costs[np.newaxis, k, :], out=costs)

        logger.debug("All-pairs costs computed for %d nodes", n)
        return costs

    @property
    def number_of_nodes(self) -> int:
        return self._costs.shape[0]

    @property
    def cost_matrix(self) -> np.ndarray:
        """A copy of the ``N x N`` cost matrix."""
        return self._costs.copy()

    def get_path_cost(self, src: int, dst: int) -> float:
        """Return the shortest-path cost from ``src`` to ``dst`` (``INF`` if none).

        Raises:
            IndexError: If either index is out of range.
        """
        n = self.number_of_nodes
        for node in (src, dst):
            if not 0 <= node < n:
                raise IndexError(f"Node index {node} out of range [0, {n}).")
        return float(self._costs[src, dst])

    def get_sorted_costs(
        self, ascending: bool = True, undirected: bool = False
    ) -> List[PairCost]:
        """Return every ``(src, dst, cost)`` pair sorted by cost.

        Args:
            ascending: Sort cheapest first; otherwise most expensive first.
            undirected: Only report pairs with ``dst > src`` so each unordered
                pair of an undirected graph appears once.

        Returns:
            List of ``(src, dst, cost)`` tuples; ties keep row-major order.
        """
        n = self.number_of_nodes
        pairs: List[PairCost] = []
        for src in range(n):
            first = src + 1 if undirected else 0
            for dst in range(first, n):
                pairs.append((src, dst, float(self._costs[src, dst])))
        pairs.sort(key=lambda pair: pair[2], reverse=not ascending)
        return pairs
