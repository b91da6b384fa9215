"""Single-source and single-pair shortest paths.

Both queries drive the node-mode edge walker with a heap frontier ordered by
a `PathCostComparer`. Every accepted edge is recorded as the parent edge of
its target and relaxed into the cost table. Paths are rebuilt by walking
parent edges back to the source.

A target that was never reached is not an error: its cost is ``INF`` and its
path is empty.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from graphwalk.algorithms.costs import EdgeCostSpec, HeuristicFunc
from graphwalk.algorithms.traversal import cost_comparer_for, dijkstra_edges
from graphwalk.graph.protocols import LabelGraph
from graphwalk.logging import get_logger
from graphwalk.types import Edge, NodeID

logger = get_logger(__name__)


def _backtrack(parents: Dict[NodeID, Edge], start: NodeID, target: NodeID) -> List[Edge]:
    path: List[Edge] = []
    node = target
    while node != start:
        edge = parents[node]
        path.append(edge)
        node = edge.src
    path.reverse()
    return path


class SourceShortestPaths:
    """Shortest paths from one source to every reachable node.

    The search runs to exhaustion on construction.

    Args:
        graph: Label or indexed graph.
        start: Source node.
        edge_cost: Edge cost callable or `EdgeCost` kind (default: unit cost).
            Must be non-negative for exact results.
        heuristic: Optional estimate of the remaining cost. A consistent
            heuristic (for example Manhattan distance on a unit-cost grid)
            only changes the order in which nodes are settled. An admissible
            but inconsistent one can leave some costs above the true
            shortest-path cost, since settled nodes are never reopened.

    Example:
        >>> paths = SourceShortestPaths(graph, "A", EdgeCost.VALUE)
        >>> paths.get_cost("D")
        4.0
        >>> [(e.src, e.dst) for e in paths.get_path("D")]
        [('A', 'B'), ('B', 'C'), ('C', 'D')]
    """

    def __init__(
        self,
        graph: LabelGraph,
        start: NodeID,
        edge_cost: EdgeCostSpec = None,
        heuristic: Optional[HeuristicFunc] = None,
    ) -> None:
        self.start = start
        self._comparer = cost_comparer_for(graph, start, edge_cost, heuristic)
        self._parents: Dict[NodeID, Edge] = {}
        for edge in dijkstra_edges(graph, start, comparer=self._comparer):
            self._parents[edge.dst] = edge
        logger.debug(
            "Shortest paths from %r reach %d nodes", start, len(self._parents) + 1
        )

    @property
    def parents(self) -> Dict[NodeID, Edge]:
        """Parent edge of every reached node other than the source."""
        return dict(self._parents)

    def reachable(self, target: NodeID) -> bool:
        return target == self.start or target in self._parents

    def get_cost(self, target: NodeID) -> float:
        """Return the shortest-path cost to ``target`` (``INF`` if unreachable)."""
        return self._comparer.cost_of(target)

    def get_path(self, target: NodeID) -> Iterator[Edge]:
        """Yield the edges of the shortest path from the source to ``target``.

        Yields nothing if ``target`` is unreachable or is the source itself.
        """
        if target not in self._parents:
            return iter(())
        return iter(_backtrack(self._parents, self.start, target))


def find_path(
    graph: LabelGraph,
    start: NodeID,
    target: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> List[Edge]:
    """Return the edges of a shortest path from ``start`` to ``target``.

    The search stops as soon as ``target`` is settled. With the default unit
    cost this is a fewest-hops path. A consistent ``heuristic`` toward
    ``target`` (A*) usually settles fewer nodes and keeps the path optimal.

    Returns:
        List of edges; empty if ``target`` is unreachable or equals ``start``.
    """
    comparer = cost_comparer_for(graph, start, edge_cost, heuristic)
    parents: Dict[NodeID, Edge] = {}
    for edge in dijkstra_edges(graph, start, comparer=comparer):
        parents[edge.dst] = edge
        if edge.dst == target:
            return _backtrack(parents, start, target)
    logger.debug("No path from %r to %r", start, target)
    return []
