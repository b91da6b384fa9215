"""Ordering and size queries built on the node walkers.

Topological sort and directed cycle detection both ride on a whole-graph
post-order walk; undirected cycle detection rides on a pre-order walk. Size
queries accept an optional bound so that potentially unbounded graphs (for
example, lazily generated ones) cannot run forever: exceeding the bound
raises `BoundExceededError` rather than truncating.
"""

from __future__ import annotations

from typing import List, Optional, Set

from graphwalk.algorithms.traversal import node_walker_for
from graphwalk.config import TRAVERSAL_CONFIG
from graphwalk.graph.protocols import LabelGraph, is_indexed
from graphwalk.logging import get_logger
from graphwalk.types import NodeID, TraversalOrder

logger = get_logger(__name__)


class BoundExceededError(RuntimeError):
    """Raised when a size guard is exceeded while enumerating a graph."""

    def __init__(self, what: str, bound: int) -> None:
        self.what = what
        self.bound = bound
        super().__init__(f"The maximum number of {what} ({bound}) was exceeded.")


def _check_bound(counted: int, bound: Optional[int], what: str) -> None:
    if bound is not None and counted > bound:
        logger.warning("Bound exceeded: more than %d %s", bound, what)
        raise BoundExceededError(what, bound)


def topological_sort(
    graph: LabelGraph, max_nodes: Optional[int] = None
) -> List[NodeID]:
    """Return the nodes in reverse depth-first post-order.

    For an acyclic graph every edge points from an earlier to a later node
    in the result. For a cyclic graph the result is still the reverse
    post-order (which is what Kosaraju's algorithm needs) but it is not a
    topological order; check `is_acyclic` first if that matters.

    Args:
        graph: Label or indexed graph.
        max_nodes: Guard against unbounded graphs. Defaults to
            ``TRAVERSAL_CONFIG.max_nodes``.

    Returns:
        List of nodes.

    Raises:
        BoundExceededError: If more than ``max_nodes`` nodes are enumerated.
    """
    bound = TRAVERSAL_CONFIG.resolve_max_nodes(max_nodes)
    walker = node_walker_for(graph, order=TraversalOrder.POST_ORDER)
    post_order: List[NodeID] = []
    for node in walker.traverse_nodes():
        post_order.append(node)
        _check_bound(len(post_order), bound, "nodes")
    post_order.reverse()
    logger.debug("Topological sort over %d nodes", len(post_order))
    return post_order


def is_acyclic(graph: LabelGraph) -> bool:
    """Return True if the directed graph has no cycle.

    During a whole-graph post-order walk, a node is emitted only after all
    of its descendants. If some neighbour of an emitted node has not been
    emitted yet, that neighbour is an unfinished ancestor and the edge to it
    closes a cycle. Self-loops count as cycles. Stops at the first cycle.
    """
    walker = node_walker_for(graph, order=TraversalOrder.POST_ORDER)
    finished: Set[NodeID] = set()
    for node in walker.traverse_nodes():
        for neighbor in graph.neighbors(node):
            if neighbor not in finished:
                logger.debug("Back edge %r -> %r closes a cycle", node, neighbor)
                return False
        finished.add(node)
    return True


def is_acyclic_undirected(graph: LabelGraph) -> bool:
    """Return True if the undirected graph is a forest.

    Walks in pre-order. When a node is visited, at most one of its other
    neighbours (the one it was discovered from) may already be visited; a
    second one means another path into the node, hence a cycle. Self-loops
    are ignored.
    """
    walker = node_walker_for(graph, order=TraversalOrder.PRE_ORDER)
    visited: Set[NodeID] = set()
    for node in walker.traverse_nodes():
        visited.add(node)
        seen_neighbors = sum(
            1 for neighbor in graph.neighbors(node) if neighbor != node and neighbor in visited
        )
        if seen_neighbors > 1:
            logger.debug("Node %r has %d visited neighbours", node, seen_neighbors)
            return False
    return True


def number_of_nodes(graph: LabelGraph, max_nodes: Optional[int] = None) -> int:
    """Count nodes, using the indexed node count when available.

    Raises:
        BoundExceededError: If enumeration passes ``max_nodes``.
    """
    if is_indexed(graph):
        return graph.number_of_nodes
    bound = TRAVERSAL_CONFIG.resolve_max_nodes(max_nodes)
    counted = 0
    for _ in graph.nodes():
        counted += 1
        _check_bound(counted, bound, "nodes")
    return counted


def number_of_edges(graph: LabelGraph, max_edges: Optional[int] = None) -> int:
    """Count edges, using the indexed edge count when available.

    Raises:
        BoundExceededError: If enumeration passes ``max_edges``.
    """
    if is_indexed(graph):
        return graph.number_of_edges
    bound = TRAVERSAL_CONFIG.resolve_max_edges(max_edges)
    counted = 0
    for _ in graph.edges():
        counted += 1
        _check_bound(counted, bound, "edges")
    return counted

