"""Eulerian circuits (Hierholzer's algorithm on the depth-first edge walk)."""

from __future__ import annotations

from typing import Iterator, List

from graphwalk.algorithms.traversal import depth_first_edges
from graphwalk.graph.protocols import LabelGraph
from graphwalk.logging import get_logger
from graphwalk.types import Edge, NodeID

logger = get_logger(__name__)


def eulerian_circuit(
    graph: LabelGraph, start: NodeID, undirected: bool = False
) -> Iterator[Edge]:
    """Return a closed walk from ``start`` that uses every edge exactly once.

    The depth-first edge walk is followed while it keeps extending the
    current trail. When the next edge does not leave the node the trail
    stands on, the local sub-circuit is exhausted: edges are popped off the
    backtracking stack until the trail is back at that edge's source. Popped
    edges form the circuit in reverse, so the circuit is assembled first and
    then returned in walking order.

    The graph must be Eulerian (connected, and balanced degrees). This is
    not verified; other graphs yield a walk that is not a circuit.

    Args:
        graph: Label or indexed graph.
        start: Node where the circuit starts and ends.
        undirected: Walk each undirected edge once rather than once per
            direction.

    Returns:
        Iterator over the circuit edges in walking order.
    """
    trail: List[Edge] = []
    reversed_circuit: List[Edge] = []
    position = start
    for edge in depth_first_edges(graph, start, undirected):
        while trail and edge.src != position:
            backtracked = trail.pop()
            reversed_circuit.append(backtracked)
            position = backtracked.src
        trail.append(edge)
        position = edge.dst
    while trail:
        reversed_circuit.append(trail.pop())

    logger.debug("Eulerian circuit from %r uses %d edges", start, len(reversed_circuit))
    return reversed(reversed_circuit)
