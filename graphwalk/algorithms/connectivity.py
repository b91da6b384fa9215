"""Connected and strongly connected components (Kosaraju).

Kosaraju's algorithm runs the node walker twice: a post-order walk of the
graph gives a finishing order, then the transpose graph is walked from each
still-unclaimed node in that order. Everything first reached from one root
forms one component.

The transpose is supplied by the caller. Passing a graph that is not the
true transpose of ``graph`` silently yields wrong components; this is not
checked at runtime. For an undirected graph, which is its own transpose,
`connected_components` returns its ordinary connected components.
"""

from __future__ import annotations

from typing import List, Optional

from graphwalk.algorithms.query import topological_sort
from graphwalk.algorithms.traversal import node_walker_for
from graphwalk.graph.protocols import LabelGraph
from graphwalk.logging import get_logger
from graphwalk.types import NodeID

logger = get_logger(__name__)


def strongly_connected_components(
    graph: LabelGraph, transpose: LabelGraph, max_nodes: Optional[int] = None
) -> List[List[NodeID]]:
    """Return the strongly connected components of a directed graph.

    Args:
        graph: Label or indexed graph.
        transpose: The same graph with every edge reversed (for example
            ``graph.transpose()``).
        max_nodes: Guard against unbounded graphs.

    Returns:
        List of components, each a list of nodes in discovery order.
        Components come out in the finishing order of the first pass.

    Raises:
        BoundExceededError: If more than ``max_nodes`` nodes are enumerated.
    """
    finishing_order = topological_sort(graph, max_nodes)

    # One walker, never reset between roots: nodes claimed by an earlier
    # component stay visited and are not walked through again.
    walker = node_walker_for(transpose)
    walker.reset()
    components: List[List[NodeID]] = []
    for root in finishing_order:
        if walker.is_visited(root):
            continue
        components.append(list(walker.resume(root)))

    logger.debug(
        "Found %d strongly connected components over %d nodes",
        len(components),
        len(finishing_order),
    )
    return components


def number_of_strongly_connected_components(
    graph: LabelGraph, transpose: LabelGraph, max_nodes: Optional[int] = None
) -> int:
    """Return the number of strongly connected components."""
    return len(strongly_connected_components(graph, transpose, max_nodes))


def connected_components(
    graph: LabelGraph, max_nodes: Optional[int] = None
) -> List[List[NodeID]]:
    """Return the components of ``graph`` using it as its own transpose.

    This gives the connected components of an undirected graph. For a
    directed graph it is only meaningful when the graph is symmetric.

    Raises:
        BoundExceededError: If more than ``max_nodes`` nodes are enumerated.
    """
    return strongly_connected_components(graph, graph, max_nodes)


def number_of_components(graph: LabelGraph, max_nodes: Optional[int] = None) -> int:
    """Return the number of components of ``graph`` (see `connected_components`)."""
    return len(connected_components(graph, max_nodes))
