"""Traversal engine and the algorithms built on it.

Every algorithm here is a thin driver over the pluggable-frontier walkers in
`graphwalk.algorithms.traversal`; the frontier (stack, queue or heap) picks
depth-first, breadth-first or best-first order.
"""

from graphwalk.algorithms.all_pairs import AllPairsShortestPath
from graphwalk.algorithms.connectivity import (
    connected_components,
    number_of_components,
    number_of_strongly_connected_components,
    strongly_connected_components,
)
from graphwalk.algorithms.costs import (
    IndexedPathCostComparer,
    PathCostComparer,
    edge_cost_fabric,
)
from graphwalk.algorithms.euler import eulerian_circuit
from graphwalk.algorithms.frontier import (
    Frontier,
    HeapFrontier,
    QueueFrontier,
    StackFrontier,
)
from graphwalk.algorithms.paths import SourceShortestPaths, find_path
from graphwalk.algorithms.query import (
    BoundExceededError,
    is_acyclic,
    is_acyclic_undirected,
    number_of_edges,
    number_of_nodes,
    topological_sort,
)
from graphwalk.algorithms.traversal import (
    EdgeWalker,
    IndexedEdgeWalker,
    IndexedNodeWalker,
    NodeWalker,
    breadth_first_edges,
    breadth_first_nodes,
    cost_comparer_for,
    depth_first_edges,
    depth_first_nodes,
    dijkstra_edges,
    dijkstra_edges_with_costs,
    dijkstra_nodes,
    dijkstra_nodes_with_costs,
    edge_walker_for,
    node_walker_for,
    post_order_nodes,
)

__all__ = [
    # Frontiers
    "Frontier",
    "StackFrontier",
    "QueueFrontier",
    "HeapFrontier",
    # Costs
    "PathCostComparer",
    "IndexedPathCostComparer",
    "edge_cost_fabric",
    # Walkers
    "NodeWalker",
    "IndexedNodeWalker",
    "EdgeWalker",
    "IndexedEdgeWalker",
    "node_walker_for",
    "edge_walker_for",
    "cost_comparer_for",
    # Traversal helpers
    "breadth_first_nodes",
    "depth_first_nodes",
    "post_order_nodes",
    "breadth_first_edges",
    "depth_first_edges",
    "dijkstra_edges",
    "dijkstra_edges_with_costs",
    "dijkstra_nodes",
    "dijkstra_nodes_with_costs",
    # Queries
    "BoundExceededError",
    "topological_sort",
    "is_acyclic",
    "is_acyclic_undirected",
    "number_of_nodes",
    "number_of_edges",
    # Connectivity
    "strongly_connected_components",
    "number_of_strongly_connected_components",
    "connected_components",
    "number_of_components",
    # Paths
    "SourceShortestPaths",
    "find_path",
    "AllPairsShortestPath",
    "eulerian_circuit",
]
