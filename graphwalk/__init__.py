"""graphwalk: generic graph traversal over pluggable frontiers.

graphwalk runs depth-first, breadth-first and best-first (Dijkstra / A*)
search through one walk algorithm whose frontier container decides the
order. Graphs only need to answer a small set of queries (`LabelGraph`,
`IndexedGraph`); networkx-backed implementations are included.

Primary API:
    LabelDiGraph, IndexedDiGraph - Concrete graphs (directed or undirected)
    breadth_first_nodes(), depth_first_nodes(), dijkstra_edges() - Lazy walks
    SourceShortestPaths, find_path(), AllPairsShortestPath - Shortest paths
    topological_sort(), strongly_connected_components() - Structure queries
    eulerian_circuit() - Closed walk using every edge once

Example:
    from graphwalk import EdgeCost, LabelDiGraph, find_path

    g = LabelDiGraph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
    path = find_path(g, "A", "C", EdgeCost.VALUE)
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk._version import __version__
from graphwalk.algorithms import (
    AllPairsShortestPath,
    BoundExceededError,
    HeapFrontier,
    QueueFrontier,
    SourceShortestPaths,
    StackFrontier,
    breadth_first_edges,
    breadth_first_nodes,
    connected_components,
    depth_first_edges,
    depth_first_nodes,
    dijkstra_edges,
    dijkstra_nodes,
    edge_walker_for,
    eulerian_circuit,
    find_path,
    is_acyclic,
    is_acyclic_undirected,
    node_walker_for,
    strongly_connected_components,
    topological_sort,
)
from graphwalk.config import TRAVERSAL_CONFIG, TraversalConfig
from graphwalk.graph import (
    IndexedDiGraph,
    IndexedGraph,
    LabelDiGraph,
    LabelGraph,
    NodeMap,
    from_networkx,
    to_networkx,
)
from graphwalk.types import INF, Edge, EdgeCost, TraversalOrder

__all__ = [
    # Version
    "__version__",
    # Graphs
    "LabelGraph",
    "IndexedGraph",
    "LabelDiGraph",
    "IndexedDiGraph",
    # Types
    "Edge",
    "EdgeCost",
    "TraversalOrder",
    "INF",
    # Frontiers and walkers
    "StackFrontier",
    "QueueFrontier",
    "HeapFrontier",
    "node_walker_for",
    "edge_walker_for",
    "breadth_first_nodes",
    "depth_first_nodes",
    "breadth_first_edges",
    "depth_first_edges",
    "dijkstra_edges",
    "dijkstra_nodes",
    # Queries
    "topological_sort",
    "is_acyclic",
    "is_acyclic_undirected",
    "strongly_connected_components",
    "connected_components",
    "BoundExceededError",
    # Paths
    "SourceShortestPaths",
    "find_path",
    "AllPairsShortestPath",
    "eulerian_circuit",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
