"""Graph capability protocols and networkx-backed implementations.

This package provides the `LabelGraph` and `IndexedGraph` protocols consumed
by the algorithms, the concrete `LabelDiGraph` and `IndexedDiGraph` classes,
and conversion helpers (`convert`).
"""

from graphwalk.graph.convert import (
    NodeMap,
    from_networkx,
    grid_graph,
    label_graph_from_networkx,
    to_networkx,
)
from graphwalk.graph.indexed_graph import IndexedDiGraph
from graphwalk.graph.label_graph import LabelDiGraph
from graphwalk.graph.protocols import IndexedGraph, LabelGraph

__all__ = [
    "IndexedDiGraph",
    "IndexedGraph",
    "LabelDiGraph",
    "LabelGraph",
    "NodeMap",
    "from_networkx",
    "grid_graph",
    "label_graph_from_networkx",
    "to_networkx",
]
