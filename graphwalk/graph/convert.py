"""NetworkX conversion utilities.

Converts arbitrary NetworkX graphs to the graphwalk graph classes and back.
Label graphs keep the original node names; indexed graphs map names to
contiguous integer indices through a `NodeMap`.

Example:
    >>> import networkx as nx
    >>> from graphwalk.graph.convert import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> graph, node_map = from_networkx(G)
    >>> graph.get_edge_label(node_map.to_index["A"], node_map.to_index["B"])
    3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple, Union

import networkx as nx

from graphwalk.graph.base import NxGraphBase
from graphwalk.graph.indexed_graph import IndexedDiGraph
from graphwalk.graph.label_graph import LabelDiGraph
from graphwalk.logging import get_logger

logger = get_logger(__name__)

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    When converting a NetworkX graph to an indexed graph, node names (which
    can be any hashable type) are mapped to contiguous integer indices
    starting from 0.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices: List[int]) -> List[Hashable]:
        """Translate a sequence of indices back to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def _iter_nx_edges(
    G: NxGraph, value_attr: str, default_value: Any
) -> Iterator[Tuple[Hashable, Hashable, Any]]:
    seen = set()
    for u, v, data in G.edges(data=True):
        if G.is_multigraph():
            pair = (u, v) if G.is_directed() else frozenset((u, v))
            if pair in seen:
                logger.debug("Dropping parallel edge %r -> %r", u, v)
                continue
            seen.add(pair)
        yield u, v, data.get(value_attr, default_value)


def _check_nx_graph(G: Any) -> None:
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )


def from_networkx(
    G: NxGraph,
    *,
    value_attr: str = "weight",
    default_value: Any = 1,
    sort_nodes: bool = True,
) -> Tuple[IndexedDiGraph, NodeMap]:
    """Convert a NetworkX graph to an `IndexedDiGraph`.

    Parallel edges of multigraphs collapse to the first one seen, since
    graphwalk graphs hold at most one edge per ordered node pair.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        value_attr: Edge attribute copied into the edge label.
        default_value: Label used when the attribute is missing.
        sort_nodes: Assign indices in ``str``-sorted node order (deterministic)
            instead of NetworkX insertion order.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    _check_nx_graph(G)

    node_names = list(G.nodes())
    if sort_nodes:
        node_names.sort(key=str)
    node_map = NodeMap.from_names(node_names)

    graph = IndexedDiGraph(len(node_names), directed=G.is_directed(), labels=node_names)
    for u, v, value in _iter_nx_edges(G, value_attr, default_value):
        graph.add_edge(node_map.to_index[u], node_map.to_index[v], value)

    logger.debug(
        "Converted networkx graph: %d nodes, %d arcs",
        graph.number_of_nodes,
        graph.number_of_edges,
    )
    return graph, node_map


def label_graph_from_networkx(
    G: NxGraph,
    *,
    value_attr: str = "weight",
    default_value: Any = 1,
) -> LabelDiGraph:
    """Convert a NetworkX graph to a `LabelDiGraph`, keeping node names."""
    _check_nx_graph(G)

    graph = LabelDiGraph(directed=G.is_directed())
    graph.add_nodes_from(G.nodes())
    for u, v, value in _iter_nx_edges(G, value_attr, default_value):
        graph.add_edge(u, v, value)
    return graph


def to_networkx(
    graph: NxGraphBase,
    node_map: Optional[NodeMap] = None,
    *,
    value_attr: str = "weight",
) -> nx.Graph:
    """Convert a graphwalk graph back to a NetworkX DiGraph or Graph.

    Args:
        graph: A `LabelDiGraph` or `IndexedDiGraph`.
        node_map: Optional NodeMap restoring original names of indexed nodes.
        value_attr: Attribute receiving each edge label.

    Returns:
        nx.DiGraph for directed graphs, nx.Graph otherwise.
    """
    G = nx.DiGraph() if graph.directed else nx.Graph()

    def name(node: Hashable) -> Hashable:
        if node_map is None:
            return node
        return node_map.to_name.get(node, node)  # type: ignore[arg-type]

    G.add_nodes_from(name(node) for node in graph.nodes())
    for edge in graph.edges():
        G.add_edge(name(edge.src), name(edge.dst), **{value_attr: edge.value})
    return G


def grid_graph(width: int, height: int, value: Any = 1) -> IndexedDiGraph:
    """Build an undirected 4-connected grid as an indexed graph.

    Node ``row * width + col`` sits at ``(row, col)`` and is labelled with
    that tuple. Every edge carries ``value``.

    Args:
        width: Number of columns.
        height: Number of rows.
        value: Edge label for every grid edge.

    Returns:
        IndexedDiGraph with ``width * height`` nodes.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be >= 0, got {width}x{height}.")
    lattice = nx.grid_2d_graph(height, width)
    labels = [(row, col) for row in range(height) for col in range(width)]
    graph = IndexedDiGraph(width * height, directed=False, labels=labels)
    for (r1, c1), (r2, c2) in lattice.edges():
        graph.add_edge(r1 * width + c1, r2 * width + c2, value)
    return graph
