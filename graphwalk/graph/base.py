"""Shared networkx-backed storage for the concrete graph classes.

`NxGraphBase` wraps a `networkx.DiGraph` (or a `networkx.Graph` for undirected
graphs) and exposes it through the capability contract in
`graphwalk.graph.protocols`. Edge labels live in the ``value`` edge attribute.
Undirected graphs present every edge in both directions, so ``out_edges``,
``edges`` and ``number_of_edges`` all count arcs rather than undirected edges.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional

import networkx as nx

from graphwalk.types import Edge, NodeID

AttrDict = Dict[str, Any]

VALUE_ATTR = "value"


class NxGraphBase(ABC):
    """Common read API over a wrapped networkx graph.

    Subclasses decide how a node reference is validated through
    ``_require_node``; every query method calls it first so invalid nodes
    fail immediately instead of during a later traversal step.
    """

    def __init__(self, directed: bool = True) -> None:
        self._graph: nx.Graph = nx.DiGraph() if directed else nx.Graph()

    @property
    def directed(self) -> bool:
        """True when edges are one-way."""
        return self._graph.is_directed()

    @property
    def nx_graph(self) -> nx.Graph:
        """The wrapped networkx graph. Treat it as read-only."""
        return self._graph

    @abstractmethod
    def _require_node(self, node: NodeID) -> None:
        """Raise if ``node`` is not a valid node reference."""

    @abstractmethod
    def _new_empty(self) -> NxGraphBase:
        """Return an empty graph of the same kind and direction."""

    #
    # Capability contract
    #
    def nodes(self) -> List[NodeID]:
        """Return all nodes in insertion order."""
        return list(self._graph.nodes)

    def neighbors(self, node: NodeID) -> List[NodeID]:
        """Return the nodes reachable over one outgoing edge."""
        self._require_node(node)
        return list(self._graph.adj[node])

    def parents(self, node: NodeID) -> List[NodeID]:
        """Return the nodes with an edge into ``node``."""
        self._require_node(node)
        if self.directed:
            return list(self._graph.pred[node])  # type: ignore[attr-defined]
        return list(self._graph.adj[node])

    def out_edges(self, node: NodeID) -> List[Edge]:
        self._require_node(node)
        return [
            Edge(node, dst, attr.get(VALUE_ATTR))
            for dst, attr in self._graph.adj[node].items()
        ]

    def in_edges(self, node: NodeID) -> List[Edge]:
        self._require_node(node)
        if not self.directed:
            return [edge.reversed() for edge in self.out_edges(node)]
        incoming = self._graph.pred[node]  # type: ignore[attr-defined]
        return [Edge(src, node, attr.get(VALUE_ATTR)) for src, attr in incoming.items()]

    def edges(self) -> Iterator[Edge]:
        """Iterate over every arc, grouped by source node."""
        for node in self._graph.nodes:
            for dst, attr in self._graph.adj[node].items():
                yield Edge(node, dst, attr.get(VALUE_ATTR))

    def contains_edge(self, src: NodeID, dst: NodeID) -> bool:
        return self._graph.has_edge(src, dst)

    def get_edge_label(self, src: NodeID, dst: NodeID) -> Any:
        """Return the label of the edge ``src -> dst``.

        Raises:
            KeyError: If there is no such edge.
        """
        try:
            attr = self._graph.adj[src][dst]
        except KeyError:
            raise KeyError(f"No edge from '{src}' to '{dst}'.") from None
        return attr.get(VALUE_ATTR)

    def try_get_edge(self, src: NodeID, dst: NodeID) -> Optional[Any]:
        """Return the label of ``src -> dst``, or None if the edge is absent."""
        if not self._graph.has_edge(src, dst):
            return None
        return self._graph.adj[src][dst].get(VALUE_ATTR)

    #
    # Size helpers
    #
    def number_of_arcs(self) -> int:
        return sum(len(nbrs) for nbrs in self._graph.adj.values())

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._graph
        except TypeError:
            return False

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._graph.nodes)

    #
    # Edge management
    #
    def _add_edge(self, src: NodeID, dst: NodeID, value: Any, attr: AttrDict) -> None:
        if self._graph.has_edge(src, dst):
            raise ValueError(f"Edge from '{src}' to '{dst}' already exists.")
        self._graph.add_edge(src, dst, **{VALUE_ATTR: value}, **attr)

    def remove_edge(self, src: NodeID, dst: NodeID) -> None:
        """Remove the edge ``src -> dst``.

        Raises:
            ValueError: If the edge does not exist.
        """
        if not self._graph.has_edge(src, dst):
            raise ValueError(f"No edge from '{src}' to '{dst}' to remove.")
        self._graph.remove_edge(src, dst)

    def set_edge_label(self, src: NodeID, dst: NodeID, value: Any) -> None:
        if not self._graph.has_edge(src, dst):
            raise ValueError(f"No edge from '{src}' to '{dst}'.")
        self._graph.adj[src][dst][VALUE_ATTR] = value

    def transpose(self) -> NxGraphBase:
        """Return a new graph of the same kind with every edge reversed.

        Undirected graphs are their own transpose; a copy is returned.
        """
        result = self._new_empty()
        if self.directed:
            result._graph = self._graph.reverse(copy=True)
        else:
            result._graph = self._graph.copy()
        return result
