"""Label graph backed by networkx with strict node and edge management."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from graphwalk.graph.base import NxGraphBase
from graphwalk.types import NodeID

EdgeSpec = Union[Tuple[NodeID, NodeID], Tuple[NodeID, NodeID, Any]]


class LabelDiGraph(NxGraphBase):
    """A graph whose nodes are arbitrary hashable labels.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - At most one edge per ordered node pair (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
      - Querying an unknown node raises KeyError.

    Set ``directed=False`` for an undirected graph; each edge is then visible
    from both endpoints.
    """

    def __init__(self, directed: bool = True) -> None:
        super().__init__(directed=directed)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeSpec],
        nodes: Optional[Sequence[NodeID]] = None,
        directed: bool = True,
    ) -> LabelDiGraph:
        """Build a graph from ``(src, dst)`` or ``(src, dst, value)`` tuples.

        Nodes are created in first-seen order, after any explicit ``nodes``.

        Args:
            edges: Edge tuples.
            nodes: Optional nodes to add first (isolated nodes, or to fix order).
            directed: Whether the graph is directed.

        Returns:
            LabelDiGraph: The new graph.
        """
        graph = cls(directed=directed)
        for node in nodes or ():
            graph.add_node(node)
        for spec in edges:
            src, dst = spec[0], spec[1]
            value = spec[2] if len(spec) > 2 else None
            for node in (src, dst):
                if node not in graph:
                    graph.add_node(node)
            graph.add_edge(src, dst, value)
        return graph

    def _require_node(self, node: NodeID) -> None:
        if node not in self:
            raise KeyError(f"Node '{node}' does not exist.")

    def _new_empty(self) -> LabelDiGraph:
        return LabelDiGraph(directed=self.directed)

    @property
    def number_of_edges(self) -> int:
        return self.number_of_arcs()

    #
    # Node management
    #
    def add_node(self, node: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node in self._graph:
            raise ValueError(f"Node '{node}' already exists in this graph.")
        self._graph.add_node(node, **attr)

    def add_nodes_from(self, nodes: Iterable[NodeID]) -> None:
        for node in nodes:
            self.add_node(node)

    def remove_node(self, node: NodeID) -> None:
        """Remove a node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if node not in self._graph:
            raise ValueError(f"Node '{node}' does not exist.")
        self._graph.remove_node(node)

    #
    # Edge management
    #
    def add_edge(self, src: NodeID, dst: NodeID, value: Any = None, **attr: Any) -> None:
        """Add an edge ``src -> dst`` labelled ``value``.

        Both nodes must already exist.

        Raises:
            ValueError: If either node does not exist, or the edge already exists.
        """
        if src not in self._graph:
            raise ValueError(f"Source node '{src}' does not exist.")
        if dst not in self._graph:
            raise ValueError(f"Target node '{dst}' does not exist.")
        self._add_edge(src, dst, value, attr)
