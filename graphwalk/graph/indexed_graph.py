"""Integer-indexed graph backed by networkx."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from graphwalk.graph.base import NxGraphBase
from graphwalk.graph.protocols import check_index

IndexedEdgeSpec = Union[Tuple[int, int], Tuple[int, int, Any]]

LABEL_ATTR = "label"


class IndexedDiGraph(NxGraphBase):
    """A graph with a fixed set of nodes ``0..number_of_nodes - 1``.

    Nodes may carry an optional label (any value). Passing an index outside
    the node range to any method raises IndexError immediately.
    """

    def __init__(
        self,
        number_of_nodes: int,
        directed: bool = True,
        labels: Optional[Sequence[Any]] = None,
    ) -> None:
        if number_of_nodes < 0:
            raise ValueError(f"number_of_nodes must be >= 0, got {number_of_nodes}.")
        if labels is not None and len(labels) != number_of_nodes:
            raise ValueError(
                f"Expected {number_of_nodes} labels, got {len(labels)}."
            )
        super().__init__(directed=directed)
        self._count = number_of_nodes
        for index in range(number_of_nodes):
            label = labels[index] if labels is not None else None
            self._graph.add_node(index, **{LABEL_ATTR: label})

    @classmethod
    def from_edges(
        cls,
        number_of_nodes: int,
        edges: Iterable[IndexedEdgeSpec],
        directed: bool = True,
    ) -> IndexedDiGraph:
        """Build a graph from ``(src, dst)`` or ``(src, dst, value)`` tuples."""
        graph = cls(number_of_nodes, directed=directed)
        for spec in edges:
            value = spec[2] if len(spec) > 2 else None
            graph.add_edge(spec[0], spec[1], value)
        return graph

    def _require_node(self, node: Any) -> None:
        check_index(node, self._count)

    def _new_empty(self) -> IndexedDiGraph:
        return IndexedDiGraph(self._count, directed=self.directed)

    @property
    def number_of_nodes(self) -> int:
        return self._count

    @property
    def number_of_edges(self) -> int:
        return self.number_of_arcs()

    def nodes(self) -> range:
        return range(self._count)

    def node_label(self, node: int) -> Any:
        self._require_node(node)
        return self._graph.nodes[node][LABEL_ATTR]

    def set_node_label(self, node: int, label: Any) -> None:
        self._require_node(node)
        self._graph.nodes[node][LABEL_ATTR] = label

    def contains_edge(self, src: int, dst: int) -> bool:
        self._require_node(src)
        self._require_node(dst)
        return super().contains_edge(src, dst)

    def get_edge_label(self, src: int, dst: int) -> Any:
        self._require_node(src)
        self._require_node(dst)
        return super().get_edge_label(src, dst)

    def try_get_edge(self, src: int, dst: int) -> Optional[Any]:
        self._require_node(src)
        self._require_node(dst)
        return super().try_get_edge(src, dst)

    def add_edge(self, src: int, dst: int, value: Any = None, **attr: Any) -> None:
        """Add an edge ``src -> dst`` labelled ``value``.

        Raises:
            IndexError: If either index is out of range.
            ValueError: If the edge already exists.
        """
        self._require_node(src)
        self._require_node(dst)
        self._add_edge(src, dst, value, attr)

    def remove_edge(self, src: int, dst: int) -> None:
        self._require_node(src)
        self._require_node(dst)
        super().remove_edge(src, dst)
