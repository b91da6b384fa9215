"""Capability contracts the traversal engine consumes.

The engine never owns or mutates a graph. It only queries it through the
methods below, so any object providing them can be walked. Enumeration must
be stable and side-effect free for the duration of one traversal.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from graphwalk.types import Edge, NodeID


@runtime_checkable
class LabelGraph(Protocol):
    """Graph whose nodes are arbitrary hashable, equality-comparable values."""

    def nodes(self) -> Iterable[NodeID]: ...

    def neighbors(self, node: NodeID) -> Iterable[NodeID]: ...

    def parents(self, node: NodeID) -> Iterable[NodeID]: ...

    def out_edges(self, node: NodeID) -> Iterable[Edge]: ...

    def in_edges(self, node: NodeID) -> Iterable[Edge]: ...

    def edges(self) -> Iterable[Edge]: ...

    def contains_edge(self, src: NodeID, dst: NodeID) -> bool: ...

    def get_edge_label(self, src: NodeID, dst: NodeID) -> Any: ...

    def try_get_edge(self, src: NodeID, dst: NodeID) -> Optional[Any]: ...


@runtime_checkable
class IndexedGraph(LabelGraph, Protocol):
    """Graph whose nodes are the integers ``0..number_of_nodes - 1``.

    The fixed node count lets walkers back their visited and cost tables with
    plain lists.
    """

    @property
    def number_of_nodes(self) -> int: ...

    @property
    def number_of_edges(self) -> int: ...


def is_indexed(graph: Any) -> bool:
    """Return True if ``graph`` satisfies the `IndexedGraph` contract."""
    return isinstance(graph, IndexedGraph)


def check_index(node: Any, count: int) -> None:
    """Raise IndexError unless ``node`` is an int in ``[0, count)``.

    Booleans are rejected even though they are ints.
    """
    if isinstance(node, bool) or not isinstance(node, int):
        raise IndexError(f"Node index must be an int, got {node!r}.")
    if not 0 <= node < count:
        raise IndexError(f"Node index {node} out of range [0, {count}).")
