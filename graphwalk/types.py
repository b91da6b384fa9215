"""Base types and enums shared by graphwalk algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Hashable, Union

#: Represents a numeric path or edge cost.
Cost = Union[int, float]

#: Tentative cost of a node that has not been reached ("no path").
INF = float("inf")

NodeID = Hashable


@dataclass(frozen=True)
class Edge:
    """Immutable view of a directed edge.

    Attributes:
        src: Node the edge leaves.
        dst: Node the edge enters.
        value: Caller-chosen edge label (weight, flag, payload, ...).
    """

    src: Any
    dst: Any
    value: Any = None

    def reversed(self) -> Edge:
        """Return the same edge with its direction flipped."""
        return Edge(self.dst, self.src, self.value)

    def __repr__(self) -> str:
        return f"Edge({self.src!r}->{self.dst!r}, {self.value!r})"


class TraversalOrder(IntEnum):
    """Order in which a node walker emits visited nodes."""

    #: Emit a node as soon as it is accepted from the frontier.
    PRE_ORDER = 1
    #: Emit a node once all of its unvisited descendants have been emitted.
    #: Always walks depth-first, whatever frontier is configured.
    POST_ORDER = 2


class EdgeCost(IntEnum):
    """Default conversions from an edge to a traversal cost."""

    #: Every edge costs 1 (hop count).
    UNIT = 1
    #: The numeric edge value is the cost.
    VALUE = 2
    #: True edges cost 1, False (blocked) edges cost a large sentinel.
    BOOL = 3
