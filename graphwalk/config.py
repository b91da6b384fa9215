"""Configuration defaults for graphwalk traversals and queries."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TraversalConfig:
    """Defaults shared by traversal-based queries."""

    # Node bound applied when a query receives no explicit max_nodes.
    # None means unbounded.
    max_nodes: Optional[int] = None

    # Edge bound applied when a query receives no explicit max_edges.
    max_edges: Optional[int] = None

    # Cost assigned to blocked (False) edges by the boolean edge-cost default
    blocked_edge_cost: float = 1.0e7

    # Multiplier applied to heuristic estimates in best-first searches
    heuristic_weight: float = 1.0

    def resolve_max_nodes(self, max_nodes: Optional[int]) -> Optional[int]:
        """Return the explicit bound if given, else the configured default."""
        return self.max_nodes if max_nodes is None else max_nodes

    def resolve_max_edges(self, max_edges: Optional[int]) -> Optional[int]:
        """Return the explicit bound if given, else the configured default."""
        return self.max_edges if max_edges is None else max_edges


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
