"""Pluggable-frontier graph traversal.

One walk algorithm serves breadth-first, depth-first and best-first search;
the injected `Frontier` decides which. Walkers come in two flavours sharing
the same algorithm:

* `NodeWalker` / `EdgeWalker` for label graphs (visited set keyed by node
  equality);
* `IndexedNodeWalker` / `IndexedEdgeWalker` for indexed graphs (visited
  table is a list of booleans sized to the node count).

Every walk is a lazy generator. Each pull advances the search by one accepted
node or edge; a consumer may stop pulling at any time and simply drop the
walker. Reusing a walker for a new, independent walk goes through `reset()`,
which the ``traverse_*`` entry points call for you.

Node states within one walk: unseen, pending in the frontier, visited. A
visited node is never emitted again nor re-queued as a root; duplicates are
filtered both when neighbours are queued and when items are taken from the
frontier.

Notes:
    Post-order emission needs "all descendants done", which is a call-stack
    property. It is implemented as a depth-first walk over an explicit stack
    of neighbour iterators and ignores the configured frontier.
"""

from __future__ import annotations

from typing import (
    Any,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
)

from graphwalk.algorithms.costs import (
    EdgeCostSpec,
    HeuristicFunc,
    IndexedPathCostComparer,
    PathCostComparer,
)
from graphwalk.algorithms.frontier import (
    Frontier,
    HeapFrontier,
    QueueFrontier,
    StackFrontier,
)
from graphwalk.graph.protocols import LabelGraph, check_index, is_indexed
from graphwalk.logging import get_logger
from graphwalk.types import Edge, NodeID, TraversalOrder

logger = get_logger(__name__)


#
# Visited bookkeeping
#
class _LabelVisitedMixin:
    """Visited set keyed by node equality."""

    _graph: Any

    def _new_visited(self) -> Set[NodeID]:
        return set()

    def _mark(self, node: NodeID) -> None:
        self._visited.add(node)

    def is_visited(self, node: NodeID) -> bool:
        return node in self._visited

    def _check_root(self, node: NodeID) -> None:
        pass

    @staticmethod
    def _edge_key(edge: Edge, undirected: bool) -> Hashable:
        if undirected:
            return frozenset((edge.src, edge.dst))
        return (edge.src, edge.dst)


class _IndexedVisitedMixin:
    """Visited table of booleans, one per node index."""

    _graph: Any

    def _new_visited(self) -> List[bool]:
        return [False] * self._graph.number_of_nodes

    def _mark(self, node: int) -> None:
        self._visited[node] = True

    def is_visited(self, node: int) -> bool:
        return self._visited[node]

    def _check_root(self, node: int) -> None:
        check_index(node, self._graph.number_of_nodes)

    @staticmethod
    def _edge_key(edge: Edge, undirected: bool) -> Tuple[int, int]:
        if undirected and edge.src > edge.dst:
            return (edge.dst, edge.src)
        return (edge.src, edge.dst)


#
# Node walkers
#
class _NodeWalkerBase:
    """Walks node identities.

    Args:
        graph: Graph to walk.
        frontier: Pending-node container. Defaults to a `StackFrontier`
            (depth-first). Pass a `QueueFrontier` for breadth-first order or a
            `HeapFrontier` for best-first order.
        order: Pre-order or post-order emission.

    Attributes:
        current_component: Number of the component being walked by
            `components()` / `traverse_nodes()`; once a whole-graph walk is
            exhausted it equals the number of components found.
    """

    def __init__(
        self,
        graph: LabelGraph,
        frontier: Optional[Frontier] = None,
        order: TraversalOrder = TraversalOrder.PRE_ORDER,
    ) -> None:
        self._graph = graph
        self._frontier: Frontier = frontier if frontier is not None else StackFrontier()
        self.order = order
        self.current_component = 0
        self._visited = self._new_visited()

    def reset(self) -> None:
        """Forget all visited nodes and pending work."""
        self._visited = self._new_visited()
        self._frontier.clear()
        self.current_component = 0

    def components(self) -> Iterator[List[NodeID]]:
        """Yield each component as a list of nodes.

        Roots are picked in the graph's node enumeration order; each root that
        is still unvisited starts a new component. For directed graphs these
        are reachability components of that root order, not strongly
        connected components.
        """
        self.reset()
        for root in self._graph.nodes():
            if not self.is_visited(root):
                yield list(self._walk(root))
                self.current_component += 1

    def traverse_nodes(self, start: Optional[NodeID] = None) -> Iterator[NodeID]:
        """Walk the graph, lazily yielding nodes.

        Args:
            start: Node to start from. If None, walk every component of the
                graph in node enumeration order.

        Yields:
            Nodes in pre-order or post-order, each exactly once.
        """
        self.reset()
        if start is not None:
            logger.debug("Walking nodes from %r (%s)", start, self.order.name)
            yield from self._walk(start)
            return

        for root in self._graph.nodes():
            if not self.is_visited(root):
                yield from self._walk(root)
                self.current_component += 1

    def resume(self, start: NodeID) -> Iterator[NodeID]:
        """Walk from ``start`` without resetting, skipping visited nodes."""
        return self._walk(start)

    def _walk(self, start: NodeID) -> Iterator[NodeID]:
        self._check_root(start)
        if self.order == TraversalOrder.POST_ORDER:
            return self._walk_post_order(start)
        return self._walk_frontier(start)

    def _walk_frontier(self, start: NodeID) -> Iterator[NodeID]:
        frontier = self._frontier
        neighbors = self._graph.neighbors
        frontier.put(start)
        while frontier:
            node = frontier.take_next()
            if self.is_visited(node):
                continue
            self._mark(node)
            yield node
            for neighbor in neighbors(node):
                if not self.is_visited(neighbor):
                    frontier.put(neighbor)

    def _walk_post_order(self, start: NodeID) -> Iterator[NodeID]:
        if self.is_visited(start):
            return
        neighbors = self._graph.neighbors
        self._mark(start)
        stack: List[Tuple[NodeID, Iterator[NodeID]]] = [(start, iter(neighbors(start)))]
        while stack:
            node, pending = stack[-1]
            for neighbor in pending:
                if not self.is_visited(neighbor):
                    self._mark(neighbor)
                    stack.append((neighbor, iter(neighbors(neighbor))))
                    break
            else:
                stack.pop()
                yield node


class NodeWalker(_LabelVisitedMixin, _NodeWalkerBase):
    """Node walker for label graphs."""


class IndexedNodeWalker(_IndexedVisitedMixin, _NodeWalkerBase):
    """Node walker for indexed graphs."""


#
# Edge walkers
#
class _EdgeWalkerBase:
    """Walks edges.

    Two visit-once modes are offered:

    * node mode (`traverse_nodes`): an edge is accepted only if its target is
      unvisited, so each reachable node is entered by exactly one edge, the
      first one taken from the frontier. With a cost-ordered heap this yields
      the shortest-path tree.
    * edge mode (`traverse_edges`): every reachable edge is accepted once.

    Args:
        graph: Graph to walk.
        frontier: Pending-edge container. Defaults to a `StackFrontier`.
    """

    def __init__(self, graph: LabelGraph, frontier: Optional[Frontier] = None) -> None:
        self._graph = graph
        self._frontier: Frontier = frontier if frontier is not None else StackFrontier()
        self._visited = self._new_visited()
        self._visited_edges: Set[Hashable] = set()

    def reset(self) -> None:
        """Forget visited nodes, visited edges and pending work."""
        self._visited = self._new_visited()
        self._visited_edges = set()
        self._frontier.clear()

    #
    # Node mode
    #
    def traverse_nodes(self, start: NodeID) -> Iterator[Edge]:
        """Yield the edge that first reaches each node reachable from ``start``."""
        self.reset()
        logger.debug("Walking tree edges from %r", start)
        yield from self.resume_nodes(start)

    def traverse_nodes_from(self, starts: Iterable[NodeID]) -> Iterator[Edge]:
        """Walk from several seeds at once.

        Every seed is marked visited and its out-edges are queued before the
        first edge is taken, so no seed is ever the target of an emitted edge.
        """
        self.reset()
        for start in starts:
            self._check_root(start)
            self._mark(start)
            for edge in self._graph.out_edges(start):
                self._frontier.put(edge)
        yield from self._drain_nodes()

    def resume_nodes(self, start: NodeID) -> Iterator[Edge]:
        """Continue a node-mode walk from ``start`` without resetting."""
        self._check_root(start)
        self._mark(start)
        for edge in self._graph.out_edges(start):
            self._frontier.put(edge)
        return self._drain_nodes()

    def _drain_nodes(self) -> Iterator[Edge]:
        frontier = self._frontier
        out_edges = self._graph.out_edges
        while frontier:
            edge = frontier.take_next()
            if self.is_visited(edge.dst):
                continue
            self._mark(edge.dst)
            yield edge
            # Queued only after the consumer has seen the edge, so a heap key
            # reads the cost the consumer just settled for edge.dst.
            for next_edge in out_edges(edge.dst):
                if not self.is_visited(next_edge.dst):
                    frontier.put(next_edge)

    #
    # Edge mode
    #
    def traverse_edges(self, start: NodeID, undirected: bool = False) -> Iterator[Edge]:
        """Yield every edge reachable from ``start`` exactly once.

        Args:
            start: Node to start from.
            undirected: Treat ``(u, v)`` and ``(v, u)`` as one edge, so a
                physical undirected edge is not walked in both directions.
        """
        self.reset()
        logger.debug("Walking all edges from %r (undirected=%s)", start, undirected)
        yield from self.resume_edges(start, undirected)

    def resume_edges(self, start: NodeID, undirected: bool = False) -> Iterator[Edge]:
        """Continue an edge-mode walk from ``start`` without resetting."""
        self._check_root(start)
        for edge in self._graph.out_edges(start):
            self._frontier.put(edge)
        return self._drain_edges(undirected)

    def _drain_edges(self, undirected: bool) -> Iterator[Edge]:
        frontier = self._frontier
        out_edges = self._graph.out_edges
        edge_key = self._edge_key
        visited_edges = self._visited_edges
        while frontier:
            edge = frontier.take_next()
            key = edge_key(edge, undirected)
            if key in visited_edges:
                continue
            visited_edges.add(key)
            yield edge
            for next_edge in out_edges(edge.dst):
                if edge_key(next_edge, undirected) not in visited_edges:
                    frontier.put(next_edge)


class EdgeWalker(_LabelVisitedMixin, _EdgeWalkerBase):
    """Edge walker for label graphs."""


class IndexedEdgeWalker(_IndexedVisitedMixin, _EdgeWalkerBase):
    """Edge walker for indexed graphs."""


#
# Factories
#
def node_walker_for(
    graph: LabelGraph,
    frontier: Optional[Frontier] = None,
    order: TraversalOrder = TraversalOrder.PRE_ORDER,
) -> _NodeWalkerBase:
    """Return the node walker matching the graph flavour."""
    if is_indexed(graph):
        return IndexedNodeWalker(graph, frontier, order)
    return NodeWalker(graph, frontier, order)


def edge_walker_for(
    graph: LabelGraph, frontier: Optional[Frontier] = None
) -> _EdgeWalkerBase:
    """Return the edge walker matching the graph flavour."""
    if is_indexed(graph):
        return IndexedEdgeWalker(graph, frontier)
    return EdgeWalker(graph, frontier)


def cost_comparer_for(
    graph: LabelGraph,
    start: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
    heuristic_weight: Optional[float] = None,
) -> PathCostComparer:
    """Return a fresh cost comparer seeded at ``start`` for the graph flavour."""
    if is_indexed(graph):
        return IndexedPathCostComparer(graph, start, edge_cost, heuristic, heuristic_weight)
    return PathCostComparer(graph, start, edge_cost, heuristic, heuristic_weight)


#
# Traversal helpers
#
def breadth_first_nodes(graph: LabelGraph, start: NodeID) -> Iterator[NodeID]:
    """Nodes reachable from ``start`` in breadth-first order."""
    return node_walker_for(graph, QueueFrontier()).traverse_nodes(start)


def depth_first_nodes(graph: LabelGraph, start: NodeID) -> Iterator[NodeID]:
    """Nodes reachable from ``start`` in depth-first pre-order."""
    return node_walker_for(graph, StackFrontier()).traverse_nodes(start)


def post_order_nodes(
    graph: LabelGraph, start: Optional[NodeID] = None
) -> Iterator[NodeID]:
    """Nodes in depth-first post-order, from ``start`` or over the whole graph."""
    walker = node_walker_for(graph, order=TraversalOrder.POST_ORDER)
    return walker.traverse_nodes(start)


def breadth_first_edges(
    graph: LabelGraph, start: NodeID, undirected: bool = False
) -> Iterator[Edge]:
    """Every edge reachable from ``start``, once, in breadth-first order."""
    return edge_walker_for(graph, QueueFrontier()).traverse_edges(start, undirected)


def depth_first_edges(
    graph: LabelGraph, start: NodeID, undirected: bool = False
) -> Iterator[Edge]:
    """Every edge reachable from ``start``, once, in depth-first order."""
    return edge_walker_for(graph, StackFrontier()).traverse_edges(start, undirected)


def dijkstra_edges(
    graph: LabelGraph,
    start: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
    comparer: Optional[PathCostComparer] = None,
) -> Iterator[Edge]:
    """Shortest-path tree edges from ``start`` in order of settled cost.

    Each yielded edge is the one that settles its target. The cost model is
    relaxed with the edge before it is yielded.

    Args:
        graph: Graph to search.
        start: Source node.
        edge_cost: Edge cost callable or `EdgeCost` kind (default: unit cost).
        heuristic: Optional estimate of remaining cost (A*). Settled costs
            stay exact only for a consistent heuristic.
        comparer: Pre-built cost comparer seeded at ``start``; overrides
            ``edge_cost`` and ``heuristic`` when given.

    Yields:
        Edge objects; edge costs must be non-negative for exact results.
    """
    if comparer is None:
        comparer = cost_comparer_for(graph, start, edge_cost, heuristic)
    walker = edge_walker_for(graph, HeapFrontier(key=comparer.path_cost))
    for edge in walker.traverse_nodes(start):
        comparer.update_cost(edge)
        yield edge


def dijkstra_edges_with_costs(
    graph: LabelGraph,
    start: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> Iterator[Tuple[Edge, float, float]]:
    """Like `dijkstra_edges`, yielding ``(edge, cost_of_src, cost_of_dst)``."""
    comparer = cost_comparer_for(graph, start, edge_cost, heuristic)
    for edge in dijkstra_edges(graph, start, comparer=comparer):
        yield edge, comparer.cost_of(edge.src), comparer.cost_of(edge.dst)


def _check_start(graph: LabelGraph, start: NodeID) -> None:
    # Runs before the start node is handed out as settled. Label graphs
    # reject unknown nodes through their own neighbour query.
    if is_indexed(graph):
        check_index(start, graph.number_of_nodes)
    else:
        graph.neighbors(start)


def dijkstra_nodes(
    graph: LabelGraph,
    start: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> Iterator[NodeID]:
    """Nodes in the order they are settled, starting with ``start``."""
    _check_start(graph, start)
    yield start
    for edge in dijkstra_edges(graph, start, edge_cost, heuristic):
        yield edge.dst


def dijkstra_nodes_with_costs(
    graph: LabelGraph,
    start: NodeID,
    edge_cost: EdgeCostSpec = None,
    heuristic: Optional[HeuristicFunc] = None,
) -> Iterator[Tuple[NodeID, float]]:
    """``(node, path_cost)`` pairs in settled order, starting with ``(start, 0.0)``."""
    _check_start(graph, start)
    yield start, 0.0
    for edge, _, cost in dijkstra_edges_with_costs(graph, start, edge_cost, heuristic):
        yield edge.dst, cost
