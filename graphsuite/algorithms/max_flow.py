"""Edmonds-Karp maximum flow.

Works on private copies of the input: a directed residual-capacity network
(undirected edges become two opposite arcs of equal capacity, and every arc
without a reverse partner gets a zero-capacity one) and a parallel flow
network initialized to zero. Each iteration finds a shortest augmenting path
by BFS over arcs whose capacity exceeds their flow, pushes the bottleneck
along it (``+`` forward, ``-`` on the reverse arc) and stops when the sink is
no longer reachable. The caller's graph is never mutated.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Set, Tuple, Union, overload

from graphsuite.algorithms.base import Cost, require_vertex, require_weighted
from graphsuite.config import CONFIG
from graphsuite.graph.graph import EdgePosition, Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Positive flow per arc, indexed by ``(src, dst)``.
        residual_cap: Remaining capacity (capacity minus flow) per arc of the
            residual network, including zero-capacity reverse arcs.
        reachable: Vertices reachable from the source in the final residual
            network.
        min_cut: Arcs with positive capacity leaving ``reachable``.
    """

    total_flow: Cost
    edge_flow: Dict[EdgePosition, Cost]
    residual_cap: Dict[EdgePosition, Cost]
    reachable: Set[VertexID]
    min_cut: List[EdgePosition]


def _build_residual(graph: Graph, zero: Cost) -> Tuple[Graph, Graph]:
    capacity = graph.to_directed()
    for src, dst in capacity.get_edges_positions():
        if not capacity.adjacent(dst, src):
            capacity.add_edge(dst, src, zero)

    flow = capacity.copy()
    for src, dst in flow.get_edges_positions():
        flow.update_edge_value(src, dst, zero)
    return capacity, flow


def _augmenting_bfs(
    capacity: Graph, flow: Graph, source: VertexID, sink: VertexID
) -> Dict[VertexID, VertexID]:
    """BFS over arcs with spare capacity; returns the predecessor of each reached vertex."""
    parent = {source: source}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        for neighbour, cap in capacity.get_edges_from(vertex).items():
            if neighbour in parent:
                continue
            if cap > flow.get_edge_value(vertex, neighbour):
                parent[neighbour] = vertex
                if neighbour == sink:
                    return parent
                queue.append(neighbour)
    return parent


@overload
def edmonds_karp_max_flow(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
    return_summary: Literal[False] = False,
) -> Tuple[Cost, Graph]: ...


@overload
def edmonds_karp_max_flow(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
    return_summary: Literal[True],
) -> Tuple[Cost, Graph, FlowSummary]: ...


def edmonds_karp_max_flow(
    graph: Graph,
    source: VertexID,
    sink: VertexID,
    *,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
    return_summary: bool = False,
) -> Union[Tuple[Cost, Graph], Tuple[Cost, Graph, FlowSummary]]:
    """Compute the maximum flow from ``source`` to ``sink``.

    Edge values are capacities.

    Args:
        graph: Weighted graph; directed or undirected.
        source: Source vertex id.
        sink: Sink vertex id.
        infinity: Initial bottleneck bound; must exceed any capacity.
            Defaults to ``CONFIG.infinity``.
        zero: Zero flow value of the capacity type.
        return_summary: If True, also return a `FlowSummary`.

    Returns:
        ``(max_flow, flow_graph)``, or ``(max_flow, flow_graph, summary)``
        when ``return_summary`` is set. ``flow_graph`` is directed, shares the
        input's vertex ids and holds the skew-symmetric flow of every
        residual arc (reverse arcs carry the negated flow).

    Raises:
        WeightRequiredError: If the graph is unweighted.
        VertexNotFoundError: If ``source`` or ``sink`` is not in the graph.

    Examples:
        >>> g = Graph()
        >>> s, t = g.add_vertex("S"), g.add_vertex("T")
        >>> g.add_edge(s, t, 5)
        True
        >>> edmonds_karp_max_flow(g, s, t)[0]
        5
    """
    require_weighted(graph, "Edmonds-Karp")
    require_vertex(graph, source)
    require_vertex(graph, sink)
    if infinity is None:
        infinity = CONFIG.infinity

    capacity, flow = _build_residual(graph, zero)
    max_flow = zero
    augmentations = 0

    # Degenerate case (source == sink): conservation forces zero flow.
    if source != sink:
        while True:
            parent = _augmenting_bfs(capacity, flow, source, sink)
            if sink not in parent:
                break

            bottleneck = infinity
            vertex = sink
            while vertex != source:
                prev = parent[vertex]
                residual = capacity.get_edge_value(prev, vertex) - flow.get_edge_value(
                    prev, vertex
                )
                if residual < bottleneck:
                    bottleneck = residual
                vertex = prev

            vertex = sink
            while vertex != source:
                prev = parent[vertex]
                flow.update_edge_value(
                    prev, vertex, flow.get_edge_value(prev, vertex) + bottleneck
                )
                flow.update_edge_value(
                    vertex, prev, flow.get_edge_value(vertex, prev) - bottleneck
                )
                vertex = prev

            max_flow = max_flow + bottleneck
            augmentations += 1

    logger.debug(
        "Edmonds-Karp %s -> %s: max flow %s after %d augmentation(s)",
        source,
        sink,
        max_flow,
        augmentations,
    )
    if not return_summary:
        return max_flow, flow
    return max_flow, flow, _summarize(capacity, flow, source, sink, max_flow, zero)


def _summarize(
    capacity: Graph,
    flow: Graph,
    source: VertexID,
    sink: VertexID,
    max_flow: Cost,
    zero: Cost,
) -> FlowSummary:
    edge_flow: Dict[EdgePosition, Cost] = {}
    residual_cap: Dict[EdgePosition, Cost] = {}
    for src, dst, cap in capacity.iter_edges():
        placed = flow.get_edge_value(src, dst)
        residual_cap[(src, dst)] = cap - placed
        if placed > zero:
            edge_flow[(src, dst)] = placed

    # After a completed run the sink is unreachable, so this BFS is exhaustive.
    reachable = set(_augmenting_bfs(capacity, flow, source, sink))
    min_cut = [
        (src, dst)
        for src, dst, cap in capacity.iter_edges()
        if src in reachable and dst not in reachable and cap > zero
    ]
    return FlowSummary(
        total_flow=max_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
    )
