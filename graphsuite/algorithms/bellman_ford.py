"""Bellman-Ford single-source shortest paths.

Handles negative edge weights and reports reachable negative-weight cycles by
raising `NegativeCycleError` instead of returning partial results. Each
direction of an undirected edge is relaxed as its own arc, so a single
negative undirected edge already forms a negative cycle.
"""

from __future__ import annotations

from typing import Optional

from graphsuite.algorithms.base import (
    Cost,
    ShortestPaths,
    VertexPath,
    require_vertex,
    require_weighted,
)
from graphsuite.algorithms.paths import resolve_path
from graphsuite.config import CONFIG
from graphsuite.errors import NegativeCycleError
from graphsuite.graph.graph import Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(
    graph: Graph,
    source: VertexID,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
) -> ShortestPaths:
    """Compute shortest distances and predecessors from ``source``.

    Runs at most |V|-1 relaxation rounds over every arc, stopping early once a
    round changes nothing, then makes one verification pass.

    Args:
        graph: Weighted graph.
        source: Source vertex id.
        infinity: Distance for unreachable vertices. Defaults to
            ``CONFIG.infinity``.
        zero: Distance of the source to itself.

    Returns:
        Tuple ``(distance, predecessors)`` covering every vertex. Unreached
        vertices keep ``infinity`` and are their own predecessor, as is the
        source.

    Raises:
        WeightRequiredError: If the graph is unweighted.
        VertexNotFoundError: If ``source`` is not in the graph.
        NegativeCycleError: If a negative-weight cycle is reachable from
            ``source``.
    """
    require_weighted(graph, "Bellman-Ford")
    require_vertex(graph, source)
    if infinity is None:
        infinity = CONFIG.infinity

    distance = graph.vertex_ids_map(infinity)
    predecessors = {v: v for v in graph}
    distance[source] = zero
    arcs = graph.get_edges_positions_and_values(include_both_directions=True)

    rounds = 0
    for _ in range(graph.get_vertices_count() - 1):
        rounds += 1
        changed = False
        for src, dst, weight in arcs:
            if distance[src] == infinity:
                continue
            candidate = distance[src] + weight
            if candidate < distance[dst]:
                distance[dst] = candidate
                predecessors[dst] = src
                changed = True
        if not changed:
            break

    for src, dst, weight in arcs:
        if distance[src] != infinity and distance[src] + weight < distance[dst]:
            logger.debug("Negative cycle detected through arc %s -> %s", src, dst)
            raise NegativeCycleError("Graph contains a cycle of negative weight.")

    logger.debug(
        "Bellman-Ford from %s settled after %d round(s) over %d arcs",
        source,
        rounds,
        len(arcs),
    )
    return distance, predecessors


def bellman_ford_shortest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
) -> Cost:
    """Return the shortest distance from ``source`` to ``target``.

    ``infinity`` (default ``CONFIG.infinity``) is returned when ``target`` is
    unreachable. Raises as `bellman_ford`, plus `VertexNotFoundError` for a
    missing ``target``.
    """
    require_vertex(graph, target)
    distance, _ = bellman_ford(graph, source, infinity, zero)
    return distance[target]


def bellman_ford_path_vertices(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
) -> VertexPath:
    """Return the vertex ids of a shortest path, ``source`` first.

    The list is empty when ``target`` is unreachable. Raises as
    `bellman_ford_shortest_path`.
    """
    require_vertex(graph, target)
    if infinity is None:
        infinity = CONFIG.infinity
    distance, predecessors = bellman_ford(graph, source, infinity, zero)
    return resolve_path(source, target, distance, predecessors, infinity)
