"""Dijkstra single-source shortest paths over non-negative weights.

The frontier is an indexed min-priority `Heap` of ``(distance, vertex)``
pairs. When a shorter tentative distance is found for a vertex already in the
frontier, its entry is lowered in place through the handle kept for it, so
every vertex is in the frontier at most once.

Negative edge weights are rejected up front with `NegativeWeightError`; use
`bellman_ford` for such graphs.

Notes:
    When a target is given, the search stops once the target is settled. The
    target is not expanded, and vertices farther away than the target keep
    whatever tentative distance they had reached.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from graphsuite.algorithms.base import (
    Cost,
    ShortestPaths,
    VertexPath,
    require_vertex,
    require_weighted,
)
from graphsuite.algorithms.heap import Handle, PriorityQueue
from graphsuite.algorithms.paths import resolve_path
from graphsuite.config import CONFIG
from graphsuite.errors import NegativeWeightError
from graphsuite.graph.graph import Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def _check_non_negative(graph: Graph, zero: Cost) -> None:
    for src, dst, weight in graph.iter_edges(include_both_directions=False):
        if weight < zero:
            logger.debug("Dijkstra rejected negative arc %s -> %s (%s)", src, dst, weight)
            raise NegativeWeightError(
                f"Dijkstra requires non-negative weights; edge ({src}, {dst}) "
                f"has weight {weight}."
            )


def _dijkstra(
    graph: Graph,
    source: VertexID,
    target: Optional[VertexID],
    infinity: Cost,
    zero: Cost,
) -> ShortestPaths:
    require_weighted(graph, "Dijkstra")
    require_vertex(graph, source)
    if target is not None:
        require_vertex(graph, target)
    _check_non_negative(graph, zero)

    distance = graph.vertex_ids_map(infinity)
    predecessors = {v: v for v in graph}
    distance[source] = zero

    frontier = PriorityQueue()
    handles: Dict[VertexID, Handle] = {source: frontier.insert((zero, source))}
    settled = set()

    while frontier:
        current_cost, vertex = frontier.pop()
        del handles[vertex]
        settled.add(vertex)
        if vertex == target:
            break

        for neighbour, weight in graph.get_edges_from(vertex).items():
            if neighbour in settled:
                continue
            new_cost = current_cost + weight
            if new_cost < distance[neighbour]:
                distance[neighbour] = new_cost
                predecessors[neighbour] = vertex
                handle = handles.get(neighbour)
                if handle is None:
                    handles[neighbour] = frontier.insert((new_cost, neighbour))
                else:
                    frontier.update(handle, (new_cost, neighbour))

    logger.debug("Dijkstra from %s settled %d vertices", source, len(settled))
    return distance, predecessors


def dijkstra_all(
    graph: Graph,
    source: VertexID,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
) -> ShortestPaths:
    """Compute shortest distances and predecessors from ``source``.

    Args:
        graph: Weighted graph with non-negative edge values.
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
        NegativeWeightError: If any edge value is below ``zero``.
    """
    if infinity is None:
        infinity = CONFIG.infinity
    return _dijkstra(graph, source, None, infinity, zero)


def dijkstra(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    infinity: Optional[Cost] = None,
    zero: Cost = 0,
) -> Tuple[Cost, VertexPath]:
    """Find a shortest path from ``source`` to ``target``.

    Returns:
        Tuple ``(distance, path)``. ``path`` lists vertex ids from ``source``
        to ``target``; when unreachable, ``distance`` is ``infinity`` and
        ``path`` is empty.

    Raises:
        WeightRequiredError: If the graph is unweighted.
        VertexNotFoundError: If ``source`` or ``target`` is not in the graph.
        NegativeWeightError: If any edge value is below ``zero``.
    """
    if infinity is None:
        infinity = CONFIG.infinity
    distance, predecessors = _dijkstra(graph, source, target, infinity, zero)
    return distance[target], resolve_path(
        source, target, distance, predecessors, infinity
    )
