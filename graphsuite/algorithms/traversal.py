"""Breadth-first and depth-first traversal.

Both walks follow outgoing adjacency in its iteration order and never visit
vertices unreachable from the start. Visitor callbacks receive the vertex
value, not the id.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterator, List, Optional, Tuple

from graphsuite.algorithms.base import DistanceMap, PredecessorMap, require_vertex
from graphsuite.config import CONFIG
from graphsuite.graph.graph import Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)

Visitor = Callable[[Any], None]


def dfs(
    graph: Graph,
    start: VertexID,
    pre_visit: Optional[Visitor] = None,
    post_visit: Optional[Visitor] = None,
) -> List[VertexID]:
    """Depth-first search from ``start``.

    Iterative, so deep graphs do not hit the recursion limit. ``pre_visit``
    runs when a vertex is discovered, ``post_visit`` once all of its
    descendants are finished.

    Args:
        graph: Graph to walk.
        start: Start vertex id.
        pre_visit: Called with each vertex value in discovery order.
        post_visit: Called with each vertex value in finishing order.

    Returns:
        Vertex ids in discovery (pre-)order.

    Raises:
        VertexNotFoundError: If ``start`` is not in the graph.
    """
    require_vertex(graph, start)

    discovered = {start}
    order = [start]
    if pre_visit is not None:
        pre_visit(graph.get_vertex_value(start))
    stack: List[Tuple[VertexID, Iterator[VertexID]]] = [
        (start, iter(graph.get_neighbours(start)))
    ]

    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in discovered:
                discovered.add(neighbour)
                order.append(neighbour)
                if pre_visit is not None:
                    pre_visit(graph.get_vertex_value(neighbour))
                stack.append((neighbour, iter(graph.get_neighbours(neighbour))))
                break
        else:
            stack.pop()
            if post_visit is not None:
                post_visit(graph.get_vertex_value(vertex))

    logger.debug("DFS from %s visited %d vertices", start, len(order))
    return order


def bfs(
    graph: Graph,
    start: VertexID,
    visit: Optional[Visitor] = None,
    infinity: Optional[float] = None,
) -> Tuple[DistanceMap, PredecessorMap]:
    """Breadth-first search from ``start``.

    Args:
        graph: Graph to walk.
        start: Start vertex id.
        visit: Called with each vertex value in dequeue order.
        infinity: Distance assigned to unreached vertices. Defaults to
            ``CONFIG.infinity``.

    Returns:
        Tuple ``(distance, parent)`` covering every vertex of the graph:
          - distance: hop count from ``start``, ``infinity`` if unreached.
          - parent: BFS-tree parent; the source and unreached vertices are
            their own parent.

    Raises:
        VertexNotFoundError: If ``start`` is not in the graph.
    """
    require_vertex(graph, start)
    if infinity is None:
        infinity = CONFIG.infinity

    distance: DistanceMap = graph.vertex_ids_map(infinity)
    parent: PredecessorMap = {v: v for v in graph}
    distance[start] = 0
    queue = deque([start])

    while queue:
        vertex = queue.popleft()
        if visit is not None:
            visit(graph.get_vertex_value(vertex))
        next_hop = distance[vertex] + 1
        for neighbour in graph.get_neighbours(vertex):
            if distance[neighbour] == infinity:
                distance[neighbour] = next_hop
                parent[neighbour] = vertex
                queue.append(neighbour)

    logger.debug(
        "BFS from %s reached %d of %d vertices",
        start,
        sum(1 for d in distance.values() if d != infinity),
        len(distance),
    )
    return distance, parent
