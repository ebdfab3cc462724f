"""Minimum spanning trees: Kruskal and Prim.

Both require an undirected, weighted graph. Among equal-weight edges the
choice follows sort stability (Kruskal) or frontier order (Prim) and is not
part of the contract; only the total weight is.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set

from graphsuite.algorithms.base import (
    Cost,
    EdgeList,
    require_undirected,
    require_vertex,
    require_weighted,
)
from graphsuite.algorithms.heap import Handle, PriorityQueue
from graphsuite.algorithms.union_find import UnionFind
from graphsuite.errors import DisconnectedGraphError
from graphsuite.graph.graph import EdgePosition, Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def kruskal_mst(graph: Graph) -> EdgeList:
    """Kruskal's minimum spanning forest.

    Edges are sorted ascending by weight and accepted when their endpoints lie
    in different union-find sets. For a connected graph the result has exactly
    |V|-1 edges; for a disconnected one it spans every component.

    Args:
        graph: Undirected weighted graph.

    Returns:
        Accepted edges as ``(u, v)`` pairs, in acceptance order.

    Raises:
        DirectedGraphError: If the graph is directed.
        WeightRequiredError: If the graph is unweighted.
    """
    require_undirected(graph, "Kruskal")
    require_weighted(graph, "Kruskal")

    edges = sorted(
        graph.iter_edges(include_both_directions=False), key=lambda edge: edge[2]
    )
    sets = UnionFind(graph)
    needed = graph.get_vertices_count() - 1
    accepted: EdgeList = []

    for src, dst, _ in edges:
        if len(accepted) >= needed:
            break
        if sets.union_sets(src, dst):
            accepted.append((src, dst))

    logger.debug(
        "Kruskal accepted %d of %d edges (%d component(s))",
        len(accepted),
        len(edges),
        sets.set_count,
    )
    return accepted


def prim_mst(graph: Graph, start: Optional[VertexID] = None) -> Set[EdgePosition]:
    """Prim's minimum spanning tree.

    Grows a tree from ``start``. Every vertex outside the tree but adjacent
    to it sits in an indexed min-heap keyed by its cheapest edge into the
    tree; discovering a cheaper edge lowers the key in place.

    Args:
        graph: Undirected, connected, weighted graph.
        start: Root vertex; defaults to the lowest vertex id.

    Returns:
        Tree edges as ``(parent, child)`` pairs. Empty for an empty graph
        when ``start`` is not given.

    Raises:
        DirectedGraphError: If the graph is directed.
        WeightRequiredError: If the graph is unweighted.
        VertexNotFoundError: If ``start`` is not in the graph.
        DisconnectedGraphError: If some vertex is unreachable from ``start``.
    """
    require_undirected(graph, "Prim")
    require_weighted(graph, "Prim")
    if start is None:
        if len(graph) == 0:
            return set()
        start = min(graph)
    require_vertex(graph, start)

    in_tree = set()
    parent: Dict[VertexID, VertexID] = {}
    handles: Dict[VertexID, Handle] = {}
    frontier = PriorityQueue()
    tree: Set[EdgePosition] = set()

    def attach(vertex: VertexID) -> None:
        in_tree.add(vertex)
        for neighbour, weight in graph.get_edges_from(vertex).items():
            if neighbour in in_tree:
                continue
            handle = handles.get(neighbour)
            if handle is None:
                handles[neighbour] = frontier.insert((weight, neighbour))
                parent[neighbour] = vertex
            elif weight < frontier.get(handle)[0]:
                frontier.update(handle, (weight, neighbour))
                parent[neighbour] = vertex

    attach(start)
    while frontier:
        _, vertex = frontier.pop()
        del handles[vertex]
        tree.add((parent[vertex], vertex))
        attach(vertex)

    if len(in_tree) != len(graph):
        logger.debug(
            "Prim from %s reached %d of %d vertices", start, len(in_tree), len(graph)
        )
        raise DisconnectedGraphError(
            f"Prim requires a connected graph; {len(graph) - len(in_tree)} "
            f"vertex(es) unreachable from {start}."
        )

    logger.debug("Prim from %s built a tree of %d edges", start, len(tree))
    return tree


def mst_weight(graph: Graph, edges: Iterable[EdgePosition], zero: Cost = 0) -> Cost:
    """Sum the values of ``edges`` in ``graph``.

    Raises:
        EdgeNotFoundError: If an edge is not in the graph.
    """
    total = zero
    for src, dst in edges:
        total = total + graph.get_edge_value(src, dst)
    return total
