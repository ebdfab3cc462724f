"""Shared aliases and precondition guards for the algorithm suite."""

from __future__ import annotations

from typing import Dict, List, Tuple, Union

from graphsuite.errors import (
    DirectedGraphError,
    VertexNotFoundError,
    WeightRequiredError,
)
from graphsuite.graph.graph import EdgePosition, Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)

#: Numeric edge weight / path length. Any type supporting ``+`` and ``<``
#: works; ``int`` and ``float`` are what the defaults assume.
Cost = Union[int, float]

#: Per-vertex distance from a source.
DistanceMap = Dict[VertexID, Cost]

#: Per-vertex predecessor on a shortest-path or BFS tree. Self-referential for
#: the source and for unreached vertices.
PredecessorMap = Dict[VertexID, VertexID]

#: Result of a single-source shortest-path computation.
ShortestPaths = Tuple[DistanceMap, PredecessorMap]

#: Vertex ids from source to target, inclusive.
VertexPath = List[VertexID]

EdgeList = List[EdgePosition]


def require_weighted(graph: Graph, algorithm: str) -> None:
    """Raise `WeightRequiredError` unless ``graph`` carries edge values."""
    if not graph.weighted:
        logger.debug("%s rejected unweighted %r", algorithm, graph)
        raise WeightRequiredError(f"{algorithm} requires a weighted graph.")


def require_undirected(graph: Graph, algorithm: str) -> None:
    """Raise `DirectedGraphError` if ``graph`` is directed."""
    if graph.directed:
        logger.debug("%s rejected directed %r", algorithm, graph)
        raise DirectedGraphError(f"{algorithm} requires an undirected graph.")


def require_vertex(graph: Graph, vertex: VertexID) -> None:
    """Raise `VertexNotFoundError` if ``vertex`` is not in ``graph``."""
    if vertex not in graph:
        raise VertexNotFoundError(vertex)
