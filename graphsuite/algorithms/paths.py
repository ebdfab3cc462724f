"""Path reconstruction from predecessor maps."""

from __future__ import annotations

from graphsuite.algorithms.base import DistanceMap, PredecessorMap, VertexPath
from graphsuite.graph.graph import VertexID


def resolve_path(
    source: VertexID,
    target: VertexID,
    distance: DistanceMap,
    predecessors: PredecessorMap,
    infinity: float,
) -> VertexPath:
    """Walk predecessors back from ``target`` to ``source``.

    Args:
        source: Start of the path.
        target: End of the path.
        distance: Distance map of the same run; ``infinity`` marks unreached.
        predecessors: Predecessor map of the same run.
        infinity: Sentinel used for unreached vertices in that run.

    Returns:
        Vertex ids ordered from ``source`` to ``target``, or an empty list
        when ``target`` was not reached.
    """
    if distance[target] == infinity:
        return []
    path = [target]
    current = target
    while current != source:
        previous = predecessors[current]
        if previous == current:
            # Chain ends before reaching the source
            return []
        current = previous
        path.append(current)
    path.reverse()
    return path
