"""Graph primitives and helpers.

This package provides the `Graph` type with its `UNWEIGHTED` edge marker,
plus helper modules for persistence (`io`) and DOT export (`dot`).
"""

from graphsuite.graph.graph import (
    UNWEIGHTED,
    EdgePosition,
    EdgeTriple,
    Graph,
    Unweighted,
    VertexID,
)

__all__ = [
    "Graph",
    "UNWEIGHTED",
    "Unweighted",
    "VertexID",
    "EdgePosition",
    "EdgeTriple",
]
