"""graphsuite: Generic graphs and classical graph algorithms.

graphsuite provides an in-memory graph with integer vertex ids, arbitrary
vertex and edge values, and directed or undirected orientation, together with
traversal, shortest-path, spanning-tree and max-flow algorithms.

Primary API:
    Graph - Vertex/edge-valued graph (``UNWEIGHTED`` marks unweighted edges)
    bfs(), dfs() - Traversal
    bellman_ford(), dijkstra_all(), dijkstra() - Shortest paths
    kruskal_mst(), prim_mst() - Minimum spanning trees
    edmonds_karp_max_flow() - Maximum flow
    save_graph(), load_graph(), to_dot() - Persistence and export

Example:
    from graphsuite import Graph, dijkstra

    g = Graph(directed=False)
    a, b, c = g.add_vertex("A"), g.add_vertex("B"), g.add_vertex("C")
    g.add_edge(a, b, 2)
    g.add_edge(b, c, 3)

    distance, path = dijkstra(g, a, c)  # (5, [a, b, c])
"""

from __future__ import annotations

from graphsuite import cli, logging
from graphsuite.algorithms import (
    FlowSummary,
    Handle,
    Heap,
    MaxHeap,
    MinHeap,
    PriorityQueue,
    UnionFind,
    bellman_ford,
    bellman_ford_path_vertices,
    bellman_ford_shortest_path,
    bfs,
    dfs,
    dijkstra,
    dijkstra_all,
    edmonds_karp_max_flow,
    kruskal_mst,
    mst_weight,
    prim_mst,
    to_sorted_list,
)
from graphsuite.errors import (
    DirectedGraphError,
    DisconnectedGraphError,
    EdgeNotFoundError,
    GraphError,
    GraphFormatError,
    GraphPreconditionError,
    InvalidHandleError,
    NegativeCycleError,
    NegativeWeightError,
    VertexNotFoundError,
    WeightRequiredError,
)
from graphsuite.graph import UNWEIGHTED, Graph, Unweighted
from graphsuite.graph.dot import export_to_dot, to_dot
from graphsuite.graph.io import load_graph, save_graph

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "UNWEIGHTED",
    "Unweighted",
    # Traversal
    "bfs",
    "dfs",
    # Shortest paths
    "bellman_ford",
    "bellman_ford_shortest_path",
    "bellman_ford_path_vertices",
    "dijkstra",
    "dijkstra_all",
    # Spanning trees
    "kruskal_mst",
    "prim_mst",
    "mst_weight",
    # Flow
    "edmonds_karp_max_flow",
    "FlowSummary",
    # Data structures
    "Heap",
    "Handle",
    "MinHeap",
    "MaxHeap",
    "PriorityQueue",
    "to_sorted_list",
    "UnionFind",
    # Persistence and export
    "save_graph",
    "load_graph",
    "to_dot",
    "export_to_dot",
    # Errors
    "GraphError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "InvalidHandleError",
    "GraphPreconditionError",
    "DirectedGraphError",
    "WeightRequiredError",
    "NegativeWeightError",
    "DisconnectedGraphError",
    "NegativeCycleError",
    "GraphFormatError",
    # Utilities
    "cli",
    "logging",
]
