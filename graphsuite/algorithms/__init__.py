"""Graph algorithms.

Traversal (`bfs`, `dfs`), shortest paths (`bellman_ford`, `dijkstra_all`),
minimum spanning trees (`kruskal_mst`, `prim_mst`) and maximum flow
(`edmonds_karp_max_flow`), together with the `Heap` and `UnionFind`
structures they are built on.
"""

from graphsuite.algorithms.bellman_ford import (
    bellman_ford,
    bellman_ford_path_vertices,
    bellman_ford_shortest_path,
)
from graphsuite.algorithms.dijkstra import dijkstra, dijkstra_all
from graphsuite.algorithms.heap import (
    Handle,
    Heap,
    MaxHeap,
    MinHeap,
    PriorityQueue,
    to_sorted_list,
)
from graphsuite.algorithms.max_flow import FlowSummary, edmonds_karp_max_flow
from graphsuite.algorithms.mst import kruskal_mst, mst_weight, prim_mst
from graphsuite.algorithms.traversal import bfs, dfs
from graphsuite.algorithms.union_find import UnionFind

__all__ = [
    "bfs",
    "dfs",
    "bellman_ford",
    "bellman_ford_shortest_path",
    "bellman_ford_path_vertices",
    "dijkstra",
    "dijkstra_all",
    "kruskal_mst",
    "prim_mst",
    "mst_weight",
    "edmonds_karp_max_flow",
    "FlowSummary",
    "Heap",
    "Handle",
    "MinHeap",
    "MaxHeap",
    "PriorityQueue",
    "to_sorted_list",
    "UnionFind",
]
