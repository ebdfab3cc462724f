"""Shared graph fixtures.

Vertex ids follow insertion order (the first vertex added is 0).
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple

import pytest

from graphsuite.graph.graph import Graph


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Factory: ``make_graph(n, edges, directed=True, weighted=True)``.

    Vertices get values ``"v0" .. "v{n-1}"``; edges are ``(u, v, w)`` triples,
    or ``(u, v)`` pairs when ``weighted=False``.
    """

    def _make(
        n: int,
        edges: Iterable[tuple],
        directed: bool = True,
        weighted: bool = True,
    ) -> Graph:
        g = Graph(directed=directed, weighted=weighted)
        for i in range(n):
            g.add_vertex(f"v{i}")
        for edge in edges:
            g.add_edge(*edge)
        return g

    return _make


@pytest.fixture
def cities() -> Tuple[Graph, Dict[str, int]]:
    # Undirected road distances:
    #
    #   Plzen(5) ──94── Praha(0) ──127── Karlovy Vary(4)
    #                  /  │   \                │
    #               100  124   205            334
    #                /    │      \             │
    #         Most(6) ─205─ Pardubice(3) ─147─ Brno(1)
    #                       │                  │
    #                      233                170
    #                       │                  │
    #                       └── Ostrava(2) ────┘
    #
    #   plus Plzen -- Brno (395)
    #
    g = Graph(directed=False)
    names = ["Praha", "Brno", "Ostrava", "Pardubice", "Karlovy Vary", "Plzen", "Most"]
    ids = {name: g.add_vertex(name) for name in names}
    for a, b, km in [
        ("Praha", "Brno", 205),
        ("Brno", "Ostrava", 170),
        ("Ostrava", "Pardubice", 233),
        ("Praha", "Pardubice", 124),
        ("Pardubice", "Brno", 147),
        ("Praha", "Karlovy Vary", 127),
        ("Brno", "Karlovy Vary", 334),
        ("Plzen", "Brno", 395),
        ("Plzen", "Praha", 94),
        ("Most", "Praha", 100),
        ("Most", "Pardubice", 205),
    ]:
        g.add_edge(ids[a], ids[b], km)
    return g, ids


@pytest.fixture
def city_digraph() -> Graph:
    # Directed:
    #
    #   Praha(0) ──205──► Brno(1) ──170──► Ostrava(2)
    #      │               ▲                  │
    #     124             147                233
    #      ▼               │                  │
    #   Pardubice(3) ──────┘ ◄────────────────┘
    #
    g = Graph(directed=True)
    praha, brno, ostrava, pardubice = (
        g.add_vertex(name) for name in ("Praha", "Brno", "Ostrava", "Pardubice")
    )
    g.add_edge(praha, brno, 205)
    g.add_edge(brno, ostrava, 170)
    g.add_edge(ostrava, pardubice, 233)
    g.add_edge(praha, pardubice, 124)
    g.add_edge(pardubice, brno, 147)
    return g


@pytest.fixture
def mst_graph() -> Graph:
    # Undirected, MST weight 39:
    #
    #   A-B 7   A-D 5   B-C 8   B-D 9   B-E 7   C-E 5
    #   D-E 15  D-F 6   E-F 8   E-G 9   F-G 11
    #
    g = Graph(directed=False)
    a, b, c, d, e, f, gg = (g.add_vertex(name) for name in "ABCDEFG")
    for u, v, w in [
        (a, b, 7),
        (a, d, 5),
        (b, d, 9),
        (b, c, 8),
        (b, e, 7),
        (c, e, 5),
        (d, e, 15),
        (d, f, 6),
        (e, f, 8),
        (e, gg, 9),
        (f, gg, 11),
    ]:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def flow_network() -> Tuple[Graph, Dict[str, int]]:
    # Directed capacities, max flow S->T is 19 (min cut S->A, B->D):
    #
    #   S->A 10   A->B 2   A->D 8   D->C 6   C->T 10
    #   S->B 10   A->C 4   B->D 9   D->T 10
    #
    g = Graph(directed=True)
    ids = {name: g.add_vertex(name) for name in "ABCDST"}
    for u, v, cap in [
        ("S", "A", 10),
        ("S", "B", 10),
        ("A", "B", 2),
        ("A", "D", 8),
        ("B", "D", 9),
        ("A", "C", 4),
        ("D", "C", 6),
        ("D", "T", 10),
        ("C", "T", 10),
    ]:
        g.add_edge(ids[u], ids[v], cap)
    return g, ids
