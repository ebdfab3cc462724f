# pylint: disable=protected-access,invalid-name
import pickle

import networkx as nx
import pytest

from graphsuite.errors import (
    EdgeNotFoundError,
    GraphError,
    GraphPreconditionError,
    VertexNotFoundError,
)
from graphsuite.graph.graph import UNWEIGHTED, Graph


def test_add_vertex_assigns_monotonic_ids():
    g = Graph()
    assert g.add_vertex("A") == 0
    assert g.add_vertex("B") == 1
    assert g.next_vertex_id == 2
    assert g.get_vertices() == {0: "A", 1: "B"}


def test_removed_vertex_id_is_never_reused():
    g = Graph()
    a = g.add_vertex("A")
    g.add_vertex("B")
    assert g.remove_vertex(a) == 1
    assert g.remove_vertex(a) == 0
    assert g.add_vertex("C") == 2
    assert g.get_vertex_ids() == [1, 2]


def test_remove_vertex_drops_incident_edges(make_graph):
    g = make_graph(3, [(0, 1, 1), (1, 2, 2), (2, 0, 3)])
    g.remove_vertex(1)
    assert g.get_edges_positions() == [(2, 0)]
    assert not g.adjacent(0, 1)


def test_vertex_value_access():
    g = Graph()
    v = g.add_vertex()
    assert g.get_vertex_value(v) is None
    g.set_vertex_value(v, {"name": "x"})
    assert g.get_vertex_value(v) == {"name": "x"}


def test_missing_vertex_raises_vertex_not_found():
    g = Graph()
    with pytest.raises(VertexNotFoundError) as exc_info:
        g.get_vertex_value(7)
    assert exc_info.value.vertex == 7
    assert str(exc_info.value) == "Vertex '7' does not exist."
    # Both the package base and the built-in parent are catchable
    assert isinstance(exc_info.value, GraphError)
    assert isinstance(exc_info.value, KeyError)

    with pytest.raises(VertexNotFoundError):
        g.set_vertex_value(7, "x")
    with pytest.raises(VertexNotFoundError):
        g.get_neighbours(7)
    with pytest.raises(VertexNotFoundError):
        g.get_edges_from(7)


def test_add_edge_with_missing_endpoint_is_noop():
    g = Graph()
    a = g.add_vertex("A")
    assert g.add_edge(a, 5, 1) is False
    assert g.add_edge(5, a, 1) is False
    assert g.get_edges_count() == 0


def test_add_edge_overwrites_value():
    g = Graph()
    a, b = g.add_vertex("A"), g.add_vertex("B")
    assert g.add_edge(a, b, 1)
    assert g.add_edge(a, b, 4)
    assert g.get_edge_value(a, b) == 4
    assert g.get_edges_count() == 1


def test_weightedness_is_enforced_on_add_edge():
    weighted = Graph(weighted=True)
    a, b = weighted.add_vertex(), weighted.add_vertex()
    with pytest.raises(GraphPreconditionError):
        weighted.add_edge(a, b)

    unweighted = Graph(weighted=False)
    a, b = unweighted.add_vertex(), unweighted.add_vertex()
    with pytest.raises(GraphPreconditionError):
        unweighted.add_edge(a, b, 3)
    assert unweighted.add_edge(a, b)
    assert unweighted.get_edge_value(a, b) is UNWEIGHTED


def test_directed_edge_is_one_way():
    g = Graph(directed=True)
    a, b = g.add_vertex(), g.add_vertex()
    g.add_edge(a, b, 2)
    assert g.adjacent(a, b)
    assert not g.adjacent(b, a)
    assert g.get_neighbours(b) == []
    with pytest.raises(EdgeNotFoundError) as exc_info:
        g.get_edge_value(b, a)
    assert str(exc_info.value) == "No edge from '1' to '0'."


def test_undirected_edge_is_symmetric():
    g = Graph(directed=False)
    a, b = g.add_vertex(), g.add_vertex()
    g.add_edge(a, b, 2)
    assert g.adjacent(b, a)
    assert g.get_edge_value(b, a) == 2
    g.update_edge_value(b, a, 9)
    assert g.get_edge_value(a, b) == 9
    assert g.get_edges_count() == 1
    assert g.remove_edge(b, a) == 1
    assert not g.adjacent(a, b)
    assert g.remove_edge(a, b) == 0


def test_undirected_self_loop_stored_once():
    g = Graph(directed=False)
    a = g.add_vertex()
    g.add_edge(a, a, 1)
    assert g.get_edges_positions() == [(a, a)]
    assert g.get_edges_count() == 1


def test_update_edge_value_errors():
    g = Graph()
    a, b = g.add_vertex(), g.add_vertex()
    with pytest.raises(EdgeNotFoundError):
        g.update_edge_value(a, b, 1)

    u = Graph(weighted=False)
    a, b = u.add_vertex(), u.add_vertex()
    u.add_edge(a, b)
    with pytest.raises(GraphPreconditionError):
        u.update_edge_value(a, b, 1)


def test_get_edges_from_returns_a_copy(make_graph):
    g = make_graph(2, [(0, 1, 5)])
    adjacency = g.get_edges_from(0)
    adjacency[1] = 100
    adjacency[7] = 1
    assert g.get_edge_value(0, 1) == 5
    assert g.get_neighbours(0) == [1]


def test_edge_listings_respect_direction_flag(cities):
    g, _ = cities
    assert len(g.get_edges_positions()) == 22
    once = g.get_edges_positions_and_values(include_both_directions=False)
    assert len(once) == 11
    assert sum(w for _, _, w in once) == 2134


def test_copy_is_deep_and_equal(cities):
    g, ids = cities
    clone = g.copy()
    assert clone == g
    assert clone.next_vertex_id == g.next_vertex_id

    clone.update_edge_value(ids["Praha"], ids["Brno"], 1)
    clone.set_vertex_value(ids["Most"], "Teplice")
    assert g.get_edge_value(ids["Praha"], ids["Brno"]) == 205
    assert g.get_vertex_value(ids["Most"]) == "Most"
    assert clone != g


def test_unweighted_marker_survives_copy_and_pickle():
    g = Graph(weighted=False)
    a, b = g.add_vertex(), g.add_vertex()
    g.add_edge(a, b)
    assert g.copy().get_edge_value(a, b) is UNWEIGHTED
    assert pickle.loads(pickle.dumps(UNWEIGHTED)) is UNWEIGHTED
    assert g.copy() == g


def test_to_directed_doubles_undirected_edges(cities):
    g, ids = cities
    d = g.to_directed()
    assert d.directed
    assert d.get_edges_count() == 22
    assert d.get_vertices() == g.get_vertices()
    assert d.get_edge_value(ids["Brno"], ids["Praha"]) == 205
    d.update_edge_value(ids["Brno"], ids["Praha"], 1)
    assert d.get_edge_value(ids["Praha"], ids["Brno"]) == 205
    assert g.get_edge_value(ids["Brno"], ids["Praha"]) == 205


def test_equality_considers_orientation_and_values():
    a = Graph(directed=True)
    b = Graph(directed=False)
    assert a != b
    assert Graph() == Graph()
    assert Graph(weighted=False) != Graph(weighted=True)
    assert (Graph() == "graph") is False


def test_protocol_methods(make_graph):
    g = make_graph(3, [(0, 1, 1)])
    assert len(g) == 3
    assert list(g) == [0, 1, 2]
    assert 2 in g
    assert 3 not in g
    assert g.has_vertex(0)
    assert repr(g) == "Graph(directed, weighted, vertices=3, edges=1)"
    with pytest.raises(TypeError):
        hash(g)


def test_vertex_ids_map(make_graph):
    g = make_graph(3, [])
    assert g.vertex_ids_map(float("inf")) == {0: float("inf"), 1: float("inf"), 2: float("inf")}
    assert g.vertex_ids_map() == {0: None, 1: None, 2: None}


def test_format_listings():
    g = Graph(directed=False)
    a, b = g.add_vertex("Praha"), g.add_vertex("Brno")
    g.add_edge(a, b, 205)
    assert g.format_vertices() == "0. Praha\n1. Brno"
    assert g.format_edges() == "Praha -- Brno [205]"

    d = Graph(weighted=False)
    a, b = d.add_vertex("x"), d.add_vertex("y")
    d.add_edge(a, b)
    assert d.format_edges() == "x -> y"


class TestNetworkXInterop:
    def test_to_networkx_matches_graph(self, city_digraph):
        nxg = city_digraph.to_networkx()
        assert isinstance(nxg, nx.DiGraph)
        assert nxg.number_of_edges() == 5
        assert nxg[0][1]["value"] == 205
        assert nxg.nodes[0]["value"] == "Praha"
        nxg[0][1]["value"] = 0
        assert city_digraph.get_edge_value(0, 1) == 205

    def test_from_networkx_maps_nodes(self):
        nxg = nx.Graph()
        nxg.add_edge("a", "b", weight=3)
        nxg.add_edge("b", "c", weight=4)
        g, node_map = Graph.from_networkx(nxg)
        assert not g.directed
        assert g.get_vertex_value(node_map["b"]) == "b"
        assert g.get_edge_value(node_map["c"], node_map["b"]) == 4

    def test_from_networkx_node_value_attr(self):
        nxg = nx.DiGraph()
        nxg.add_node("a", label="Alpha")
        nxg.add_node("b", label="Beta")
        nxg.add_edge("a", "b")
        g, node_map = Graph.from_networkx(nxg, weighted=False, node_value_attr="label")
        assert g.get_vertex_value(node_map["a"]) == "Alpha"
        assert g.get_edge_value(node_map["a"], node_map["b"]) is UNWEIGHTED

    def test_from_networkx_rejects_multigraph(self):
        with pytest.raises(GraphPreconditionError):
            Graph.from_networkx(nx.MultiGraph())

    def test_from_networkx_requires_weight_attr(self):
        nxg = nx.Graph()
        nxg.add_edge(1, 2)
        with pytest.raises(GraphPreconditionError):
            Graph.from_networkx(nxg)
