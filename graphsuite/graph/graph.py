"""Generic vertex/edge-valued graph with directed and undirected modes.

`Graph` owns integer vertex ids (monotonically assigned, never reused), an
arbitrary value per vertex, and per-vertex adjacency mappings from neighbor id
to edge value. Storage is delegated to a NetworkX ``DiGraph`` (directed) or
``Graph`` (undirected), which keeps the undirected adjacency symmetric and
stores a self-loop once. Values live under the ``"value"`` attribute.

Unweighted graphs store the `UNWEIGHTED` marker as every edge value; the
algorithm suite refuses arithmetic on such graphs.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

import networkx as nx

from graphsuite.errors import (
    EdgeNotFoundError,
    GraphPreconditionError,
    VertexNotFoundError,
)

VertexID = int
EdgeValue = Any
VertexValue = Any
EdgePosition = Tuple[VertexID, VertexID]
EdgeTriple = Tuple[VertexID, VertexID, EdgeValue]

VALUE_ATTR = "value"


class Unweighted:
    """Marker type for the edge value of an unweighted graph.

    There is exactly one instance, `UNWEIGHTED`; it survives pickling as the
    same object so copies of unweighted graphs compare equal.
    """

    _instance: Optional["Unweighted"] = None

    def __new__(cls) -> "Unweighted":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNWEIGHTED"

    def __reduce__(self) -> str:
        return "UNWEIGHTED"


UNWEIGHTED = Unweighted()


class Graph:
    """A graph with integer vertex ids, vertex values and edge values.

    Edge insertion with a missing endpoint is a silent no-op (``add_edge``
    returns False). Value lookups on missing vertices or edges raise
    `VertexNotFoundError` / `EdgeNotFoundError`.

    Attributes:
        directed: Orientation, fixed at construction.
        weighted: Whether edges carry values, fixed at construction.
    """

    def __init__(self, directed: bool = True, weighted: bool = True) -> None:
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._g: nx.Graph = nx.DiGraph() if self._directed else nx.Graph()
        # Only advances; removed vertex ids are never handed out again.
        self._next_vertex_id: int = 0

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def next_vertex_id(self) -> VertexID:
        """The id the next ``add_vertex`` call will return."""
        return self._next_vertex_id

    def copy(self) -> Graph:
        """Return an independent deep copy (pickle-based).

        Returns:
            Graph: A new graph equal to this one sharing no mutable state.
        """
        return loads(dumps(self))

    def to_directed(self) -> Graph:
        """Return a directed deep copy with the same vertex ids.

        Each undirected edge becomes two opposite arcs with equal values. For
        a directed graph this is the same as `copy`.
        """
        if self._directed:
            return self.copy()
        result = Graph(directed=True, weighted=self._weighted)
        payload = loads(dumps((self.get_vertices(), list(self.iter_edges()))))
        vertices, arcs = payload
        for vertex, value in vertices.items():
            result._insert_vertex(vertex, value)
        for src, dst, value in arcs:
            result._g.add_edge(src, dst, **{VALUE_ATTR: value})
        result._next_vertex_id = self._next_vertex_id
        return result

    #
    # Vertex management
    #
    def add_vertex(self, value: VertexValue = None) -> VertexID:
        """Add a vertex holding ``value`` and return its new id."""
        vertex = self._next_vertex_id
        self._next_vertex_id += 1
        self._g.add_node(vertex, **{VALUE_ATTR: value})
        return vertex

    def _insert_vertex(self, vertex: VertexID, value: VertexValue) -> None:
        """Insert a vertex under an explicit id (used when restoring a graph)."""
        if vertex < 0:
            raise GraphPreconditionError(f"Vertex id {vertex} is negative.")
        if vertex in self._g:
            raise GraphPreconditionError(f"Vertex '{vertex}' already exists.")
        self._g.add_node(vertex, **{VALUE_ATTR: value})
        if vertex >= self._next_vertex_id:
            self._next_vertex_id = vertex + 1

    def remove_vertex(self, vertex: VertexID) -> int:
        """Remove a vertex and every edge referencing it.

        Returns:
            int: Number of vertices removed (0 or 1).
        """
        if vertex not in self._g:
            return 0
        self._g.remove_node(vertex)
        return 1

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._g

    def get_vertex_value(self, vertex: VertexID) -> VertexValue:
        """Return the value stored in ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        try:
            return self._g.nodes[vertex][VALUE_ATTR]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def set_vertex_value(self, vertex: VertexID, value: VertexValue) -> None:
        """Replace the value stored in ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if vertex not in self._g:
            raise VertexNotFoundError(vertex)
        self._g.nodes[vertex][VALUE_ATTR] = value

    def get_vertices(self) -> Dict[VertexID, VertexValue]:
        """Map every vertex id to its value, in insertion order."""
        return {v: data[VALUE_ATTR] for v, data in self._g.nodes(data=True)}

    def get_vertex_ids(self) -> List[VertexID]:
        return list(self._g.nodes)

    def vertex_ids_map(self, default: Any = None) -> Dict[VertexID, Any]:
        """Return ``{vertex_id: default}`` for every vertex.

        Algorithms use this to seed per-vertex result maps.
        """
        return dict.fromkeys(self._g.nodes, default)

    def get_vertices_count(self) -> int:
        return self._g.number_of_nodes()

    #
    # Edge management
    #
    def add_edge(
        self, src: VertexID, dst: VertexID, value: EdgeValue = UNWEIGHTED
    ) -> bool:
        """Insert (or overwrite) the edge ``src -> dst``.

        For undirected graphs the edge is visible from both endpoints.

        Args:
            src: Source vertex id.
            dst: Destination vertex id.
            value: Edge value. Required for weighted graphs, must be omitted
                for unweighted graphs.

        Returns:
            bool: False if either endpoint does not exist (nothing changes),
            True otherwise.

        Raises:
            GraphPreconditionError: If ``value`` does not match the graph's
                weightedness.
        """
        if self._weighted and value is UNWEIGHTED:
            raise GraphPreconditionError("Weighted graph requires an edge value.")
        if not self._weighted and value is not UNWEIGHTED:
            raise GraphPreconditionError("Unweighted graph does not take edge values.")
        if src not in self._g or dst not in self._g:
            return False
        self._g.add_edge(src, dst, **{VALUE_ATTR: value})
        return True

    def remove_edge(self, src: VertexID, dst: VertexID) -> int:
        """Remove the edge ``src -> dst`` (both directions if undirected).

        Returns:
            int: Number of edges removed (0 or 1).
        """
        if not self._g.has_edge(src, dst):
            return 0
        self._g.remove_edge(src, dst)
        return 1

    def adjacent(self, src: VertexID, dst: VertexID) -> bool:
        """Return True if an edge ``src -> dst`` exists."""
        return self._g.has_edge(src, dst)

    def get_edge_value(self, src: VertexID, dst: VertexID) -> EdgeValue:
        """Return the value of edge ``src -> dst``.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        try:
            return self._g.adj[src][dst][VALUE_ATTR]
        except KeyError:
            raise EdgeNotFoundError(src, dst) from None

    def update_edge_value(self, src: VertexID, dst: VertexID, value: EdgeValue) -> None:
        """Replace the value of an existing edge.

        Undirected edges share one attribute dict, so both directions change
        together.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
            GraphPreconditionError: If the graph is unweighted.
        """
        if not self._weighted:
            raise GraphPreconditionError("Unweighted graph does not take edge values.")
        if not self._g.has_edge(src, dst):
            raise EdgeNotFoundError(src, dst)
        self._g.adj[src][dst][VALUE_ATTR] = value

    def get_neighbours(self, vertex: VertexID) -> List[VertexID]:
        """List the ids reachable over one outgoing edge of ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if vertex not in self._g:
            raise VertexNotFoundError(vertex)
        return list(self._g.adj[vertex])

    def get_edges_from(self, vertex: VertexID) -> Dict[VertexID, EdgeValue]:
        """Return a copy of the outgoing adjacency mapping of ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        if vertex not in self._g:
            raise VertexNotFoundError(vertex)
        return {dst: attr[VALUE_ATTR] for dst, attr in self._g.adj[vertex].items()}

    def iter_edges(self, include_both_directions: bool = True) -> Iterator[EdgeTriple]:
        """Yield ``(src, dst, value)`` for every adjacency entry.

        Args:
            include_both_directions: For undirected graphs, yield each edge
                from both endpoints. When False, each undirected edge is
                yielded once. Ignored for directed graphs.
        """
        if self._directed or not include_both_directions:
            for src, dst, value in self._g.edges(data=VALUE_ATTR):
                yield src, dst, value
            return
        for src, nbrs in self._g.adj.items():
            for dst, attr in nbrs.items():
                yield src, dst, attr[VALUE_ATTR]

    def get_edges_positions(
        self, include_both_directions: bool = True
    ) -> List[EdgePosition]:
        """List ``(src, dst)`` pairs; see `iter_edges` for the flag."""
        return [(s, d) for s, d, _ in self.iter_edges(include_both_directions)]

    def get_edges_positions_and_values(
        self, include_both_directions: bool = True
    ) -> List[EdgeTriple]:
        """List ``(src, dst, value)`` triples; see `iter_edges` for the flag."""
        return list(self.iter_edges(include_both_directions))

    def get_edges_count(self) -> int:
        """Number of edges (an undirected edge counts once)."""
        return self._g.number_of_edges()

    #
    # Listings
    #
    def format_vertices(self) -> str:
        """Return one ``id. value`` line per vertex."""
        return "\n".join(f"{v}. {value}" for v, value in self.get_vertices().items())

    def format_edges(self) -> str:
        """Return one line per edge naming both endpoint values."""
        connector = "->" if self._directed else "--"
        lines = []
        for src, dst, value in self.iter_edges(include_both_directions=False):
            line = (
                f"{self.get_vertex_value(src)} {connector} {self.get_vertex_value(dst)}"
            )
            if self._weighted:
                line += f" [{value}]"
            lines.append(line)
        return "\n".join(lines)

    #
    # NetworkX interop
    #
    def to_networkx(self) -> nx.Graph:
        """Return a NetworkX copy; values stay under the ``"value"`` attribute."""
        return self._g.copy()

    @classmethod
    def from_networkx(
        cls,
        nx_graph: nx.Graph,
        weighted: bool = True,
        value_attr: Optional[str] = "weight",
        node_value_attr: Optional[str] = None,
    ) -> Tuple[Graph, Dict[Hashable, VertexID]]:
        """Build a `Graph` from a NetworkX graph.

        Multigraphs are not supported.

        Args:
            nx_graph: Source graph. Its orientation is preserved.
            weighted: Whether to read edge values.
            value_attr: Edge attribute holding the edge value.
            node_value_attr: Node attribute to use as vertex value. When None,
                the original node label becomes the value.

        Returns:
            Tuple of the new graph and a mapping from NetworkX node to vertex id.

        Raises:
            GraphPreconditionError: If ``nx_graph`` is a multigraph, or a
                weighted conversion finds an edge without ``value_attr``.
        """
        if nx_graph.is_multigraph():
            raise GraphPreconditionError("Multigraphs are not supported.")
        graph = cls(directed=nx_graph.is_directed(), weighted=weighted)
        node_map: Dict[Hashable, VertexID] = {}
        for node, data in nx_graph.nodes(data=True):
            value = node if node_value_attr is None else data.get(node_value_attr)
            node_map[node] = graph.add_vertex(value)
        for u, v, data in nx_graph.edges(data=True):
            if weighted:
                if value_attr not in data:
                    raise GraphPreconditionError(
                        f"Edge ({u!r}, {v!r}) has no '{value_attr}' attribute."
                    )
                graph.add_edge(node_map[u], node_map[v], data[value_attr])
            else:
                graph.add_edge(node_map[u], node_map[v])
        return graph, node_map

    #
    # Python protocol
    #
    def __contains__(self, vertex: object) -> bool:
        return vertex in self._g

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._g.nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self._directed != other._directed or self._weighted != other._weighted:
            return False
        if self.get_vertices() != other.get_vertices():
            return False
        mine = {(s, d): v for s, d, v in self.iter_edges()}
        theirs = {(s, d): v for s, d, v in other.iter_edges()}
        return mine == theirs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        weight = "weighted" if self._weighted else "unweighted"
        return (
            f"Graph({kind}, {weight}, vertices={self.get_vertices_count()}, "
            f"edges={self.get_edges_count()})"
        )
