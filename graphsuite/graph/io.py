"""Graph persistence: node-link dicts and JSON/YAML text files.

The node-link dict is the canonical shape; files are that dict rendered as
JSON or YAML (chosen by suffix). Loading reproduces an equal `Graph`: same
orientation, weightedness, vertex ids and values, and edges with values.
Undirected edges are written once.

Vertex and edge values must be representable in the chosen text format.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from graphsuite.config import CONFIG
from graphsuite.errors import GraphFormatError
from graphsuite.graph.graph import UNWEIGHTED, Graph
from graphsuite.logging import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = 1


def graph_to_node_link(graph: Graph) -> Dict[str, Any]:
    """Convert a `Graph` into a node-link dict.

    The returned dict has the following structure::

        {
            "version": 1,
            "directed": bool,
            "weighted": bool,
            "next_id": int,
            "vertices": [{"id": int, "value": ...}, ...],
            "edges": [{"source": int, "target": int, "value": ...}, ...],
        }

    ``value`` is omitted from edges of unweighted graphs.

    Args:
        graph: The graph to convert.

    Returns:
        A dict suitable for JSON or YAML serialization.
    """
    edges = []
    for src, dst, value in graph.iter_edges(include_both_directions=False):
        entry: Dict[str, Any] = {"source": src, "target": dst}
        if graph.weighted:
            entry["value"] = value
        edges.append(entry)

    return {
        "version": FORMAT_VERSION,
        "directed": graph.directed,
        "weighted": graph.weighted,
        "next_id": graph.next_vertex_id,
        "vertices": [
            {"id": vertex, "value": value}
            for vertex, value in graph.get_vertices().items()
        ],
        "edges": edges,
    }


def node_link_to_graph(data: Dict[str, Any]) -> Graph:
    """Reconstruct a `Graph` from its node-link dict.

    Vertex ids are preserved, and the id counter resumes from ``next_id`` so
    ids removed before saving are still never reused.

    Args:
        data: A dict produced by `graph_to_node_link`.

    Returns:
        The reconstructed graph.

    Raises:
        GraphFormatError: If required keys are missing, an id is negative or
            repeats, or an edge references an unknown vertex.
    """
    try:
        graph = Graph(directed=bool(data["directed"]), weighted=bool(data["weighted"]))
        for vertex_obj in data.get("vertices", []):
            graph._insert_vertex(int(vertex_obj["id"]), vertex_obj.get("value"))
        for edge_obj in data.get("edges", []):
            src, dst = int(edge_obj["source"]), int(edge_obj["target"])
            value = edge_obj["value"] if graph.weighted else UNWEIGHTED
            if not graph.add_edge(src, dst, value):
                raise GraphFormatError(
                    f"Edge ({src}, {dst}) references an unknown vertex."
                )
    except GraphFormatError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise GraphFormatError(f"Malformed graph data: {exc}") from exc

    next_id = data.get("next_id")
    if next_id is not None and int(next_id) > graph.next_vertex_id:
        graph._next_vertex_id = int(next_id)
    return graph


def dumps_graph(graph: Graph, fmt: Optional[str] = None) -> str:
    """Serialize ``graph`` to text in ``fmt`` ("json" or "yaml")."""
    fmt = fmt or CONFIG.default_format
    data = graph_to_node_link(graph)
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    raise ValueError(f"Unknown graph format '{fmt}'.")


def loads_graph(text: str, fmt: Optional[str] = None) -> Graph:
    """Parse text produced by `dumps_graph`.

    Raises:
        GraphFormatError: If the text cannot be parsed or is malformed.
    """
    fmt = fmt or CONFIG.default_format
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            raise ValueError(f"Unknown graph format '{fmt}'.")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise GraphFormatError(f"Cannot parse graph {fmt}: {exc}") from exc
    if not isinstance(data, dict):
        raise GraphFormatError("Graph data must be a mapping.")
    return node_link_to_graph(data)


def save_graph(graph: Graph, path: Union[str, Path], fmt: Optional[str] = None) -> None:
    """Write ``graph`` to ``path``; the format defaults to the file suffix."""
    path = Path(path)
    fmt = fmt or CONFIG.format_for_suffix(path.suffix)
    path.write_text(dumps_graph(graph, fmt), encoding="utf-8")
    logger.debug("Saved %r to %s (%s)", graph, path, fmt)


def load_graph(path: Union[str, Path], fmt: Optional[str] = None) -> Graph:
    """Read a graph written by `save_graph`.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If the file content is malformed.
    """
    path = Path(path)
    fmt = fmt or CONFIG.format_for_suffix(path.suffix)
    graph = loads_graph(path.read_text(encoding="utf-8"), fmt)
    logger.debug("Loaded %r from %s (%s)", graph, path, fmt)
    return graph
