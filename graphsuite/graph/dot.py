"""Export a `Graph` to Graphviz DOT text.

Edges may be highlighted either by an explicit edge list (e.g. a spanning
tree) or by a vertex path (e.g. a shortest path), see `path_to_edges`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Set, Sequence, Union

from graphsuite.config import CONFIG
from graphsuite.graph.graph import EdgePosition, Graph, VertexID
from graphsuite.logging import get_logger

logger = get_logger(__name__)


def path_to_edges(path: Sequence[VertexID]) -> List[EdgePosition]:
    """Turn a vertex path ``[a, b, c]`` into edges ``[(a, b), (b, c)]``."""
    return list(zip(path, path[1:]))


def _quote(value: object) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_dot(
    graph: Graph,
    highlighted: Optional[Iterable[EdgePosition]] = None,
    name: str = "G",
    color: Optional[str] = None,
) -> str:
    """Render ``graph`` as DOT text.

    Args:
        graph: Graph to render.
        highlighted: Edges to color. For undirected graphs, ``(u, v)`` also
            highlights ``(v, u)``.
        name: DOT graph name.
        color: Highlight color; defaults to ``CONFIG.highlight_color``.

    Returns:
        The DOT document.
    """
    color = color or CONFIG.highlight_color
    marked: Set[EdgePosition] = set()
    for src, dst in highlighted or ():
        marked.add((src, dst))
        if not graph.directed:
            marked.add((dst, src))

    keyword = "digraph" if graph.directed else "graph"
    connector = "->" if graph.directed else "--"
    lines = [f"{keyword} {_quote(name)} {{"]
    for vertex, value in graph.get_vertices().items():
        lines.append(f"  {vertex} [label={_quote(value)}];")
    for src, dst, value in graph.iter_edges(include_both_directions=False):
        attrs = []
        if graph.weighted:
            attrs.append(f"label={_quote(value)}")
        if (src, dst) in marked:
            attrs.append(f"color={_quote(color)}")
            attrs.append("penwidth=2")
        suffix = f" [{', '.join(attrs)}]" if attrs else ""
        lines.append(f"  {src} {connector} {dst}{suffix};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_to_dot(
    graph: Graph,
    path: Union[str, Path],
    highlighted: Optional[Iterable[EdgePosition]] = None,
    name: str = "G",
) -> None:
    """Write `to_dot` output for ``graph`` to ``path``."""
    Path(path).write_text(to_dot(graph, highlighted, name), encoding="utf-8")
    logger.debug("Exported %r to DOT file %s", graph, path)
