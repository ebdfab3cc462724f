"""Command-line interface for graphsuite.

Every command reads a graph saved with `graphsuite.graph.io.save_graph`
(JSON, or YAML for ``.yml``/``.yaml`` files) and prints its result to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from graphsuite.algorithms import (
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    edmonds_karp_max_flow,
    kruskal_mst,
    mst_weight,
    prim_mst,
)
from graphsuite.algorithms.base import EdgeList, require_vertex
from graphsuite.algorithms.paths import resolve_path
from graphsuite.config import CONFIG
from graphsuite.errors import GraphError
from graphsuite.graph.dot import export_to_dot, path_to_edges
from graphsuite.graph.graph import Graph
from graphsuite.graph.io import load_graph
from graphsuite.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _label(graph: Graph, vertex: int) -> str:
    return f"{vertex} ({graph.get_vertex_value(vertex)})"


def _print_edges(graph: Graph, edges: EdgeList) -> None:
    for src, dst in edges:
        print(
            f"  {_label(graph, src)} - {_label(graph, dst)}: "
            f"{graph.get_edge_value(src, dst)}"
        )


def _cmd_info(graph: Graph) -> None:
    kind = "directed" if graph.directed else "undirected"
    weight = "weighted" if graph.weighted else "unweighted"
    print(
        f"{kind.capitalize()} {weight} graph: {graph.get_vertices_count()} vertices, "
        f"{graph.get_edges_count()} edges"
    )
    print("Vertices:")
    for line in graph.format_vertices().splitlines():
        print(f"  {line}")
    print("Edges:")
    for line in graph.format_edges().splitlines():
        print(f"  {line}")


def _cmd_traverse(graph: Graph, start: int, order: str) -> None:
    if order == "dfs":
        visited = dfs(graph, start)
        print("DFS order: " + ", ".join(_label(graph, v) for v in visited))
        return
    distance, _ = bfs(graph, start)
    reached = [v for v, d in distance.items() if d != CONFIG.infinity]
    reached.sort(key=lambda v: (distance[v], v))
    print("BFS hops:")
    for vertex in reached:
        print(f"  {_label(graph, vertex)}: {distance[vertex]}")


def _cmd_shortest_path(graph: Graph, source: int, target: int, algorithm: str) -> None:
    if algorithm == "bellman-ford":
        require_vertex(graph, target)
        distances, predecessors = bellman_ford(graph, source)
        path = resolve_path(source, target, distances, predecessors, CONFIG.infinity)
        distance = distances[target]
    else:
        distance, path = dijkstra(graph, source, target)
    if not path:
        print(f"No path from {_label(graph, source)} to {_label(graph, target)}")
        return
    print(f"Distance: {distance}")
    print("Path: " + " -> ".join(_label(graph, v) for v in path))


def _cmd_mst(graph: Graph, algorithm: str) -> None:
    if algorithm == "prim":
        edges = sorted(prim_mst(graph))
    else:
        edges = kruskal_mst(graph)
    print(f"{algorithm.capitalize()} spanning tree ({len(edges)} edges):")
    _print_edges(graph, edges)
    print(f"Total weight: {mst_weight(graph, edges)}")


def _cmd_max_flow(graph: Graph, source: int, sink: int) -> None:
    total, _, summary = edmonds_karp_max_flow(graph, source, sink, return_summary=True)
    print(f"Max flow: {total}")
    print("Min cut:")
    _print_edges(graph, summary.min_cut)


def _cmd_export_dot(
    graph: Graph,
    output: Path,
    path: Optional[List[int]],
    mst: Optional[str],
) -> None:
    highlighted: EdgeList = []
    if path:
        highlighted = path_to_edges(path)
    elif mst == "prim":
        highlighted = sorted(prim_mst(graph))
    elif mst == "kruskal":
        highlighted = kruskal_mst(graph)
    export_to_dot(graph, output, highlighted)
    print(f"DOT written to {output}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphsuite`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="graphsuite",
        description="Run classical graph algorithms on saved graphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{info,traverse,shortest-path,mst,max-flow,export-dot}",
        help="Available commands",
    )

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("graph", type=Path, help="Path to a saved graph file")
        return command

    add_command("info", "List vertices and edges")

    traverse_parser = add_command("traverse", "BFS or DFS walk")
    traverse_parser.add_argument("start", type=int, help="Start vertex id")
    traverse_parser.add_argument(
        "--order", choices=("bfs", "dfs"), default="bfs", help="Traversal order"
    )

    sp_parser = add_command("shortest-path", "Single-pair shortest path")
    sp_parser.add_argument("source", type=int, help="Source vertex id")
    sp_parser.add_argument("target", type=int, help="Target vertex id")
    sp_parser.add_argument(
        "--algorithm",
        "-a",
        choices=("dijkstra", "bellman-ford"),
        default="dijkstra",
        help="Shortest-path algorithm",
    )

    mst_parser = add_command("mst", "Minimum spanning tree")
    mst_parser.add_argument(
        "--algorithm",
        "-a",
        choices=("kruskal", "prim"),
        default="kruskal",
        help="Spanning-tree algorithm",
    )

    flow_parser = add_command("max-flow", "Edmonds-Karp maximum flow")
    flow_parser.add_argument("source", type=int, help="Source vertex id")
    flow_parser.add_argument("sink", type=int, help="Sink vertex id")

    dot_parser = add_command("export-dot", "Export Graphviz DOT")
    dot_parser.add_argument("output", type=Path, help="Path of the DOT file")
    highlight = dot_parser.add_mutually_exclusive_group()
    highlight.add_argument(
        "--path", type=int, nargs="+", help="Highlight this vertex path"
    )
    highlight.add_argument(
        "--mst", choices=("kruskal", "prim"), help="Highlight a spanning tree"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        graph = load_graph(args.graph)
        logger.debug("Loaded %r", graph)
        if args.command == "info":
            _cmd_info(graph)
        elif args.command == "traverse":
            _cmd_traverse(graph, args.start, args.order)
        elif args.command == "shortest-path":
            _cmd_shortest_path(graph, args.source, args.target, args.algorithm)
        elif args.command == "mst":
            _cmd_mst(graph, args.algorithm)
        elif args.command == "max-flow":
            _cmd_max_flow(graph, args.source, args.sink)
        elif args.command == "export-dot":
            _cmd_export_dot(graph, args.output, args.path, args.mst)
    except FileNotFoundError as exc:
        logger.error("Graph file not found: %s", exc.filename)
        sys.exit(1)
    except GraphError as exc:
        logger.error("%s failed: %s", args.command, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
