"""
traversal.py — Graph Engine Entry Point
========================================
    from algorithms.traversal import traverse
    trace = traverse("bfs", {"nodes": [...], "edges": [...], "startNode": "A"})

Parses and validates the input once (see graph.Graph), then runs the
generator for `kind` to completion.
"""

from typing import Any, Callable, Dict, Iterator, List, Mapping, Union

from algorithms.bellman_ford import bellman_ford
from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from algorithms.kruskal import kruskal
from algorithms.prim import prim
from algorithms.step import GraphStep
from errors import InvalidInput
from graph import Graph

TRAVERSALS: Dict[str, Callable[[Graph], Iterator[GraphStep]]] = {
    "bfs":          bfs,
    "dfs":          dfs,
    "dijkstra":     dijkstra,
    "bellman-ford": bellman_ford,
    "kruskal":      kruskal,
    "prim":         prim,
}


def traverse(kind: str, graph_input: Union[Graph, Mapping[str, Any]]) -> List[GraphStep]:
    """Run graph algorithm `kind` and return the full trace."""
    algorithm = TRAVERSALS.get(kind)
    if algorithm is None:
        raise InvalidInput(f"Unknown graph algorithm: {kind}")

    graph = graph_input if isinstance(graph_input, Graph) else Graph.from_dict(graph_input)
    if kind == "dijkstra" and graph.has_negative_edges():
        raise InvalidInput("Dijkstra's algorithm requires non-negative edge weights")
    return list(algorithm(graph))


__all__ = ["TRAVERSALS", "traverse"]
