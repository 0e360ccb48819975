"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with the classic O(V²) selection: no heap, every
round scans the unvisited nodes for the smallest tentative distance.

Yields a Step at:
  1. Initialise  →  0 for the start node, ∞ everywhere else
  2. Pick the closest unvisited node  →  `select`
  3. Each outgoing arc to an unvisited neighbour  →  `relax`
  4. Strict improvement  →  `update`
  5. End node selected  →  stop early
  6. If an end node was given  →  `path` rebuilt from `previous` pointers
  7. `complete` with the final distance map

The loop also stops when every remaining node is at ∞ (unreachable).
Ties go to the node listed first in the input.

Correctness note: Dijkstra requires non-negative weights.  The caller
(traversal / dispatch) rejects graphs with negative edges.
"""

import math
from typing import Dict, Iterator, List, Optional

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Graph

INF = math.inf


def dijkstra(graph: Graph) -> Iterator[GraphStep]:
    start, end = graph.start_node, graph.end_node

    distances: Dict[str, float] = {n: (0 if n == start else INF) for n in graph.nodes}
    previous: Dict[str, Optional[str]] = {n: None for n in graph.nodes}
    unvisited: List[str] = list(graph.nodes)

    yield graph_step(graph, GraphEvent.INIT, f"Starting Dijkstra's algorithm from node {start}",
                     current_node=start, distances=distances, unvisited=unvisited)

    while unvisited:
        current = min(unvisited, key=lambda n: distances[n])    # first minimum wins
        if distances[current] == INF:
            break

        yield graph_step(graph, GraphEvent.SELECT,
                         f"Selected node {current} with distance {distances[current]}",
                         current_node=current, distances=distances, unvisited=unvisited)
        unvisited.remove(current)

        for nbr, weight in graph.weighted_neighbours(current):
            if nbr not in unvisited:
                continue
            alt = distances[current] + weight
            old = distances[nbr]
            yield graph_step(graph, GraphEvent.RELAX,
                             f"Checking path to {nbr}: current={_fmt(old)}, via {current}={alt}",
                             current_node=current, neighbor=nbr,
                             current_distance=old, new_distance=alt,
                             distances=distances)
            if alt < old:
                distances[nbr] = alt
                previous[nbr] = current
                yield graph_step(graph, GraphEvent.UPDATE, f"Updated distance to {nbr}: {alt}",
                                 current_node=current, updated_node=nbr,
                                 new_distance=alt, distances=distances)

        if end is not None and current == end:
            break

    if end is not None:
        path = _reconstruct(previous, start, end) if distances[end] < INF else []
        if path:
            description = f"Shortest path found: {' → '.join(path)} (distance: {distances[end]})"
        else:
            description = f"No path from {start} to {end}"
        yield graph_step(graph, GraphEvent.PATH, description,
                         path=path, total_distance=distances[end], distances=distances)

    yield graph_step(graph, GraphEvent.COMPLETE, "Dijkstra's algorithm complete",
                     distances=distances)


# ---------------------------------------------------------------------------
def _reconstruct(previous: Dict[str, Optional[str]], start: str, end: str) -> List[str]:
    path: List[str] = []
    cur: Optional[str] = end
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path if path[0] == start else []


def _fmt(d: float) -> str:
    return "∞" if d == INF else str(d)
