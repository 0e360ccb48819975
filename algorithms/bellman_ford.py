"""
bellman_ford.py — Bellman–Ford Shortest Paths
===============================================
Relaxes every arc |V|-1 times, then one extra pass to detect a negative
cycle.  Handles negative weights, unlike Dijkstra.

Yields a Step at:
  1. Initialise distances  →  `init`
  2. Start of each round  →  `iteration`
  3. Each arc whose tail is reached  →  `relax`
  4. Strict improvement  →  `update`
  5. Detection pass: first still-improvable arc  →  `negative-cycle`
     (the trace ends there), otherwise  →  `complete`
"""

import math
from typing import Dict, Iterator

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Graph

INF = math.inf


def bellman_ford(graph: Graph) -> Iterator[GraphStep]:
    start = graph.start_node
    arcs = graph.arcs()
    distances: Dict[str, float] = {n: (0 if n == start else INF) for n in graph.nodes}
    rounds = len(graph.nodes) - 1

    yield graph_step(graph, GraphEvent.INIT, f"Starting Bellman-Ford algorithm from node {start}",
                     current_node=start, distances=distances)

    for i in range(1, rounds + 1):
        yield graph_step(graph, GraphEvent.ITERATION, f"Iteration {i} of {rounds}",
                         iteration=i, distances=distances)

        for source, target, weight in arcs:
            if distances[source] == INF:
                continue
            alt = distances[source] + weight
            old = distances[target]
            yield graph_step(graph, GraphEvent.RELAX,
                             f"Checking edge {source} → {target}: "
                             f"{distances[source]} + {weight} = {alt} vs {'∞' if old == INF else old}",
                             current_node=source, neighbor=target,
                             current_distance=old, new_distance=alt,
                             distances=distances, iteration=i)
            if alt < old:
                distances[target] = alt
                yield graph_step(graph, GraphEvent.UPDATE, f"Updated distance to {target}: {alt}",
                                 current_node=source, updated_node=target,
                                 new_distance=alt, distances=distances, iteration=i)

    for source, target, weight in arcs:
        if distances[source] != INF and distances[source] + weight < distances[target]:
            yield graph_step(graph, GraphEvent.NEGATIVE_CYCLE,
                             f"Negative cycle detected at edge {source} → {target}!",
                             current_node=source, neighbor=target, distances=distances)
            return

    yield graph_step(graph, GraphEvent.COMPLETE,
                     "Bellman-Ford algorithm complete! No negative cycles found.",
                     distances=distances)
