"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Initialise  →  start node queued and marked visited
  2. Dequeue a node  →  `visit`
  3. Each newly seen neighbour  →  `discover` (queued and marked visited
     right away, so it is never queued twice)
  4. Queue empty  →  `complete` with the full visited list

Unweighted edges are two-way, weighted edges one-way, unless the input
carries an explicit `directed` flag.
"""

from collections import deque
from typing import Iterator, List

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Graph


def bfs(graph: Graph) -> Iterator[GraphStep]:
    start = graph.start_node
    queue = deque([start])
    visited: List[str] = [start]        # list, not set: order is part of the trace
    seen = {start}

    yield graph_step(graph, GraphEvent.INIT, f"Starting BFS from node {start}",
                     current_node=start, queue=queue, visited=visited)

    while queue:
        current = queue.popleft()
        yield graph_step(graph, GraphEvent.VISIT, f"Visiting node {current}",
                         current_node=current, queue=queue, visited=visited)

        for nbr in graph.neighbours(current):
            if nbr in seen:
                continue
            seen.add(nbr)
            visited.append(nbr)
            queue.append(nbr)
            yield graph_step(graph, GraphEvent.DISCOVER, f"Discovered node {nbr} from {current}",
                             current_node=current, discovered_node=nbr,
                             queue=queue, visited=visited)

    yield graph_step(graph, GraphEvent.COMPLETE, "BFS traversal complete", visited=visited)
