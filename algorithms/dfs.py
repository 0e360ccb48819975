"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Initialise  →  start node on the stack, nothing visited yet
  2. Pop an unvisited node  →  mark it visited, `visit`
  3. Each unvisited neighbour pushed  →  `push`
  4. Stack empty  →  `complete`

Nodes are marked on pop, so the stack may hold the same node more than
once; stale copies are popped silently.  Neighbours are pushed in reverse
adjacency order, which makes the pop order match recursive left-to-right
DFS.
"""

from typing import Iterator, List

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Graph


def dfs(graph: Graph) -> Iterator[GraphStep]:
    start = graph.start_node
    stack = [start]
    visited: List[str] = []
    seen = set()

    yield graph_step(graph, GraphEvent.INIT, f"Starting DFS from node {start}",
                     current_node=start, stack=stack, visited=visited)

    while stack:
        current = stack.pop()
        if current in seen:
            continue

        seen.add(current)
        visited.append(current)
        yield graph_step(graph, GraphEvent.VISIT, f"Visiting node {current}",
                         current_node=current, stack=stack, visited=visited)

        for nbr in reversed(graph.neighbours(current)):
            if nbr in seen:
                continue
            stack.append(nbr)
            yield graph_step(graph, GraphEvent.PUSH, f"Adding node {nbr} to stack",
                             current_node=current, pushed_node=nbr,
                             stack=stack, visited=visited)

    yield graph_step(graph, GraphEvent.COMPLETE, "DFS traversal complete", visited=visited)
