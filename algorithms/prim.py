"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows one tree from the start node.  Each round scans every edge for the
lightest one crossing the cut (tree ↔ non-tree); ties go to the edge
listed first.  Edge direction is ignored.

Yields `init`, then `consider` + `add` per accepted edge, then `complete`.
On a disconnected graph the tree stops at the start node's component.
"""

import math
from typing import Iterator, List, Optional

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Edge, Graph


def prim(graph: Graph) -> Iterator[GraphStep]:
    start = graph.start_node
    in_tree: List[str] = [start]
    mst: List[Edge] = []
    total = 0

    yield graph_step(graph, GraphEvent.INIT, f"Starting Prim's algorithm from node {start}",
                     current_node=start, visited=in_tree, mst=mst, total_weight=total)

    while len(in_tree) < len(graph.nodes):
        best: Optional[Edge] = None
        best_cost = math.inf
        for edge in graph.edges:
            crosses = (edge.source in in_tree) != (edge.target in in_tree)
            if crosses and edge.cost < best_cost:
                best, best_cost = edge, edge.cost
        if best is None:
            break

        new_node = best.target if best.source in in_tree else best.source
        yield graph_step(graph, GraphEvent.CONSIDER,
                         f"Lightest edge leaving the tree: {best.source}-{best.target} "
                         f"with weight {best.cost}",
                         current_node=new_node, current_edge=best, visited=in_tree,
                         mst=mst, total_weight=total)

        in_tree.append(new_node)
        mst.append(best)
        total += best.cost
        yield graph_step(graph, GraphEvent.ADD,
                         f"Added edge {best.source}-{best.target} (weight: {best.cost}, total: {total})",
                         current_node=new_node, current_edge=best, visited=in_tree,
                         mst=mst, total_weight=total)

    yield graph_step(graph, GraphEvent.COMPLETE, f"Prim's algorithm complete! MST cost: {total}",
                     visited=in_tree, mst=mst, total_weight=total)
