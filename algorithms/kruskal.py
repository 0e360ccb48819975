"""
kruskal.py — Kruskal's Minimum Spanning Tree
==============================================
Edges are sorted by weight (stable, so equal weights keep input order) and
accepted greedily unless they would close a cycle.  Cycle detection is a
union-find with path compression and union by rank.

Yields a Step at:
  1. Initialise  →  `init` with the sorted edge list
  2. Each edge examined  →  `consider`
  3. Accepted  →  `add` (running total updated)   /   rejected  →  `skip`
  4. `complete` with the MST and its total weight

Stops as soon as the tree has |V|-1 edges.  Edge direction is ignored.
"""

from typing import Dict, Iterator, List

from algorithms.step import GraphEvent, GraphStep, graph_step
from graph import Edge, Graph


class DisjointSet:
    """Union-find over node ids."""

    def __init__(self, items):
        self.parent: Dict[str, str] = {x: x for x in items}
        self.rank: Dict[str, int] = {x: 0 for x in items}

    def find(self, x: str) -> str:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True


def kruskal(graph: Graph) -> Iterator[GraphStep]:
    edges = sorted(graph.edges, key=lambda e: e.cost)
    sets = DisjointSet(graph.nodes)
    mst: List[Edge] = []
    total = 0
    target_size = len(graph.nodes) - 1

    yield graph_step(graph, GraphEvent.INIT, "Starting Kruskal's algorithm for Minimum Spanning Tree",
                     edges=edges, mst=mst, total_weight=total)

    for edge in edges:
        if len(mst) == target_size:
            break

        yield graph_step(graph, GraphEvent.CONSIDER,
                         f"Considering edge {edge.source}-{edge.target} with weight {edge.cost}",
                         edges=edges, current_edge=edge, mst=mst, total_weight=total)

        if sets.union(edge.source, edge.target):
            mst.append(edge)
            total += edge.cost
            yield graph_step(graph, GraphEvent.ADD, f"Added edge {edge.source}-{edge.target} to MST",
                             edges=edges, current_edge=edge, mst=mst, total_weight=total)
        else:
            yield graph_step(graph, GraphEvent.SKIP,
                             f"Skipped edge {edge.source}-{edge.target} (would create cycle)",
                             edges=edges, current_edge=edge, mst=mst, total_weight=total)

    yield graph_step(graph, GraphEvent.COMPLETE, f"MST complete with total weight: {total}",
                     edges=edges, mst=mst, total_weight=total)
