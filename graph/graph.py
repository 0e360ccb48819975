"""
graph.py — Graph Input Container
=================================
Single source of truth for the graph an algorithm runs over.  Built from
the wire shape

    {"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": 3}],
     "startNode": "A", "endNode": "B", "directed": false}

Responsibilities:
  1. Validation            (raise InvalidInput, never build a half graph)
  2. Adjacency queries     (traversal neighbours, weighted arcs)
  3. Parsing               (from_dict)

Design decisions:
  - Nodes keep input order and edges keep input order; every adjacency
    list is built in edge order, so traces are deterministic.
  - Two adjacency views are maintained.  `_adj` follows the BFS / DFS
    rule (unweighted = two-way, weighted = one-way), `_out` follows the
    shortest-path rule (one-way unless `directed` is explicitly false).
  - The graph is read-only once built.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from errors import InvalidInput
from graph.edge import Edge, Weight


class Graph:
    """
    Attributes:
        nodes      : Tuple of node ids, input order.
        edges      : Tuple of Edge, input order.
        start_node : Start node (defaults to nodes[0]).
        end_node   : Optional target node.
        directed   : Explicit direction flag, or None to infer per edge.
        _adj       : {node_id: [neighbour_id, …]}           (BFS / DFS)
        _out       : {node_id: [(neighbour_id, cost), …]}   (Dijkstra / Bellman-Ford)
    """

    def __init__(
        self,
        nodes: Iterable[str],
        edges: Iterable[Edge] = (),
        start_node: Optional[str] = None,
        end_node: Optional[str] = None,
        directed: Optional[bool] = None,
    ):
        self.nodes: Tuple[str, ...] = tuple(nodes)
        self.edges: Tuple[Edge, ...] = tuple(edges)
        self.directed = directed

        if not self.nodes:
            raise InvalidInput("Graph must have at least one node")
        seen = set()
        for node in self.nodes:
            if not isinstance(node, str):
                raise InvalidInput(f"Node ids must be strings, got {node!r}")
            if node in seen:
                raise InvalidInput(f"Duplicate node id: {node}")
            seen.add(node)
        for edge in self.edges:
            for end in (edge.source, edge.target):
                if end not in seen:
                    raise InvalidInput(f"Edge {edge} references unknown node '{end}'")

        self.start_node: str = self.nodes[0] if start_node is None else start_node
        if not isinstance(self.start_node, str) or self.start_node not in seen:
            raise InvalidInput(f"Unknown start node: {self.start_node}")
        self.end_node: Optional[str] = end_node
        if end_node is not None and (not isinstance(end_node, str) or end_node not in seen):
            raise InvalidInput(f"Unknown end node: {end_node}")

        self._adj: Dict[str, List[str]] = {n: [] for n in self.nodes}
        self._out: Dict[str, List[Tuple[str, Weight]]] = {n: [] for n in self.nodes}
        for edge in self.edges:
            self._adj[edge.source].append(edge.target)
            if not edge.one_way:
                self._adj[edge.target].append(edge.source)
            self._out[edge.source].append((edge.target, edge.cost))
            if not edge.one_way_weighted:
                self._out[edge.target].append((edge.source, edge.cost))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[str]:
        """Traversal neighbours in edge order (may repeat for parallel edges)."""
        return list(self._adj.get(node_id, []))

    def weighted_neighbours(self, node_id: str) -> List[Tuple[str, Weight]]:
        """[(neighbour_id, cost)] along outgoing arcs, edge order."""
        return list(self._out.get(node_id, []))

    def arcs(self) -> List[Tuple[str, str, Weight]]:
        """Every (source, target, cost) arc, edge order; two-way edges give both arcs."""
        out = []
        for edge in self.edges:
            out.append((edge.source, edge.target, edge.cost))
            if not edge.one_way_weighted:
                out.append((edge.target, edge.source, edge.cost))
        return out

    # ==================================================================
    # PARSING
    # ==================================================================
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        if not isinstance(data, Mapping):
            raise InvalidInput("Graph input must be an object with 'nodes' and 'edges'")

        nodes = data.get("nodes")
        if not isinstance(nodes, list):
            raise InvalidInput("'nodes' must be a list of node ids")
        raw_edges = data.get("edges", [])
        if not isinstance(raw_edges, list):
            raise InvalidInput("'edges' must be a list")

        directed = data.get("directed")
        if directed is not None and not isinstance(directed, bool):
            raise InvalidInput("'directed' must be true or false")

        return cls(
            nodes=nodes,
            edges=[Edge.from_dict(e, directed=directed) for e in raw_edges],
            start_node=data.get("startNode"),
            end_node=data.get("endNode"),
            directed=directed,
        )

    # ==================================================================
    # UTILITY
    # ==================================================================
    def has_negative_edges(self) -> bool:
        return any(e.cost < 0 for e in self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)}, start={self.start_node})"
