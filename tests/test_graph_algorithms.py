import itertools
import math
import random

import pytest

from algorithms.kruskal import DisjointSet
from algorithms.step import GraphEvent
from algorithms.traversal import TRAVERSALS, traverse
from errors import InvalidInput
from graph import Graph

INF = math.inf


# ---------------------------------------------------------------------------
# Reference implementations
# ---------------------------------------------------------------------------
def floyd_warshall(graph):
    dist = {u: {v: (0 if u == v else INF) for v in graph.nodes} for u in graph.nodes}
    for u, v, w in graph.arcs():
        dist[u][v] = min(dist[u][v], w)
    for k in graph.nodes:
        for i in graph.nodes:
            for j in graph.nodes:
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
    return dist


def brute_force_mst_weight(graph):
    n = len(graph.nodes)
    best = None
    for combo in itertools.combinations(graph.edges, n - 1):
        sets = DisjointSet(graph.nodes)
        if all(sets.union(e.source, e.target) for e in combo):
            weight = sum(e.cost for e in combo)
            best = weight if best is None else min(best, weight)
    return best


def random_graph(seed, n=5, extra=4, directed=None, low=0, high=9, connected=False):
    rng = random.Random(seed)
    nodes = [chr(ord("A") + i) for i in range(n)]
    edges = []
    if connected:
        for a, b in zip(nodes, nodes[1:]):
            edges.append({"from": a, "to": b, "weight": rng.randint(low, high)})
    for _ in range(extra):
        a, b = rng.sample(nodes, 2)
        edges.append({"from": a, "to": b, "weight": rng.randint(low, high)})
    data = {"nodes": nodes, "edges": edges}
    if directed is not None:
        data["directed"] = directed
    return data


def last(trace, kind):
    return [s for s in trace if s.kind == kind][-1]


def edge_pairs(edges):
    return [(e.source, e.target) for e in edges]


# ---------------------------------------------------------------------------
# BFS / DFS
# ---------------------------------------------------------------------------
FOUR = {
    "nodes": ["A", "B", "C", "D"],
    "edges": [
        {"from": "A", "to": "B"},
        {"from": "B", "to": "C"},
        {"from": "A", "to": "C"},
        {"from": "C", "to": "D"},
    ],
    "startNode": "A",
}


def test_bfs_visits_level_by_level():
    trace = traverse("bfs", FOUR)
    assert trace[0].kind == GraphEvent.INIT
    assert trace[-1].kind == GraphEvent.COMPLETE
    assert trace[-1].visited == ("A", "B", "C", "D")
    assert [s.current_node for s in trace if s.kind == GraphEvent.VISIT] == ["A", "B", "C", "D"]


def test_bfs_never_queues_a_node_twice():
    trace = traverse("bfs", FOUR)
    discovered = [s.discovered_node for s in trace if s.kind == GraphEvent.DISCOVER]
    assert len(discovered) == len(set(discovered)) == 3


def test_bfs_queue_snapshots_are_independent():
    trace = traverse("bfs", FOUR)
    assert trace[0].queue == ("A",)
    assert trace[1].queue == ()


@pytest.mark.parametrize("kind", ["bfs", "dfs"])
def test_traversal_stays_in_start_component(kind):
    data = {
        "nodes": ["A", "B", "C", "D"],
        "edges": [{"from": "A", "to": "B"}, {"from": "C", "to": "D"}],
    }
    assert set(traverse(kind, data)[-1].visited) == {"A", "B"}


@pytest.mark.parametrize("kind", ["bfs", "dfs"])
def test_weighted_edges_are_one_way_for_traversal(kind):
    data = {"nodes": ["A", "B"], "edges": [{"from": "B", "to": "A", "weight": 1}]}
    assert traverse(kind, data)[-1].visited == ("A",)


def test_dfs_matches_recursive_order():
    data = {
        "nodes": ["A", "B", "C", "D"],
        "edges": [{"from": "A", "to": "B"}, {"from": "A", "to": "C"}, {"from": "B", "to": "D"}],
    }
    trace = traverse("dfs", data)
    assert trace[-1].visited == ("A", "B", "D", "C")
    assert [s.pushed_node for s in trace if s.kind == GraphEvent.PUSH] == ["C", "B", "D"]


def test_dfs_skips_stale_stack_entries():
    data = {
        "nodes": ["A", "B", "C"],
        "edges": [{"from": "A", "to": "B"}, {"from": "A", "to": "C"}, {"from": "B", "to": "C"}],
    }
    trace = traverse("dfs", data)
    visits = [s.current_node for s in trace if s.kind == GraphEvent.VISIT]
    assert visits == ["A", "B", "C"]
    # C is pushed from A and again from B; the leftover copy is popped silently
    assert [s.pushed_node for s in trace if s.kind == GraphEvent.PUSH] == ["C", "B", "C"]
    last_visit = max(i for i, s in enumerate(trace) if s.kind == GraphEvent.VISIT)
    assert trace[last_visit].stack == ("C",)
    assert [s.kind for s in trace[last_visit + 1:]] == [GraphEvent.COMPLETE]


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("directed", [None, False])
def test_dijkstra_matches_floyd_warshall(seed, directed):
    data = random_graph(seed, n=6, extra=7, directed=directed)
    graph = Graph.from_dict(data)
    expected = floyd_warshall(graph)[graph.start_node]
    trace = traverse("dijkstra", data)
    assert trace[-1].distances == expected


def test_dijkstra_path():
    data = {
        "nodes": ["A", "B", "C", "D"],
        "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "B", "to": "C", "weight": 2},
            {"from": "A", "to": "C", "weight": 5},
            {"from": "C", "to": "D", "weight": 1},
        ],
        "startNode": "A",
        "endNode": "D",
    }
    trace = traverse("dijkstra", data)
    path = last(trace, GraphEvent.PATH)
    assert path.path == ("A", "B", "C", "D")
    assert path.total_distance == 4


def test_dijkstra_stops_when_end_node_is_selected():
    data = {
        "nodes": ["A", "B", "C", "D"],
        "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "A", "to": "D", "weight": 2},
            {"from": "B", "to": "C", "weight": 5},
            {"from": "D", "to": "C", "weight": 1},
        ],
        "endNode": "B",
    }
    trace = traverse("dijkstra", data)
    assert [s.current_node for s in trace if s.kind == GraphEvent.SELECT] == ["A", "B"]
    # C and D keep the tentative distances they had when B was selected
    assert trace[-1].distances == {"A": 0, "B": 1, "C": 6, "D": 2}
    assert last(trace, GraphEvent.PATH).path == ("A", "B")


def test_dijkstra_unreachable_end():
    data = {"nodes": ["A", "B"], "edges": [], "endNode": "B"}
    trace = traverse("dijkstra", data)
    path = last(trace, GraphEvent.PATH)
    assert path.path == ()
    assert path.total_distance == INF
    assert path.to_dict()["total_distance"] is None
    assert trace[-1].kind == GraphEvent.COMPLETE


def test_dijkstra_only_updates_on_strict_improvement():
    data = {
        "nodes": ["A", "B", "C"],
        "edges": [
            {"from": "A", "to": "B", "weight": 2},
            {"from": "A", "to": "C", "weight": 1},
            {"from": "C", "to": "B", "weight": 1},
        ],
    }
    trace = traverse("dijkstra", data)
    updates = [s.updated_node for s in trace if s.kind == GraphEvent.UPDATE]
    assert updates == ["B", "C"]


def test_dijkstra_rejects_negative_weights():
    data = {"nodes": ["A", "B"], "edges": [{"from": "A", "to": "B", "weight": -1}]}
    with pytest.raises(InvalidInput):
        traverse("dijkstra", data)


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("seed", range(8))
def test_bellman_ford_matches_floyd_warshall(seed):
    data = random_graph(seed, n=5, extra=6)
    graph = Graph.from_dict(data)
    trace = traverse("bellman-ford", data)
    assert trace[-1].kind == GraphEvent.COMPLETE
    assert trace[-1].distances == floyd_warshall(graph)[graph.start_node]


def test_bellman_ford_negative_edge():
    data = {
        "nodes": ["A", "B", "C"],
        "edges": [
            {"from": "A", "to": "B", "weight": 4},
            {"from": "A", "to": "C", "weight": 2},
            {"from": "C", "to": "B", "weight": -3},
        ],
    }
    trace = traverse("bellman-ford", data)
    assert trace[-1].distances == {"A": 0, "B": -1, "C": 2}
    assert [s.iteration for s in trace if s.kind == GraphEvent.ITERATION] == [1, 2]


def test_bellman_ford_negative_cycle():
    data = {
        "nodes": ["A", "B", "C"],
        "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "B", "to": "C", "weight": -2},
            {"from": "C", "to": "B", "weight": 1},
        ],
    }
    trace = traverse("bellman-ford", data)
    assert trace[-1].kind == GraphEvent.NEGATIVE_CYCLE
    assert all(s.kind != GraphEvent.COMPLETE for s in trace)


def test_bellman_ford_single_node():
    trace = traverse("bellman-ford", {"nodes": ["A"], "edges": []})
    assert [s.kind for s in trace] == [GraphEvent.INIT, GraphEvent.COMPLETE]


# ---------------------------------------------------------------------------
# Kruskal / Prim
# ---------------------------------------------------------------------------
KRUSKAL = {
    "nodes": ["A", "B", "C", "D"],
    "edges": [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
        {"from": "A", "to": "C", "weight": 4},
        {"from": "C", "to": "D", "weight": 1},
    ],
}


def test_kruskal_example():
    trace = traverse("kruskal", KRUSKAL)
    done = trace[-1]
    assert done.kind == GraphEvent.COMPLETE
    assert edge_pairs(done.mst) == [("A", "B"), ("C", "D"), ("B", "C")]
    assert done.total_weight == 4
    # stops once the tree is full: A-C is never considered
    considered = [s.current_edge for s in trace if s.kind == GraphEvent.CONSIDER]
    assert edge_pairs(considered) == [("A", "B"), ("C", "D"), ("B", "C")]


def test_kruskal_skips_cycle_edges():
    data = {
        "nodes": ["A", "B", "C", "D"],
        "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "B", "to": "C", "weight": 1},
            {"from": "A", "to": "C", "weight": 1},
            {"from": "C", "to": "D", "weight": 5},
        ],
    }
    trace = traverse("kruskal", data)
    skipped = [s.current_edge for s in trace if s.kind == GraphEvent.SKIP]
    assert edge_pairs(skipped) == [("A", "C")]
    assert trace[-1].total_weight == 7


def test_kruskal_init_lists_edges_by_weight():
    trace = traverse("kruskal", KRUSKAL)
    assert [e.cost for e in trace[0].edges] == [1, 1, 2, 4]


@pytest.mark.parametrize("kind", ["kruskal", "prim"])
@pytest.mark.parametrize("seed", range(10))
def test_mst_weight_is_minimal(kind, seed):
    data = random_graph(seed, n=5, extra=4, low=-3, high=9, connected=True)
    graph = Graph.from_dict(data)
    done = traverse(kind, data)[-1]
    assert len(done.mst) == len(graph.nodes) - 1
    assert done.total_weight == brute_force_mst_weight(graph)


def test_prim_grows_from_start():
    data = dict(KRUSKAL, startNode="D")
    trace = traverse("prim", data)
    added = [s.current_node for s in trace if s.kind == GraphEvent.ADD]
    assert added == ["C", "B", "A"]
    assert trace[-1].visited == ("D", "C", "B", "A")
    assert trace[-1].total_weight == 4


def test_mst_on_disconnected_graph_is_partial():
    data = {"nodes": ["A", "B", "C"], "edges": [{"from": "A", "to": "B", "weight": 3}]}
    assert traverse("kruskal", data)[-1].total_weight == 3
    assert edge_pairs(traverse("prim", data)[-1].mst) == [("A", "B")]


# ---------------------------------------------------------------------------
# Union-find
# ---------------------------------------------------------------------------
def test_disjoint_set():
    sets = DisjointSet("ABCD")
    assert sets.union("A", "B")
    assert sets.union("C", "D")
    assert not sets.union("B", "A")
    assert sets.find("A") == sets.find("B")
    assert sets.find("A") != sets.find("C")
    assert sets.union("B", "D")
    assert len({sets.find(x) for x in "ABCD"}) == 1


def test_disjoint_set_compresses_paths():
    sets = DisjointSet("ABCD")
    sets.parent.update({"D": "C", "C": "B", "B": "A"})
    assert sets.find("D") == "A"
    assert sets.parent["D"] == "A"
    assert sets.parent["C"] == "A"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("kind", sorted(TRAVERSALS))
def test_every_trace_starts_with_init(kind):
    assert traverse(kind, FOUR)[0].kind == GraphEvent.INIT


def test_traverse_accepts_a_graph():
    graph = Graph.from_dict(FOUR)
    assert traverse("bfs", graph)[-1].visited == ("A", "B", "C", "D")


def test_traverse_rejects_unknown_kind():
    with pytest.raises(InvalidInput):
        traverse("a-star", FOUR)


@pytest.mark.parametrize("kind", sorted(TRAVERSALS))
def test_traverse_rejects_empty_graph(kind):
    with pytest.raises(InvalidInput):
        traverse(kind, {"nodes": [], "edges": []})
