"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a read-only mapping:
    {
        "bubble-sort": AlgoInfo(key, label, category, variant, …),
        …
    }

AlgoInfo is a lightweight frozen dataclass.  Dispatch routes on
`category` and hands `variant` to that category's engine (sort / search /
traverse), so adding an algorithm is: write the generator, add it to the
engine's table, add one entry here.

Tree and dynamic-programming entries are catalogued (the UI lists them)
but have no step engine; asking to visualize one is `Unsupported`.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


class Category(str, Enum):
    SORTING             = "sorting"
    SEARCHING           = "searching"
    GRAPH               = "graph"
    TREE                = "tree"
    DYNAMIC_PROGRAMMING = "dynamic-programming"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:               str                     # registry key, e.g. "bubble-sort"
    label:             str                     # human label, e.g. "Bubble Sort"
    category:          Category
    variant:           Optional[str] = None    # engine kind, e.g. "bubble"; None = no engine
    tags:              Tuple[str, ...] = field(default_factory=tuple)
    requires_sorted:   bool = False            # searching: caller must pass sorted input
    supports_negative: bool = False            # graph: negative weights allowed?
    complexity_time:   str = ""
    complexity_space:  str = ""
    description:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":               self.key,
            "name":             self.label,
            "category":         self.category.value,
            "supported":        self.variant is not None,
            "tags":             list(self.tags),
            "requiresSorted":   self.requires_sorted,
            "supportsNegative": self.supports_negative,
            "complexity":       {"time": self.complexity_time, "space": self.complexity_space},
            "description":      self.description,
        }


def build_registry(infos: Iterable[AlgoInfo]) -> Mapping[str, AlgoInfo]:
    """Freeze a list of AlgoInfo into a read-only id → info mapping."""
    table: Dict[str, AlgoInfo] = {}
    for info in infos:
        if info.key in table:
            raise ValueError(f"Duplicate algorithm id: {info.key}")
        table[info.key] = info
    return MappingProxyType(table)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_S, _Q, _G = Category.SORTING, Category.SEARCHING, Category.GRAPH
_T, _DP = Category.TREE, Category.DYNAMIC_PROGRAMMING

REGISTRY: Mapping[str, AlgoInfo] = build_registry([

    # -- sorting --
    AlgoInfo(
        key="bubble-sort", label="Bubble Sort", category=_S, variant="bubble",
        tags=("comparison", "stable", "in-place"),
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly compares adjacent elements and swaps them if they are in the wrong order.",
    ),
    AlgoInfo(
        key="quick-sort", label="Quick Sort", category=_S, variant="quick",
        tags=("comparison", "divide-and-conquer", "in-place"),
        complexity_time="O(n log n) average, O(n²) worst", complexity_space="O(log n)",
        description="Picks the last element as pivot and partitions the array around it (Lomuto).",
    ),
    AlgoInfo(
        key="merge-sort", label="Merge Sort", category=_S, variant="merge",
        tags=("comparison", "divide-and-conquer", "stable"),
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Divides the array into halves, sorts them, and merges them back together.",
    ),
    AlgoInfo(
        key="heap-sort", label="Heap Sort", category=_S, variant="heap",
        tags=("comparison", "in-place"),
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then repeatedly moves the root to the end of the array.",
    ),
    AlgoInfo(
        key="insertion-sort", label="Insertion Sort", category=_S, variant="insertion",
        tags=("comparison", "stable", "in-place"),
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds the sorted array one item at a time by inserting each element into place.",
    ),
    AlgoInfo(
        key="selection-sort", label="Selection Sort", category=_S, variant="selection",
        tags=("comparison", "in-place"),
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly selects the smallest element of the unsorted region.",
    ),

    # -- searching --
    AlgoInfo(
        key="linear-search", label="Linear Search", category=_Q, variant="linear",
        complexity_time="O(n)", complexity_space="O(1)",
        description="Checks every element in the array sequentially.",
    ),
    AlgoInfo(
        key="binary-search", label="Binary Search", category=_Q, variant="binary",
        requires_sorted=True,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Repeatedly halves the search interval of a sorted array.",
    ),
    AlgoInfo(
        key="jump-search", label="Jump Search", category=_Q, variant="jump",
        requires_sorted=True,
        complexity_time="O(√n)", complexity_space="O(1)",
        description="Jumps ahead by √n-sized blocks, then searches linearly inside one block.",
    ),
    AlgoInfo(
        key="interpolation-search", label="Interpolation Search", category=_Q, variant="interpolation",
        requires_sorted=True,
        complexity_time="O(log log n) average, O(n) worst", complexity_space="O(1)",
        description="Probes where the target should be if values were evenly spread.",
    ),

    # -- graph --
    AlgoInfo(
        key="bfs", label="Breadth-First Search", category=_G, variant="bfs",
        tags=("unweighted", "traversal"),
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores all vertices at the present depth before moving one level deeper.",
    ),
    AlgoInfo(
        key="dfs", label="Depth-First Search", category=_G, variant="dfs",
        tags=("unweighted", "traversal"),
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores as far as possible along each branch before backtracking.",
    ),
    AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", category=_G, variant="dijkstra",
        tags=("weighted", "shortest-path"),
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Finds shortest paths from one node in a graph with non-negative weights.",
    ),
    AlgoInfo(
        key="bellman-ford", label="Bellman-Ford Algorithm", category=_G, variant="bellman-ford",
        tags=("weighted", "shortest-path", "negative-edges"),
        supports_negative=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Shortest paths that tolerate negative weights and detect negative cycles.",
    ),
    AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", category=_G, variant="kruskal",
        tags=("weighted", "mst", "union-find"),
        supports_negative=True,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Builds a minimum spanning tree from the lightest edges that close no cycle.",
    ),
    AlgoInfo(
        key="prim", label="Prim's Algorithm", category=_G, variant="prim",
        tags=("weighted", "mst"),
        supports_negative=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows a minimum spanning tree outward from a starting vertex.",
    ),

    # -- catalogued, no step engine --
    AlgoInfo(
        key="bst-insert", label="BST Insertion", category=_T,
        complexity_time="O(log n) average, O(n) worst", complexity_space="O(1)",
        description="Inserts a node into a Binary Search Tree while keeping the BST property.",
    ),
    AlgoInfo(
        key="bst-search", label="BST Search", category=_T,
        complexity_time="O(log n) average, O(n) worst", complexity_space="O(1)",
        description="Searches for a value in a Binary Search Tree.",
    ),
    AlgoInfo(
        key="tree-traversal", label="Tree Traversals", category=_T,
        complexity_time="O(n)", complexity_space="O(h)",
        description="Inorder, preorder, postorder and level-order visits of every node.",
    ),
    AlgoInfo(
        key="avl-tree", label="AVL Tree Operations", category=_T,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Self-balancing binary search tree operations including rotations.",
    ),
    AlgoInfo(
        key="fibonacci", label="Fibonacci Sequence", category=_DP,
        complexity_time="O(n)", complexity_space="O(n)",
        description="Computes Fibonacci numbers bottom-up to avoid redundant work.",
    ),
    AlgoInfo(
        key="knapsack", label="0/1 Knapsack", category=_DP,
        complexity_time="O(nW)", complexity_space="O(nW)",
        description="Maximum value that fits under a weight limit.",
    ),
    AlgoInfo(
        key="lcs", label="Longest Common Subsequence", category=_DP,
        complexity_time="O(mn)", complexity_space="O(mn)",
        description="Finds the longest subsequence common to two sequences.",
    ),
    AlgoInfo(
        key="edit-distance", label="Edit Distance", category=_DP,
        complexity_time="O(mn)", complexity_space="O(mn)",
        description="Minimum number of edits that turn one string into another.",
    ),
])


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str, registry: Mapping[str, AlgoInfo] = REGISTRY) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return registry.get(key)


def list_algorithms(registry: Mapping[str, AlgoInfo] = REGISTRY) -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(registry.values())


def algorithms_by_category(category: Category, registry: Mapping[str, AlgoInfo] = REGISTRY) -> List[AlgoInfo]:
    return [a for a in registry.values() if a.category == category]


__all__ = [
    "AlgoInfo",
    "Category",
    "REGISTRY",
    "build_registry",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
]
