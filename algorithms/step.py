"""
step.py — Algorithm Step Snapshots
===================================
Every engine is a generator that yields Step objects; the public entry
points materialise them into a list (the trace).

A Step is a frozen-in-time picture of everything the visualizer needs to
render one frame:

    • `kind`         — which event happened (compare, swap, visit, relax, …)
    • `description`  — the sentence the UI shows verbatim
    • a snapshot of the state the event touched (full array, queue, distances …)

There is one dataclass per algorithm family.  The `kind` tag selects the
variant; each variant fills in only the fields that belong to it and
leaves the rest as None, and `to_dict()` drops the Nones again.

Design decisions:
  - Steps are SNAPSHOTS.  `snapshot()` copies every sequence into a tuple
    and every mapping into a fresh dict at construction time, so the
    engines can keep mutating their working array / queue / distance map
    while earlier steps stay exactly as they were recorded.
  - Kinds are `str` enums so `kind.value` is already the wire string.
  - `to_dict()` is the JSON boundary: tuples → lists, Edge → dict,
    ∞ distances → None (literal Infinity is not JSON).
"""

import math
from collections import deque
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from graph.edge import Edge


# ---------------------------------------------------------------------------
# Event kinds
# ---------------------------------------------------------------------------
class SortEvent(str, Enum):
    COMPARE  = "compare"
    SWAP     = "swap"
    SORTED   = "sorted"
    PIVOT    = "pivot"
    SPLIT    = "split"
    MERGE    = "merge"
    MERGED   = "merged"
    COMPLETE = "complete"
    # insertion / selection sort
    SELECT   = "select"
    SHIFT    = "shift"
    INSERT   = "insert"
    FIND_MIN = "find-min"
    NEW_MIN  = "new-min"


class SearchEvent(str, Enum):
    CHECK       = "check"
    FOUND       = "found"
    NOT_FOUND   = "not-found"
    RANGE       = "range"
    ADJUST      = "adjust"
    JUMP        = "jump"
    BLOCK_FOUND = "block-found"
    INTERPOLATE = "interpolate"


class GraphEvent(str, Enum):
    INIT     = "init"
    VISIT    = "visit"
    DISCOVER = "discover"
    SELECT   = "select"
    RELAX    = "relax"
    UPDATE   = "update"
    PUSH     = "push"
    CONSIDER = "consider"
    ADD      = "add"
    SKIP     = "skip"
    PATH     = "path"
    COMPLETE = "complete"
    # bellman-ford
    ITERATION      = "iteration"
    NEGATIVE_CYCLE = "negative-cycle"


# attribute name → wire name, where they differ
_WIRE_NAMES = {
    "span":  "range",
    "focus": "highlighted",
}


# ---------------------------------------------------------------------------
# Step variants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class _StepBase:

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if f.name == "heap" and not value:
                continue
            out[_WIRE_NAMES.get(f.name, f.name)] = _jsonable(value)
        return out

    @property
    def highlight(self) -> FrozenSet[int]:
        """Every array index this step singles out (empty for graph steps)."""
        return frozenset()


@dataclass(frozen=True)
class SortStep(_StepBase):
    """
    Attributes:
        kind         : SortEvent tag.
        description  : Human-readable sentence.
        array        : Full array at this instant.
        comparing    : (i, j) being compared.
        swapping     : (i, j) just exchanged / shifted.
        sorted       : Indices already in their final position.
        pivot        : Pivot index (quick sort).
        span         : (low, high) sub-range the step works in.
        left_range   : Left half of a merge split.
        right_range  : Right half of a merge split.
        merging      : Index that just received a merged value.
        focus        : Indices singled out by select / insert / min events.
        heap         : True for heap-sort steps taken inside the heap.
    """

    kind:        SortEvent
    description: str
    array:       Tuple[float, ...]
    comparing:   Optional[Tuple[int, int]]  = None
    swapping:    Optional[Tuple[int, int]]  = None
    sorted:      Optional[Tuple[int, ...]]  = None
    pivot:       Optional[int]              = None
    span:        Optional[Tuple[int, int]]  = None
    left_range:  Optional[Tuple[int, int]]  = None
    right_range: Optional[Tuple[int, int]]  = None
    merging:     Optional[int]              = None
    focus:       Optional[Tuple[int, ...]]  = None
    heap:        bool                       = False

    @property
    def highlight(self) -> FrozenSet[int]:
        idx = set(self.comparing or ()) | set(self.swapping or ()) | set(self.sorted or ())
        idx |= set(self.focus or ())
        if self.pivot is not None:
            idx.add(self.pivot)
        if self.merging is not None:
            idx.add(self.merging)
        return frozenset(idx)


@dataclass(frozen=True)
class SearchStep(_StepBase):
    """
    Attributes:
        kind        : SearchEvent tag.
        description : Human-readable sentence.
        array       : The (unchanged) array being searched.
        target      : Value searched for.
        checking    : Index whose value is compared with the target.
        found_at    : Index of the match (`found` only).
        span        : Current [low, high] window.
        mid         : Binary-search midpoint.
        position    : Interpolation-search probe.
        jumping     : (from, to) of a jump-search block skip.
    """

    kind:        SearchEvent
    description: str
    array:       Tuple[float, ...]
    target:      float
    checking:    Optional[int]             = None
    found_at:    Optional[int]             = None
    span:        Optional[Tuple[int, int]] = None
    mid:         Optional[int]             = None
    position:    Optional[int]             = None
    jumping:     Optional[Tuple[int, int]] = None

    @property
    def highlight(self) -> FrozenSet[int]:
        idx = {i for i in (self.checking, self.found_at, self.mid, self.position) if i is not None}
        return frozenset(idx)


@dataclass(frozen=True)
class GraphStep(_StepBase):
    """
    Attributes:
        kind             : GraphEvent tag.
        description      : Human-readable sentence.
        nodes / edges    : The graph as given (edges sorted by weight for Kruskal).
        current_node     : Node being expanded / selected.
        discovered_node  : BFS neighbour just enqueued.
        pushed_node      : DFS neighbour just pushed.
        neighbor         : Dijkstra / Bellman-Ford relaxation target.
        updated_node     : Node whose distance just improved.
        queue / stack    : Frontier contents, front / bottom first.
        visited          : Nodes marked visited, in marking order.
        unvisited        : Dijkstra's not-yet-finalised nodes.
        distances        : {node: tentative distance}; ∞ for unreached.
        current_distance : Neighbour's distance before relaxation.
        new_distance     : Candidate distance through current_node.
        path             : start → … → end (Dijkstra `path` step).
        total_distance   : Length of that path.
        current_edge     : Edge being considered / added / skipped.
        mst              : Spanning-tree edges accepted so far.
        total_weight     : Their summed weight.
        iteration        : Bellman-Ford round (1-based).
    """

    kind:             GraphEvent
    description:      str
    nodes:            Tuple[str, ...]
    edges:            Tuple[Edge, ...]
    current_node:     Optional[str]              = None
    discovered_node:  Optional[str]              = None
    pushed_node:      Optional[str]              = None
    neighbor:         Optional[str]              = None
    updated_node:     Optional[str]              = None
    queue:            Optional[Tuple[str, ...]]  = None
    stack:            Optional[Tuple[str, ...]]  = None
    visited:          Optional[Tuple[str, ...]]  = None
    unvisited:        Optional[Tuple[str, ...]]  = None
    distances:        Optional[Dict[str, float]] = None
    current_distance: Optional[float]            = None
    new_distance:     Optional[float]            = None
    path:             Optional[Tuple[str, ...]]  = None
    total_distance:   Optional[float]            = None
    current_edge:     Optional[Edge]             = None
    mst:              Optional[Tuple[Edge, ...]] = None
    total_weight:     Optional[float]            = None
    iteration:        Optional[int]              = None


# ---------------------------------------------------------------------------
# Construction helper
# ---------------------------------------------------------------------------
def snapshot(step_cls, kind, description: str, **state):
    """
    Build a Step, copying every mutable value handed in.

    Engines pass their live working structures straight through:

        yield snapshot(SortStep, SortEvent.SWAP, "…", array=arr, swapping=(i, j))

    Lists, deques and ranges become tuples, dicts become fresh dicts.  Sets are
    never passed: their order is not stable, and the UI relies on order.
    """
    frozen = {key: _copy(value) for key, value in state.items()}
    return step_cls(kind=kind, description=description, **frozen)


def graph_step(graph, kind: GraphEvent, description: str, **state) -> GraphStep:
    """snapshot() for graph engines: nodes / edges come from `graph` unless overridden."""
    state.setdefault("edges", graph.edges)
    return snapshot(GraphStep, kind, description, nodes=graph.nodes, **state)


def _copy(value):
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, (list, tuple, deque, range)):
        return tuple(value)
    return value


def _jsonable(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Edge):
        return value.to_dict()
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


__all__ = [
    "SortEvent",
    "SearchEvent",
    "GraphEvent",
    "SortStep",
    "SearchStep",
    "GraphStep",
    "snapshot",
    "graph_step",
]
