"""
edge.py — Graph Edge
====================
Connects two nodes.  Carries an optional weight and an optional explicit
direction flag.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - `weight` stays None when the input gave none.  That matters: for
    BFS / DFS an unweighted edge is two-way and a weighted one is one-way,
    unless the caller passes an explicit `directed` flag.
  - Frozen, so a Step can hold edges without copying them.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Union

from errors import InvalidInput

Weight = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        source   : ID of the tail node (`from` on the wire).
        target   : ID of the head node (`to` on the wire).
        weight   : Numeric cost, or None when the input carried none.
        directed : Explicit direction override; None means "infer from weight".
    """

    source:   str
    target:   str
    weight:   Optional[Weight] = None
    directed: Optional[bool]   = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def cost(self) -> Weight:
        """Weight used by shortest-path / MST algorithms (missing → 1)."""
        return 1 if self.weight is None else self.weight

    @property
    def one_way(self) -> bool:
        """Directedness for BFS / DFS adjacency."""
        if self.directed is not None:
            return self.directed
        return self.weight is not None

    @property
    def one_way_weighted(self) -> bool:
        """Directedness for Dijkstra / Bellman-Ford: one-way unless told otherwise."""
        return self.directed is not False

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"from": self.source, "to": self.target}
        if self.weight is not None:
            out["weight"] = self.weight
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], directed: Optional[bool] = None) -> "Edge":
        if not isinstance(data, Mapping):
            raise InvalidInput(f"Edge must be an object with 'from' and 'to', got {data!r}")
        source, target = data.get("from"), data.get("to")
        if not isinstance(source, str) or not isinstance(target, str):
            raise InvalidInput(f"Edge endpoints must be node ids, got {data!r}")

        weight = data.get("weight")
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise InvalidInput(f"Edge {source}-{target} has a non-numeric weight: {weight!r}")
            try:
                finite = math.isfinite(weight)
            except OverflowError:
                finite = False
            if not finite:
                raise InvalidInput(f"Edge {source}-{target} weight is out of range")
        return cls(source=source, target=target, weight=weight, directed=directed)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        arrow = "→" if self.one_way else "-"
        return f"{self.source}{arrow}{self.target}"
