"""
dispatch.py — Visualization Generator
=======================================
Looks an algorithm up in the registry, hands its raw input to the right
engine, and wraps the finished trace.

Usage:
    vis = generate("bubble-sort", {"array": [5, 3, 1]})
    vis.total_steps                  # len(vis.steps)
    vis.to_dict()                    # JSON-safe, for the HTTP layer

Routing is by category:
    sorting    → algorithms.sorting.sort(variant, array)
    searching  → algorithms.searching.search(variant, array, target)
    graph      → algorithms.traversal.traverse(variant, graph_input)

Tree and dynamic-programming entries exist in the registry but have no
engine; they raise Unsupported instead of returning an empty trace.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Union

from algorithms import REGISTRY, AlgoInfo, Category
from algorithms.searching import search
from algorithms.sorting import sort
from algorithms.step import GraphStep, SearchStep, SortStep
from algorithms.traversal import traverse
from engine.logger import get_logger
from errors import InvalidInput, NotFound, Unsupported

log = get_logger(__name__)

AnyStep = Union[SortStep, SearchStep, GraphStep]


# ---------------------------------------------------------------------------
# Visualization — one finished run
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Visualization:
    algorithm:   str
    input:       Mapping[str, Any]
    steps:       List[AnyStep]
    total_steps: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":  self.algorithm,
            "input":      dict(self.input),
            "steps":      [s.to_dict() for s in self.steps],
            "totalSteps": self.total_steps,
        }


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------
def generate(
    algorithm_id: str,
    raw_input: Any,
    registry: Mapping[str, AlgoInfo] = REGISTRY,
) -> Visualization:
    """Run `algorithm_id` on `raw_input` and return the complete trace."""
    info = registry.get(algorithm_id)
    if info is None:
        raise NotFound(f"Unknown algorithm: {algorithm_id}")
    if info.variant is None:
        raise Unsupported(f"No step engine for {info.category.value} algorithm '{algorithm_id}'")
    if not isinstance(raw_input, Mapping):
        raise InvalidInput("Input must be an object")

    steps = _run(info, raw_input)
    log.debug("generated %s: %d steps", algorithm_id, len(steps))
    return Visualization(
        algorithm=algorithm_id,
        input=dict(raw_input),
        steps=steps,
        total_steps=len(steps),
    )


def _run(info: AlgoInfo, raw_input: Mapping[str, Any]) -> List[AnyStep]:
    if info.category == Category.SORTING:
        return sort(info.variant, _require(raw_input, "array"))

    if info.category == Category.SEARCHING:
        return search(info.variant, _require(raw_input, "array"), _require(raw_input, "target"))

    if info.category == Category.GRAPH:
        return traverse(info.variant, raw_input)

    raise Unsupported(f"No step engine for category '{info.category.value}'")


def _require(raw_input: Mapping[str, Any], key: str) -> Any:
    if key not in raw_input:
        raise InvalidInput(f"Missing required field: {key}")
    return raw_input[key]


__all__ = ["Visualization", "generate"]
