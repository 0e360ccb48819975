"""
searching.py — Searching Engine
================================
Generator-based array searches.  Every run terminates, and its last step
is exactly one of `found` (with `found_at`) or `not-found`.

  linear         check … → found / not-found
  binary         (range → check → adjust)* → found / not-found
  jump           jump* → block-found → check* → found / not-found
  interpolation  (interpolate → check → adjust)* → found / not-found

Binary, jump and interpolation search assume the caller passes a sorted
array.  That cannot be checked without sorting, so it is not.
"""

import math
from typing import Callable, Dict, Iterator, List, Sequence

from algorithms.inputs import Number, as_number, as_number_array
from algorithms.step import SearchEvent, SearchStep, snapshot
from errors import InvalidInput


class _Tracer:
    """Binds the array / target pair so each step only names what changed."""

    def __init__(self, arr: List[Number], target: Number):
        self.arr = arr
        self.target = target

    def step(self, kind: SearchEvent, description: str, **state) -> SearchStep:
        return snapshot(SearchStep, kind, description, array=self.arr, target=self.target, **state)

    def check(self, i: int) -> SearchStep:
        return self.step(SearchEvent.CHECK, f"Checking if {self.arr[i]} equals {self.target}", checking=i)

    def found(self, i: int) -> SearchStep:
        return self.step(SearchEvent.FOUND, f"Found {self.target} at index {i}", found_at=i)

    def not_found(self) -> SearchStep:
        return self.step(SearchEvent.NOT_FOUND, f"{self.target} not found in the array")


# ---------------------------------------------------------------------------
# Linear search
# ---------------------------------------------------------------------------
def linear_search(array: Sequence[Number], target: Number) -> Iterator[SearchStep]:
    t = _Tracer(list(array), target)
    for i, value in enumerate(t.arr):
        yield t.check(i)
        if value == target:
            yield t.found(i)
            return
    yield t.not_found()


# ---------------------------------------------------------------------------
# Binary search
# ---------------------------------------------------------------------------
def binary_search(array: Sequence[Number], target: Number) -> Iterator[SearchStep]:
    t = _Tracer(list(array), target)
    arr = t.arr
    left, right = 0, len(arr) - 1

    while left <= right:
        mid = (left + right) // 2
        yield t.step(SearchEvent.RANGE, f"Searching in range [{left}, {right}], middle at {mid}",
                     span=(left, right), mid=mid)
        yield t.check(mid)

        if arr[mid] == target:
            yield t.found(mid)
            return

        if arr[mid] < target:
            left = mid + 1
            yield t.step(SearchEvent.ADJUST, f"{arr[mid]} < {target}, searching right half",
                         span=(left, right))
        else:
            right = mid - 1
            yield t.step(SearchEvent.ADJUST, f"{arr[mid]} > {target}, searching left half",
                         span=(left, right))

    yield t.not_found()


# ---------------------------------------------------------------------------
# Jump search
# ---------------------------------------------------------------------------
def jump_search(array: Sequence[Number], target: Number) -> Iterator[SearchStep]:
    t = _Tracer(list(array), target)
    arr = t.arr
    n = len(arr)
    if n == 0:
        yield t.not_found()
        return

    block = math.isqrt(n)
    prev, step = 0, block

    # skip whole blocks whose last element is still below the target
    while arr[min(step, n) - 1] < target:
        last = min(step, n) - 1
        yield t.step(SearchEvent.JUMP, f"Jumping from index {prev} to {last}", jumping=(prev, last))
        prev = step
        step += block
        if prev >= n:
            yield t.not_found()
            return

    end = min(step, n)
    yield t.step(SearchEvent.BLOCK_FOUND, f"Target might be in block [{prev}, {end}]",
                 span=(prev, end))

    while arr[prev] < target:
        yield t.check(prev)
        prev += 1
        if prev == end:
            yield t.not_found()
            return

    yield t.check(prev)
    yield t.found(prev) if arr[prev] == target else t.not_found()


# ---------------------------------------------------------------------------
# Interpolation search
# ---------------------------------------------------------------------------
def interpolation_search(array: Sequence[Number], target: Number) -> Iterator[SearchStep]:
    t = _Tracer(list(array), target)
    arr = t.arr
    low, high = 0, len(arr) - 1

    # the value-range guard is what keeps every probe inside [low, high]
    while low <= high and arr[low] <= target <= arr[high]:
        if low == high:
            yield t.check(low)
            yield t.found(low) if arr[low] == target else t.not_found()
            return

        if arr[high] == arr[low]:
            # flat window: target sits between two equal values, so it is that value
            pos = low
        else:
            pos = low + math.floor((target - arr[low]) * (high - low) / (arr[high] - arr[low]))

        yield t.step(SearchEvent.INTERPOLATE, f"Interpolating position: checking index {pos}",
                     span=(low, high), position=pos)
        yield t.check(pos)

        if arr[pos] == target:
            yield t.found(pos)
            return

        if arr[pos] < target:
            low = pos + 1
            yield t.step(SearchEvent.ADJUST, f"{arr[pos]} < {target}, searching upper part",
                         span=(low, high))
        else:
            high = pos - 1
            yield t.step(SearchEvent.ADJUST, f"{arr[pos]} > {target}, searching lower part",
                         span=(low, high))

    yield t.not_found()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
SEARCHERS: Dict[str, Callable[[Sequence[Number], Number], Iterator[SearchStep]]] = {
    "linear":        linear_search,
    "binary":        binary_search,
    "jump":          jump_search,
    "interpolation": interpolation_search,
}


def search(kind: str, array: Sequence[Number], target: Number) -> List[SearchStep]:
    """Run searcher `kind` for `target` in `array` and return the full trace."""
    searcher = SEARCHERS.get(kind)
    if searcher is None:
        raise InvalidInput(f"Unknown searching algorithm: {kind}")
    return list(searcher(as_number_array(array), as_number(target)))


__all__ = [
    "SEARCHERS",
    "search",
    "linear_search",
    "binary_search",
    "jump_search",
    "interpolation_search",
]
