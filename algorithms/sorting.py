"""
sorting.py — Sorting Engine
============================
Generator-based comparison sorts.  Each generator works on a private copy
of the input and yields a SortStep at every observable event:

  bubble     compare → swap? … → sorted (per pass)
  quick      pivot → compare → swap? … → swap (pivot placement)
  merge      split → (compare → merge)* → merged
  heap       compare (children) → swap? during heapify; swap root → tail
  insertion  select → (compare → shift)* → insert
  selection  find-min → (compare → new-min?)* → swap? → sorted

Every run ends with a `complete` step whose `sorted` indices cover the
whole array.  Empty and single-element arrays produce only that step.

    from algorithms.sorting import sort
    trace = sort("quick", [5, 3, 1])
"""

from typing import Callable, Dict, Iterator, List, Sequence

from algorithms.inputs import Number, as_number_array
from algorithms.step import SortEvent, SortStep, snapshot
from errors import InvalidInput


def _step(kind: SortEvent, description: str, arr: List[Number], **state) -> SortStep:
    return snapshot(SortStep, kind, description, array=arr, **state)


def _tail(n: int, count: int) -> List[int]:
    """The last `count` positions, rightmost first."""
    return [n - 1 - k for k in range(count)]


def _complete(arr: List[Number]) -> SortStep:
    return _step(SortEvent.COMPLETE, "Sorting complete!", arr, sorted=range(len(arr)))


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
def bubble_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    """Stops after the first pass that performs no swap."""
    arr = list(array)
    n = len(arr)

    for i in range(n - 1):
        done = _tail(n, i)
        swapped = False
        for j in range(n - i - 1):
            yield _step(SortEvent.COMPARE, f"Comparing {arr[j]} and {arr[j + 1]}", arr,
                        comparing=(j, j + 1), sorted=done)
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield _step(SortEvent.SWAP, f"Swapping {arr[j + 1]} and {arr[j]}", arr,
                            swapping=(j, j + 1), sorted=done)

        yield _step(SortEvent.SORTED, f"Element at position {n - i - 1} is now sorted", arr,
                    sorted=_tail(n, i + 1))
        if not swapped:
            break

    yield _complete(arr)


# ---------------------------------------------------------------------------
# Quick sort (Lomuto)
# ---------------------------------------------------------------------------
def quick_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    """
    Explicit stack instead of recursion (no recursion-limit trouble on
    already-sorted input).  The left range is pushed last so it is popped
    first, which gives the same order as left-then-right recursion.
    """
    arr = list(array)
    stack = [(0, len(arr) - 1)]

    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        pi = yield from _partition(arr, low, high)
        stack.append((pi + 1, high))
        stack.append((low, pi - 1))

    yield _complete(arr)


def _partition(arr: List[Number], low: int, high: int):
    pivot = arr[high]
    span = (low, high)
    i = low - 1

    yield _step(SortEvent.PIVOT, f"Choosing {pivot} as pivot", arr, pivot=high, span=span)

    for j in range(low, high):
        yield _step(SortEvent.COMPARE, f"Comparing {arr[j]} with pivot {pivot}", arr,
                    comparing=(j, high), span=span)
        if arr[j] < pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                yield _step(SortEvent.SWAP, f"Swapping {arr[j]} and {arr[i]}", arr,
                            swapping=(i, j), span=span)

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    yield _step(SortEvent.SWAP, f"Placing pivot {pivot} at position {i + 1}", arr,
                swapping=(i + 1, high), span=span)
    return i + 1


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------
def merge_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    arr = list(array)
    yield from _merge_sort(arr, 0, len(arr) - 1)
    yield _complete(arr)


def _merge_sort(arr: List[Number], left: int, right: int):
    if left < right:
        mid = (left + right) // 2
        yield from _merge_sort(arr, left, mid)
        yield from _merge_sort(arr, mid + 1, right)
        yield from _merge(arr, left, mid, right)


def _merge(arr: List[Number], left: int, mid: int, right: int):
    left_part = arr[left:mid + 1]
    right_part = arr[mid + 1:right + 1]
    span = (left, right)

    yield _step(SortEvent.SPLIT, f"Splitting array into {left_part} and {right_part}", arr,
                left_range=(left, mid), right_range=(mid + 1, right))

    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        yield _step(SortEvent.COMPARE, f"Comparing {left_part[i]} and {right_part[j]}", arr,
                    comparing=(left + i, mid + 1 + j), span=span)
        # <= keeps equal keys in input order
        if left_part[i] <= right_part[j]:
            arr[k] = left_part[i]
            i += 1
        else:
            arr[k] = right_part[j]
            j += 1
        yield _step(SortEvent.MERGE, f"Placing {arr[k]} at position {k}", arr,
                    merging=k, span=span)
        k += 1

    # leftovers are copied without steps
    rest = left_part[i:] + right_part[j:]
    arr[k:k + len(rest)] = rest

    yield _step(SortEvent.MERGED, f"Merged subarray from {left} to {right}", arr, span=span)


# ---------------------------------------------------------------------------
# Heap sort
# ---------------------------------------------------------------------------
def heap_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    arr = list(array)
    n = len(arr)

    # build max-heap
    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(arr, n, i)

    # extract
    for i in range(n - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        yield _step(SortEvent.SWAP, f"Moving {arr[i]} to sorted position {i}", arr,
                    swapping=(0, i), sorted=_tail(n, n - i))
        yield from _sift_down(arr, i, 0)

    yield _complete(arr)


def _sift_down(arr: List[Number], size: int, i: int):
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2

        if left < size:
            yield _step(SortEvent.COMPARE, f"Comparing {arr[left]} and {arr[largest]}", arr,
                        comparing=(left, largest), heap=True)
            if arr[left] > arr[largest]:
                largest = left

        if right < size:
            yield _step(SortEvent.COMPARE, f"Comparing {arr[right]} and {arr[largest]}", arr,
                        comparing=(right, largest), heap=True)
            if arr[right] > arr[largest]:
                largest = right

        if largest == i:
            return

        arr[i], arr[largest] = arr[largest], arr[i]
        yield _step(SortEvent.SWAP,
                    f"Swapping {arr[i]} and {arr[largest]} to maintain heap property", arr,
                    swapping=(i, largest), heap=True)
        i = largest


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def insertion_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    """
    The key travels left by adjacent exchanges, so every snapshot holds
    each value exactly once.
    """
    arr = list(array)
    n = len(arr)

    for i in range(1, n):
        key = arr[i]
        yield _step(SortEvent.SELECT, f"Selecting {key} at index {i} to insert into the sorted part",
                    arr, focus=(i,), sorted=range(i))

        j = i - 1
        while j >= 0:
            yield _step(SortEvent.COMPARE, f"Comparing {arr[j]} with {key}", arr,
                        comparing=(j, j + 1), sorted=range(i))
            if arr[j] <= key:
                break
            arr[j], arr[j + 1] = key, arr[j]
            yield _step(SortEvent.SHIFT, f"Shifting {arr[j + 1]} to the right", arr,
                        swapping=(j, j + 1), sorted=range(i))
            j -= 1

        yield _step(SortEvent.INSERT, f"Inserted {key} at position {j + 1}", arr,
                    focus=(j + 1,), sorted=range(i + 1))

    yield _complete(arr)


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
def selection_sort(array: Sequence[Number]) -> Iterator[SortStep]:
    arr = list(array)
    n = len(arr)

    for i in range(n - 1):
        min_idx = i
        yield _step(SortEvent.FIND_MIN,
                    f"Finding the minimum of the unsorted part starting at index {i}", arr,
                    focus=(i,), sorted=range(i))

        for j in range(i + 1, n):
            yield _step(SortEvent.COMPARE, f"Comparing current minimum {arr[min_idx]} with {arr[j]}",
                        arr, comparing=(min_idx, j), sorted=range(i))
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield _step(SortEvent.NEW_MIN, f"New minimum {arr[min_idx]} at index {min_idx}", arr,
                            focus=(min_idx,), sorted=range(i))

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield _step(SortEvent.SWAP, f"Swapping {arr[min_idx]} with minimum {arr[i]}", arr,
                        swapping=(i, min_idx), sorted=range(i))

        yield _step(SortEvent.SORTED, f"Element at index {i} is now in its final position", arr,
                    sorted=range(i + 1))

    yield _complete(arr)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
SORTERS: Dict[str, Callable[[Sequence[Number]], Iterator[SortStep]]] = {
    "bubble":    bubble_sort,
    "quick":     quick_sort,
    "merge":     merge_sort,
    "heap":      heap_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
}


def sort(kind: str, array: Sequence[Number]) -> List[SortStep]:
    """Run sorter `kind` over `array` and return the full trace."""
    sorter = SORTERS.get(kind)
    if sorter is None:
        raise InvalidInput(f"Unknown sorting algorithm: {kind}")
    return list(sorter(as_number_array(array)))


__all__ = [
    "SORTERS",
    "sort",
    "bubble_sort",
    "quick_sort",
    "merge_sort",
    "heap_sort",
    "insertion_sort",
    "selection_sort",
]
