import random

import pytest

from algorithms.sorting import SORTERS, sort
from algorithms.step import SortEvent
from errors import InvalidInput

KINDS = sorted(SORTERS)

rng = random.Random(7)
ARRAYS = [
    [5, 3, 1],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [3, 1, 3, 2, 1],
    [-2, 7, 0, -9, 4],
    [2.5, 1, 0.5, 2],
    [rng.randint(-20, 20) for _ in range(12)],
    [rng.randint(0, 5) for _ in range(15)],
]


def kinds_of(trace, kind):
    return [s for s in trace if s.kind == kind]


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("array", ARRAYS)
def test_trace_ends_sorted(kind, array):
    trace = sort(kind, array)
    last = trace[-1]
    assert last.kind == SortEvent.COMPLETE
    assert list(last.array) == sorted(array)
    assert set(last.sorted) == set(range(len(array)))


@pytest.mark.parametrize("kind", [k for k in KINDS if k != "merge"])
@pytest.mark.parametrize("array", ARRAYS)
def test_every_snapshot_is_a_permutation(kind, array):
    for step in sort(kind, array):
        assert sorted(step.array) == sorted(array)


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("array", [[], [42]])
def test_trivial_inputs_yield_only_complete(kind, array):
    trace = sort(kind, array)
    assert [s.kind for s in trace] == [SortEvent.COMPLETE]
    assert list(trace[0].array) == array


def test_input_is_not_mutated():
    array = [3, 2, 1]
    sort("quick", array)
    assert array == [3, 2, 1]


def test_steps_do_not_share_the_working_array():
    trace = sort("bubble", [5, 3, 1])
    assert trace[0].array == (5, 3, 1)
    assert trace[1].kind == SortEvent.SWAP
    assert trace[1].array == (3, 5, 1)
    assert trace[0].array == (5, 3, 1)


def test_bubble_three_element_reverse():
    trace = sort("bubble", [5, 3, 1])
    assert list(trace[-1].array) == [1, 3, 5]
    # one swap per inversion
    assert len(kinds_of(trace, SortEvent.COMPARE)) == 3
    assert len(kinds_of(trace, SortEvent.SWAP)) == 3
    assert trace[-1].highlight == frozenset({0, 1, 2})


def test_bubble_stops_after_a_clean_pass():
    trace = sort("bubble", [1, 2, 3, 4])
    assert len(kinds_of(trace, SortEvent.COMPARE)) == 3
    assert kinds_of(trace, SortEvent.SWAP) == []
    assert len(kinds_of(trace, SortEvent.SORTED)) == 1


def test_bubble_compare_and_swap_are_adjacent():
    for step in sort("bubble", [9, 4, 7, 1]):
        pair = step.comparing or step.swapping
        if pair:
            assert pair[1] == pair[0] + 1


def test_quick_pivot_is_last_of_range():
    trace = sort("quick", [3, 8, 1, 9, 2])
    pivots = kinds_of(trace, SortEvent.PIVOT)
    assert pivots
    for step in pivots:
        assert step.pivot == step.span[1]


def test_merge_split_ranges_cover_the_span():
    trace = sort("merge", [4, 1, 3, 2])
    splits = kinds_of(trace, SortEvent.SPLIT)
    assert len(splits) == 3
    for step in splits:
        (lo, mid), (mid1, hi) = step.left_range, step.right_range
        assert mid1 == mid + 1
        assert lo <= mid < hi


def test_merge_is_stable_on_ties():
    trace = sort("merge", [2, 1, 2, 1])
    assert list(trace[-1].array) == [1, 1, 2, 2]


def test_heap_steps_are_tagged():
    trace = sort("heap", [4, 10, 3, 5, 1])
    heap_compares = [s for s in kinds_of(trace, SortEvent.COMPARE)]
    assert heap_compares and all(s.heap for s in heap_compares)
    extractions = [s for s in kinds_of(trace, SortEvent.SWAP) if not s.heap]
    assert len(extractions) == 4
    # the sorted tail grows by one per extraction
    assert [len(s.sorted) for s in extractions] == [1, 2, 3, 4]


def test_insertion_events():
    trace = sort("insertion", [3, 1, 2])
    kinds = [s.kind for s in trace]
    assert kinds.count(SortEvent.SELECT) == 2
    assert kinds.count(SortEvent.INSERT) == 2
    assert kinds.count(SortEvent.SHIFT) == 2


def test_selection_swaps_only_when_needed():
    trace = sort("selection", [1, 3, 2])
    swaps = kinds_of(trace, SortEvent.SWAP)
    assert len(swaps) == 1
    assert swaps[0].swapping == (1, 2)


@pytest.mark.parametrize("bad", [
    None, "123", {"a": 1}, [1, "2"], [True, 1], [float("nan")], [float("inf")], [10 ** 400, 1],
])
def test_rejects_non_numeric_arrays(bad):
    with pytest.raises(InvalidInput):
        sort("bubble", bad)


def test_rejects_unknown_kind():
    with pytest.raises(InvalidInput):
        sort("bogo", [1, 2])
