from __future__ import annotations

import pytest

from sortscope import (
    CaseLabel,
    classify_bubble,
    classify_insertion,
    classify_merge,
    classify_run,
    efficiency_tier,
    is_reverse_sorted,
    is_sorted,
    space_complexity,
    trace_bubble_sort,
    trace_insertion_sort,
)
from sortscope.complexity import growth_family


def test_sortedness_checks():
    assert is_sorted([1, 2, 2, 3])
    assert is_reverse_sorted([3, 2, 2, 1])
    assert not is_sorted([2, 1, 3])
    assert not is_reverse_sorted([2, 1, 3])


def test_constant_array_counts_as_sorted():
    assert classify_bubble([2, 2, 2], 3).case_label is CaseLabel.BEST
    assert classify_insertion([2, 2, 2], 0).description == "Already sorted"


def test_sorted_input_is_best_case():
    arr = [1, 2, 3, 4]
    for c in (
        classify_bubble(arr, trace_bubble_sort(arr).step_count),
        classify_insertion(arr, trace_insertion_sort(arr).step_count),
    ):
        assert (c.complexity_label, c.case_label, c.description) == ("O(n)", CaseLabel.BEST, "Already sorted")


def test_reverse_input_is_worst_case():
    arr = [4, 3, 2, 1]
    for c in (classify_bubble(arr, 6), classify_insertion(arr, 6)):
        assert (c.complexity_label, c.case_label, c.description) == ("O(n²)", CaseLabel.WORST, "Reverse sorted")
    assert classify_merge(arr).case_label is CaseLabel.ALL_CASES


def test_bubble_average_thresholds():
    arr = [5, 1, 4, 2]
    # 6 > 0.7 * 6
    assert classify_bubble(arr, 6).description == "Mostly unsorted"
    assert classify_bubble(arr, 4).description == "Partially sorted"
    assert classify_bubble(arr, 5).description == "Mostly unsorted"
    assert classify_bubble(arr, 6).case_label is CaseLabel.AVERAGE


def test_insertion_average_thresholds():
    arr = [5, 1, 4, 2]
    assert classify_insertion(arr, 8).description == "Nearly sorted"
    assert classify_insertion(arr, 9).description == "Mostly unsorted"
    assert classify_insertion(arr, 4).complexity_label == "O(n²)"


@pytest.mark.parametrize("arr", [[1, 2, 3], [3, 2, 1], [2, 3, 1], [5, 5]])
def test_merge_is_shape_independent(arr):
    c = classify_merge(arr)
    assert (c.complexity_label, c.case_label, c.description) == (
        "O(n log n)", CaseLabel.ALL_CASES, "Consistent performance"
    )


def test_classify_run_dispatch():
    assert classify_run("insertion", [1, 2], 0).case_label is CaseLabel.BEST
    with pytest.raises(ValueError):
        classify_run("quick", [1, 2], 0)


def test_space_complexity_lookup():
    assert space_complexity("bubble").big_o == "O(1)"
    assert space_complexity("insertion").description == "In-place sorting"
    assert space_complexity("merge").big_o == "O(n)"
    assert space_complexity("merge").description == "Requires auxiliary array"
    with pytest.raises(ValueError):
        space_complexity("heap")


@pytest.mark.parametrize("steps,tier", [
    (0, "Excellent"), (9, "Excellent"), (10, "Good"), (19, "Good"),
    (20, "Fair"), (29, "Fair"), (30, "Poor"), (4950, "Poor"),
])
def test_efficiency_tier_uses_fixed_thresholds(steps, tier):
    assert efficiency_tier(steps) == tier


def test_growth_family_bands():
    assert growth_family(1.0) == "O(n)"
    assert growth_family(1.35) == "O(n log n)"
    assert growth_family(2.05) == "O(n²)"
