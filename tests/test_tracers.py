from __future__ import annotations

import pytest

from sortscope import (
    NO_VALUE,
    Decision,
    InvalidInput,
    trace_bubble_sort,
    trace_insertion_sort,
    trace_merge_sort,
)

S, K = Decision.SWAP, Decision.KEEP_ORDER


def test_bubble_full_schedule_on_5142():
    res = trace_bubble_sort([5, 1, 4, 2])
    assert res.sorted_values == [1, 2, 4, 5]
    assert res.step_count == 6
    # pass 0 bubbles 5 to the end, pass 1 swaps (4, 2), pass 2 only compares
    assert res.decisions == [S, S, S, K, S, K]
    assert [(r.index, r.value, r.compare) for r in res.steps] == [
        (0, 5, 1), (0, 5, 4), (0, 5, 2), (1, 1, 4), (2, 4, 2), (1, 1, 2),
    ]
    assert [r.step for r in res.steps] == [1, 2, 3, 4, 5, 6]


def test_bubble_runs_every_comparison_on_sorted_input():
    res = trace_bubble_sort([1, 2, 3, 4])
    assert res.step_count == 3 + 2 + 1
    assert set(res.decisions) == {K}


def test_insertion_records_only_shifts():
    res = trace_insertion_sort([5, 1, 4, 2])
    assert res.sorted_values == [1, 2, 4, 5]
    assert res.decisions == [Decision.SHIFT_RIGHT] * 4
    assert [(r.index, r.value, r.compare) for r in res.steps] == [
        (0, 5, 1), (0, 5, 4), (0, 5, 2), (2, 4, 2),
    ]


def test_insertion_sorted_input_has_no_steps():
    res = trace_insertion_sort([1, 2, 3, 4])
    assert res.step_count == 0
    assert res.sorted_values == [1, 2, 3, 4]


def test_insertion_reverse_input_shifts_every_pair():
    assert trace_insertion_sort([4, 3, 2, 1]).step_count == 6


def test_merge_trace_on_5142():
    res = trace_merge_sort([5, 1, 4, 2])
    assert res.sorted_values == [1, 2, 4, 5]
    assert [(r.step, r.index, r.value, r.compare, r.decision) for r in res.steps] == [
        (1, 1, 1, NO_VALUE, Decision.CHOOSE_RIGHT),
        (2, 3, 2, NO_VALUE, Decision.CHOOSE_RIGHT),
        (3, 1, 1, 2, Decision.CHOOSE_LEFT),
        (4, 3, 2, 4, Decision.CHOOSE_RIGHT),
        (5, 2, 4, NO_VALUE, Decision.CHOOSE_RIGHT),
    ]


def test_merge_compare_column_shows_next_right_value():
    # [1, 3] + [2, 4]: after taking 2 the right head is 4, not the 3 it was compared with
    res = trace_merge_sort([1, 3, 2, 4])
    last_merge = res.steps[2:]
    assert [(r.value, r.compare, r.decision) for r in last_merge] == [
        (1, 2, Decision.CHOOSE_LEFT),
        (2, 4, Decision.CHOOSE_RIGHT),
        (3, 4, Decision.CHOOSE_LEFT),
    ]


def test_merge_step_numbering_restarts_per_call():
    first = trace_merge_sort([3, 2, 1])
    second = trace_merge_sort([3, 2, 1])
    assert first.steps[0].step == 1
    assert second.steps[0].step == 1
    assert first.steps == second.steps


@pytest.mark.parametrize("tracer", [trace_bubble_sort, trace_insertion_sort, trace_merge_sort])
def test_equal_values_keep_original_order(tracer):
    res = tracer([2, 1, 2, 1, 2])
    assert res.sorted_values == [1, 1, 2, 2, 2]
    assert res.order == [1, 3, 0, 2, 4]


@pytest.mark.parametrize("tracer", [trace_bubble_sort, trace_insertion_sort, trace_merge_sort])
def test_input_is_not_mutated(tracer):
    data = [3, 1, 2]
    tracer(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("tracer", [trace_bubble_sort, trace_insertion_sort, trace_merge_sort])
def test_floats_and_negatives(tracer):
    assert tracer([0.5, -2, 3.25, -2.5]).sorted_values == [-2.5, -2, 0.5, 3.25]


@pytest.mark.parametrize("tracer", [trace_bubble_sort, trace_insertion_sort, trace_merge_sort])
@pytest.mark.parametrize("bad", [[], [7], ["a", 1], [True, 2], [1, float("nan")], "1,2"])
def test_rejects_untraceable_input(tracer, bad):
    with pytest.raises(InvalidInput):
        tracer(bad)


def test_too_short_input_is_an_input_required_error():
    with pytest.raises(InvalidInput) as exc:
        trace_bubble_sort([1])
    assert exc.value.title == "Input Required"


def test_step_record_row():
    row = trace_bubble_sort([2, 1]).steps[0].as_row()
    assert row == {"step": 1, "index": 0, "value": 2, "compare": 1, "decision": "Swap"}
