# src/sortscope/tracers.py
from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .trace import (
    NO_VALUE,
    Decision,
    Element,
    Number,
    RunResult,
    StepRecord,
    to_elements,
    validate_values,
)


def trace_bubble_sort(values: Sequence[Number]) -> RunResult:
    """
    Bubble sort with a full-schedule trace: one record per adjacent comparison,
    n*(n-1)/2 in total, swap or not. No early exit on a sorted prefix.
    """
    snapshot = validate_values(values)
    arr = to_elements(snapshot)
    n = len(arr)
    steps: List[StepRecord] = []

    for i in range(n - 1):
        for j in range(n - i - 1):
            first, second = arr[j], arr[j + 1]
            decision = Decision.SWAP if first.value > second.value else Decision.KEEP_ORDER
            if decision is Decision.SWAP:
                arr[j], arr[j + 1] = second, first
            steps.append(StepRecord(
                step=len(steps) + 1,
                index=first.index,
                value=first.value,
                compare=second.value,
                decision=decision,
            ))

    return RunResult("bubble", [e.value for e in arr], steps, [e.index for e in arr])


def trace_insertion_sort(values: Sequence[Number]) -> RunResult:
    """
    Insertion sort recording only shifts. The comparison that stops each inner
    walk is not recorded, so a sorted input yields zero steps.
    """
    snapshot = validate_values(values)
    arr = to_elements(snapshot)
    steps: List[StepRecord] = []

    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j].value > key.value:
            steps.append(StepRecord(
                step=len(steps) + 1,
                index=arr[j].index,
                value=arr[j].value,
                compare=key.value,
                decision=Decision.SHIFT_RIGHT,
            ))
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key

    return RunResult("insertion", [e.value for e in arr], steps, [e.index for e in arr])


def trace_merge_sort(values: Sequence[Number]) -> RunResult:
    """
    Top-down merge sort, split at n // 2.

    Each merge comparison emits one record describing the element just taken.
    Its ``compare`` column shows the right run's head *after* the take, or
    NO_VALUE once the right run is exhausted. Leftovers are appended without
    records. The step list is local to this call.
    """
    snapshot = validate_values(values)
    steps: List[StepRecord] = []

    def merge(left: List[Element], right: List[Element]) -> List[Element]:
        result: List[Element] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i].value <= right[j].value:
                decision = Decision.CHOOSE_LEFT
                result.append(left[i])
                i += 1
            else:
                decision = Decision.CHOOSE_RIGHT
                result.append(right[j])
                j += 1
            taken = result[-1]
            steps.append(StepRecord(
                step=len(steps) + 1,
                index=taken.index,
                value=taken.value,
                compare=right[j].value if j < len(right) else NO_VALUE,
                decision=decision,
            ))
        result.extend(left[i:])
        result.extend(right[j:])
        return result

    def merge_sort(arr: List[Element]) -> List[Element]:
        if len(arr) <= 1:
            return arr
        mid = len(arr) // 2
        return merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))

    ordered = merge_sort(to_elements(snapshot))
    return RunResult("merge", [e.value for e in ordered], steps, [e.index for e in ordered])


TRACERS: Dict[str, Callable[[Sequence[Number]], RunResult]] = {
    "bubble": trace_bubble_sort,
    "insertion": trace_insertion_sort,
    "merge": trace_merge_sort,
}
