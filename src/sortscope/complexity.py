# src/sortscope/complexity.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from .trace import Number

# Bubble sort: an unsorted run is "mostly unsorted" above this share of n*(n-1)/2.
MOSTLY_UNSORTED_RATIO = 0.7
# Insertion sort: an unsorted run is "mostly unsorted" above this many shifts per element.
INSERTION_SHIFTS_PER_ELEMENT = 2

# Absolute step thresholds, deliberately not scaled by n.
EFFICIENCY_TIERS: List[Tuple[int, str]] = [
    (10, "Excellent"),
    (20, "Good"),
    (30, "Fair"),
]
EFFICIENCY_FLOOR = "Poor"

O_N = "O(n)"
O_N2 = "O(n²)"
O_NLOGN = "O(n log n)"


class CaseLabel(str, Enum):
    BEST = "Best"
    WORST = "Worst"
    AVERAGE = "Average"
    ALL_CASES = "All Cases"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Classification:
    complexity_label: str
    case_label: CaseLabel
    description: str


@dataclass(frozen=True)
class SpaceComplexity:
    big_o: str
    description: str


SPACE_COMPLEXITY: Dict[str, SpaceComplexity] = {
    "bubble": SpaceComplexity("O(1)", "In-place sorting"),
    "insertion": SpaceComplexity("O(1)", "In-place sorting"),
    "merge": SpaceComplexity("O(n)", "Requires auxiliary array"),
}


def is_sorted(arr: Sequence[Number]) -> bool:
    """True iff ``arr`` never decreases."""
    return all(arr[i] <= arr[i + 1] for i in range(len(arr) - 1))


def is_reverse_sorted(arr: Sequence[Number]) -> bool:
    """True iff ``arr`` never increases."""
    return all(arr[i] >= arr[i + 1] for i in range(len(arr) - 1))


def _shape_case(arr: Sequence[Number]) -> Classification | None:
    # sortedness wins for constant arrays, which are also reverse sorted
    if is_sorted(arr):
        return Classification(O_N, CaseLabel.BEST, "Already sorted")
    if is_reverse_sorted(arr):
        return Classification(O_N2, CaseLabel.WORST, "Reverse sorted")
    return None


def classify_bubble(arr: Sequence[Number], step_count: int) -> Classification:
    shaped = _shape_case(arr)
    if shaped is not None:
        return shaped
    n = len(arr)
    max_comparisons = n * (n - 1) / 2
    if step_count > MOSTLY_UNSORTED_RATIO * max_comparisons:
        description = "Mostly unsorted"
    else:
        description = "Partially sorted"
    return Classification(O_N2, CaseLabel.AVERAGE, description)


def classify_insertion(arr: Sequence[Number], step_count: int) -> Classification:
    shaped = _shape_case(arr)
    if shaped is not None:
        return shaped
    if step_count > INSERTION_SHIFTS_PER_ELEMENT * len(arr):
        description = "Mostly unsorted"
    else:
        description = "Nearly sorted"
    return Classification(O_N2, CaseLabel.AVERAGE, description)


def classify_merge(arr: Sequence[Number], step_count: int = 0) -> Classification:
    """Merge sort does the same split/merge work whatever the input looks like."""
    return Classification(O_NLOGN, CaseLabel.ALL_CASES, "Consistent performance")


CLASSIFIERS: Dict[str, Callable[[Sequence[Number], int], Classification]] = {
    "bubble": classify_bubble,
    "insertion": classify_insertion,
    "merge": classify_merge,
}


def classify_run(algorithm: str, arr: Sequence[Number], step_count: int) -> Classification:
    try:
        classifier = CLASSIFIERS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {sorted(CLASSIFIERS)}")
    return classifier(arr, step_count)


def space_complexity(algorithm: str) -> SpaceComplexity:
    try:
        return SPACE_COMPLEXITY[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {sorted(SPACE_COMPLEXITY)}")


def efficiency_tier(step_count: int) -> str:
    for bound, label in EFFICIENCY_TIERS:
        if step_count < bound:
            return label
    return EFFICIENCY_FLOOR


def growth_family(slope: float) -> str:
    """Map the log-log slope of step count against n to a growth family."""
    if slope < 0.3:
        return "O(1)"
    if slope < 0.8:
        return "O(log n)"
    if slope < 1.1:
        return O_N
    if slope < 1.6:
        return O_NLOGN
    if slope < 2.5:
        return O_N2
    return "super-quadratic"
