"""Step-by-step traces and case classification for bubble, insertion and merge sort."""
from __future__ import annotations

from .analyze import (
    ALGORITHMS,
    AlgorithmReport,
    ComparisonResult,
    ScalingResult,
    analyze_scaling,
    compare_sorts,
    parse_numbers,
)
from .complexity import (
    CaseLabel,
    Classification,
    classify_bubble,
    classify_insertion,
    classify_merge,
    classify_run,
    efficiency_tier,
    is_reverse_sorted,
    is_sorted,
    space_complexity,
)
from .generators import generate
from .io import export_results_json
from .notify import notify
from .trace import NO_VALUE, Decision, Element, InvalidInput, RunResult, StepRecord
from .tracers import TRACERS, trace_bubble_sort, trace_insertion_sort, trace_merge_sort

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "AlgorithmReport",
    "CaseLabel",
    "Classification",
    "ComparisonResult",
    "Decision",
    "Element",
    "InvalidInput",
    "NO_VALUE",
    "RunResult",
    "ScalingResult",
    "StepRecord",
    "TRACERS",
    "analyze_scaling",
    "classify_bubble",
    "classify_insertion",
    "classify_merge",
    "classify_run",
    "compare_sorts",
    "efficiency_tier",
    "export_results_json",
    "generate",
    "is_reverse_sorted",
    "is_sorted",
    "notify",
    "parse_numbers",
    "space_complexity",
    "trace_bubble_sort",
    "trace_insertion_sort",
    "trace_merge_sort",
]
