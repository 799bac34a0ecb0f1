# src/sortscope/memory.py
from __future__ import annotations

import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable, Sequence

from .trace import Number, RunResult


@dataclass
class Measurement:
    result: RunResult
    duration: float  # seconds
    peak_bytes: int


def measure_tracer(tracer: Callable[[Sequence[Number]], RunResult], values: Sequence[Number]) -> Measurement:
    """
    Run a tracer once and return its result together with wall time and peak
    Python-level allocation during the call. If tracemalloc is already
    tracing (e.g. under a profiler) it is left running afterwards.
    """
    already_tracing = tracemalloc.is_tracing()
    if already_tracing:
        tracemalloc.reset_peak()
    else:
        tracemalloc.start()
    try:
        t0 = time.perf_counter()
        result = tracer(values)
        duration = time.perf_counter() - t0
        _current, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return Measurement(result=result, duration=duration, peak_bytes=int(peak))
