# src/sortscope/utils.py
from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np


def human_time(seconds: float) -> str:
    if seconds is None or not (isinstance(seconds, (int, float)) and math.isfinite(seconds)):
        return "—"
    if seconds < 1e-6:
        return f"{seconds*1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds*1e6:.2f} µs"
    if seconds < 1.0:
        return f"{seconds*1e3:.2f} ms"
    return f"{seconds:.3f} s"


def human_bytes(nbytes: float) -> str:
    try:
        s = float(nbytes)
    except (TypeError, ValueError):
        return "—"
    units = ["B", "KB", "MB", "GB", "TB"]
    idx = 0
    while s >= 1024.0 and idx < len(units) - 1:
        s /= 1024.0
        idx += 1
    return f"{s:.2f} {units[idx]}"


def format_number(value) -> str:
    """
    Render a traced value the way it was typed: integral floats lose the
    trailing ``.0`` and non-numbers (the merge sentinel) pass through.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
        return str(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def rank(values: List[float]) -> List[int]:
    """1-based rank of each value, smallest first; ties keep input order."""
    indexed = list(enumerate(values))
    indexed.sort(key=lambda t: t[1])
    ranks = [0] * len(values)
    r = 1
    for orig_idx, _ in indexed:
        ranks[orig_idx] = r
        r += 1
    return ranks


def empirical_slope(ns: Sequence[int], values: Sequence[float]) -> Optional[float]:
    """
    Least-squares slope of log(values) against log(ns). Non-positive or
    non-finite points are dropped; returns None with fewer than two left.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return None
    mask = np.isfinite(arr) & (arr > 0)
    if mask.sum() < 2:
        return None
    xs = np.log(np.asarray(ns, dtype=float)[mask])
    ys = np.log(arr[mask])
    try:
        slope, _intercept = np.polyfit(xs, ys, 1)
    except (np.linalg.LinAlgError, ValueError):
        return None
    return float(slope)
