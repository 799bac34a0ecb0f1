# src/sortscope/generators.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional

import numpy as np

DEFAULT_LOW = 1
DEFAULT_HIGH = 100


def _random(rng: np.random.Generator, size: int) -> np.ndarray:
    return rng.integers(DEFAULT_LOW, DEFAULT_HIGH, size=size, endpoint=True)


def _sorted(rng: np.random.Generator, size: int) -> np.ndarray:
    return np.sort(_random(rng, size))


def _reverse(rng: np.random.Generator, size: int) -> np.ndarray:
    return _sorted(rng, size)[::-1]


def _nearly_sorted(rng: np.random.Generator, size: int) -> np.ndarray:
    arr = _sorted(rng, size)
    # swap roughly one adjacent pair in ten, at least one
    swaps = max(1, size // 10)
    for pos in rng.integers(0, size - 1, size=swaps):
        arr[pos], arr[pos + 1] = arr[pos + 1], arr[pos]
    return arr


def _few_unique(rng: np.random.Generator, size: int) -> np.ndarray:
    pool = rng.integers(DEFAULT_LOW, DEFAULT_HIGH, size=3, endpoint=True)
    return rng.choice(pool, size=size)


GENERATORS: Dict[str, Callable[[np.random.Generator, int], np.ndarray]] = {
    "random": _random,
    "sorted": _sorted,
    "reverse": _reverse,
    "nearly_sorted": _nearly_sorted,
    "few_unique": _few_unique,
}


def generate(kind: str = "random", size: int = 8, seed: Optional[int] = None) -> List[int]:
    """
    Build an input array of integers in [1, 100] with the requested shape.

    kind: one of GENERATORS' keys.
    size: at least 2, since shorter arrays cannot be traced.
    seed: forwarded to numpy's default_rng for reproducible arrays.
    """
    if kind not in GENERATORS:
        raise ValueError(f"kind must be one of {sorted(GENERATORS)}, got {kind!r}")
    if not isinstance(size, int) or isinstance(size, bool) or size < 2:
        raise ValueError("size must be an integer >= 2.")
    rng = np.random.default_rng(seed)
    return [int(v) for v in GENERATORS[kind](rng, size)]
