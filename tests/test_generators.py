from __future__ import annotations

import pytest

from sortscope import generate, is_reverse_sorted, is_sorted
from sortscope.generators import GENERATORS


@pytest.mark.parametrize("kind", sorted(GENERATORS))
def test_generated_arrays_are_traceable_ints(kind):
    arr = generate(kind, 12, seed=3)
    assert len(arr) == 12
    assert all(isinstance(v, int) and 1 <= v <= 100 for v in arr)


def test_shapes():
    assert is_sorted(generate("sorted", 20, seed=1))
    assert is_reverse_sorted(generate("reverse", 20, seed=1))
    assert len(set(generate("few_unique", 50, seed=1))) <= 3


def test_nearly_sorted_is_a_permutation_of_sorted():
    arr = generate("nearly_sorted", 30, seed=5)
    assert sorted(arr) == generate("sorted", 30, seed=5)


def test_seed_makes_arrays_reproducible():
    assert generate("random", 10, seed=42) == generate("random", 10, seed=42)


@pytest.mark.parametrize("kind,size", [("zigzag", 5), ("random", 1), ("random", 2.5), ("random", True)])
def test_rejects_bad_arguments(kind, size):
    with pytest.raises(ValueError):
        generate(kind, size)
