"""Random test data shared by the benchmarks."""

from __future__ import annotations

import random
from collections.abc import Iterable

RAND_MAX = 2147483647
"""Largest value the underlying generator draws before bucketing."""


def rand_interval(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return an unbiased integer in ``[low, high]`` by bucketed rejection sampling."""
    if high < low:
        raise ValueError(f"empty interval: [{low}, {high}]")
    span = 1 + high - low
    if span > RAND_MAX:
        raise ValueError(f"interval [{low}, {high}] is wider than the generator range")
    rng = rng if rng is not None else random.Random()
    buckets = RAND_MAX // span
    limit = buckets * span
    while True:
        drawn = rng.randint(0, RAND_MAX)
        if drawn < limit:
            return low + drawn // buckets


def fill_randomly(
    size: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``size`` random integers drawn from ``[low, high]``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    rng = rng if rng is not None else random.Random()
    return [rand_interval(low, high, rng) for _ in range(size)]


def format_array(values: Iterable[int]) -> str:
    """Render values the way the benchmarks print them: each followed by a space."""
    return "".join(f"{value} " for value in values)