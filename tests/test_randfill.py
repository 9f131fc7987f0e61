import random

import pytest

from parsortbench.randfill import RAND_MAX, fill_randomly, format_array, rand_interval


class _ScriptedRng:
    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        return self.draws.pop(0)


def test_rand_interval_stays_in_bounds():
    rng = random.Random(7)
    results = [rand_interval(0, 100, rng) for _ in range(2000)]
    assert min(results) >= 0
    assert max(results) <= 100


def test_rand_interval_single_point():
    rng = random.Random(3)
    assert rand_interval(42, 42, rng) == 42


def test_rand_interval_rejects_empty_interval():
    with pytest.raises(ValueError):
        rand_interval(10, 5, random.Random(0))


def test_rand_interval_retries_above_limit():
    rng = _ScriptedRng([RAND_MAX, 0])
    assert rand_interval(5, 105, rng) == 5
    assert rng.calls == 2


def test_rand_interval_is_deterministic_for_seed():
    first = [rand_interval(0, 100, random.Random(11)) for _ in range(5)]
    second = [rand_interval(0, 100, random.Random(11)) for _ in range(5)]
    assert first == second


def test_fill_randomly_length_and_range():
    values = fill_randomly(50, 0, 100, random.Random(1))
    assert len(values) == 50
    assert all(0 <= v <= 100 for v in values)


def test_fill_randomly_empty():
    assert fill_randomly(0, 0, 100, random.Random(1)) == []


def test_fill_randomly_negative_size():
    with pytest.raises(ValueError):
        fill_randomly(-1, 0, 100, random.Random(1))


def test_fill_randomly_maps_draws_to_buckets():
    buckets = RAND_MAX // 101
    rng = _ScriptedRng([0, buckets * 3, buckets * 100])
    assert fill_randomly(3, 0, 100, rng) == [0, 3, 100]
    assert rng.calls == 3


def test_format_array():
    assert format_array([1, 2, 3]) == "1 2 3 "
    assert format_array([]) == ""