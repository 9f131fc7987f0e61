import random

import pytest

from parsortbench.merge_sort import (
    is_sorted,
    main,
    merge,
    merge_sort,
    split_ranges,
    task_merge_sort,
    threaded_merge_sort,
)


def _random_list(size, seed):
    rng = random.Random(seed)
    return [rng.randint(0, 100) for _ in range(size)]


def test_merge_two_sorted_runs():
    values = [1, 4, 9, 2, 3, 10]
    merge(values, 0, 2, 5)
    assert values == [1, 2, 3, 4, 9, 10]


def test_merge_only_touches_given_range():
    values = [50, 3, 7, 1, 8, 0]
    merge(values, 1, 2, 4)
    assert values[0] == 50
    assert values[5] == 0
    assert values[1:5] == sorted([3, 7, 1, 8])


def test_merge_with_empty_left_run():
    values = [5, 6, 7]
    merge(values, 0, -1, 2)
    assert values == [5, 6, 7]


def test_merge_out_of_bounds_raises():
    with pytest.raises(IndexError):
        merge([1, 2], 0, 0, 5)


@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 101])
def test_merge_sort_matches_sorted(size):
    values = _random_list(size, size)
    expected = sorted(values)
    merge_sort(values)
    assert values == expected


@pytest.mark.parametrize("size", [0, 1, 2, 7, 64, 333])
def test_task_merge_sort_matches_sorted(size):
    values = _random_list(size, size + 1)
    expected = sorted(values)
    task_merge_sort(values)
    assert values == expected


def test_split_ranges_balanced_gives_remainder_to_last():
    assert split_ranges(10, 3, True) == [(0, 2), (3, 5), (6, 9)]


def test_split_ranges_unbalanced_drops_remainder():
    assert split_ranges(10, 3, False) == [(0, 2), (3, 5), (6, 8)]


@pytest.mark.parametrize("size,workers", [(20, 2), (17, 4), (5, 8), (0, 3)])
def test_split_ranges_balanced_covers_everything(size, workers):
    ranges = split_ranges(size, workers, True)
    assert len(ranges) == workers
    covered = [i for low, high in ranges for i in range(low, high + 1)]
    assert covered == list(range(size))


def test_split_ranges_rejects_bad_workers():
    with pytest.raises(ValueError):
        split_ranges(10, 0, True)


@pytest.mark.parametrize("size,workers", [(20, 2), (21, 4), (3, 5), (1, 1), (0, 2)])
def test_threaded_merge_sort_balanced(size, workers):
    values = _random_list(size, size * 7 + workers)
    expected = sorted(values)
    threaded_merge_sort(values, workers, True)
    assert values == expected


@pytest.mark.parametrize("size,workers", [(20, 4), (40, 2), (12, 1)])
def test_threaded_merge_sort_unbalanced_divisible(size, workers):
    values = _random_list(size, size + workers)
    expected = sorted(values)
    threaded_merge_sort(values, workers, False)
    assert values == expected


def test_threaded_merge_sort_unbalanced_with_remainder_fails():
    values = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    with pytest.raises(RuntimeError):
        threaded_merge_sort(values, 3, False)


def test_threaded_merge_sort_rejects_zero_workers():
    with pytest.raises(ValueError):
        threaded_merge_sort([3, 1, 2], 0, True)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])


def test_main_serial(capsys):
    assert main(["--mode", "serial", "--seed", "1", "50"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Time to sort data: ")


def test_main_tasks_prints_sorted_list(capsys):
    assert main(["--mode", "tasks", "--seed", "3", "15", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "List Before Sorting..."
    before = [int(v) for v in lines[1].split()]
    after = [int(v) for v in lines[-1].split()]
    assert after == sorted(before)
    assert len(after) == 15


def test_main_threads_prints_ranges_and_result(capsys):
    assert main(["--seed", "5", "20", "1", "2", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "THREADS:2 MAX:20 LEN:10" in lines
    assert "RANGE 1: 10 19" in lines
    result = [int(v) for v in lines[-1].split()]
    assert len(result) == 20
    assert is_sorted(result)


def test_main_threads_unbalanced_with_remainder_reports_error(capsys):
    assert main(["--seed", "2", "10", "0", "3", "0"]) in (0, 1)
    out = capsys.readouterr().out
    assert "Time to sort data: " in out