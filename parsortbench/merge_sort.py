"""Merge sort benchmark: serial, recursive-task and range-per-thread variants."""

from __future__ import annotations

import argparse
import heapq
import os
import random
import threading
import time
from collections.abc import MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import pairwise

from parsortbench.randfill import fill_randomly, format_array


def _ctrunc(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def merge(values: MutableSequence[int], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs ``values[low..mid]`` and ``values[mid+1..high]`` in place.

    Bounds are inclusive. Ties take the element from the left run first.
    """
    if high < low:
        return
    if low < 0 or high >= len(values):
        raise IndexError(f"range [{low}, {high}] outside a sequence of {len(values)}")
    mid = max(low - 1, min(mid, high))
    left = list(values[low : mid + 1])
    right = list(values[mid + 1 : high + 1])
    values[low : high + 1] = list(heapq.merge(left, right))


def _merge_sort_range(values: MutableSequence[int], low: int, high: int) -> None:
    if low < high:
        mid = low + (high - low) // 2
        _merge_sort_range(values, low, mid)
        _merge_sort_range(values, mid + 1, high)
        merge(values, low, mid, high)


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with a top-down merge sort."""
    _merge_sort_range(values, 0, len(values) - 1)


def _task_sort(values: MutableSequence[int], low: int, high: int, depth: int) -> None:
    count = high - low + 1
    if count < 2:
        return
    mid = low + count // 2 - 1
    if depth > 0:
        left = threading.Thread(target=_task_sort, args=(values, low, mid, depth - 1))
        left.start()
        _task_sort(values, mid + 1, high, depth - 1)
        left.join()
    else:
        _task_sort(values, low, mid, 0)
        _task_sort(values, mid + 1, high, 0)
    merge(values, low, mid, high)


def task_merge_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place, running the two halves of each split as concurrent tasks.

    Tasks are spawned down to a depth that gives about one per processor; deeper
    splits run inline.
    """
    depth = max(0, (os.cpu_count() or 1) - 1).bit_length()
    _task_sort(values, 0, len(values) - 1, depth)


def split_ranges(size: int, workers: int, balanced: bool = True) -> list[tuple[int, int]]:
    """Return the inclusive ``(low, high)`` range each worker sorts.

    With ``balanced`` the last worker also takes the remainder; otherwise every
    range has ``size // workers`` elements and any remainder is left out.
    """
    if workers < 1:
        raise ValueError(f"workers must be positive: {workers}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    length = size // workers
    ranges = []
    for index in range(workers):
        low = index * length
        high = low + length - 1
        if balanced and index == workers - 1:
            high = size - 1
        ranges.append((low, high))
    return ranges


def _sort_ranges(values: MutableSequence[int], ranges: Sequence[tuple[int, int]]) -> None:
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(_merge_sort_range, values, low, high) for low, high in ranges]
        for future in futures:
            future.result()


def _merge_ranges(
    values: MutableSequence[int], ranges: Sequence[tuple[int, int]], balanced: bool
) -> None:
    size = len(values)
    if balanced:
        first_low = ranges[0][0]
        for low, high in ranges[1:]:
            merge(values, first_low, low - 1, high)
    else:
        half = size // 2
        merge(values, 0, _ctrunc(half - 1, 2), half - 1)
        merge(values, half, half + _ctrunc(size - 1 - half, 2), size - 1)
        merge(values, 0, _ctrunc(size - 1, 2), size - 1)
    if not is_sorted(values):
        raise RuntimeError("merged result is not sorted")


def threaded_merge_sort(
    values: MutableSequence[int], workers: int, balanced: bool = True
) -> None:
    """Sort ``values`` in place: each worker thread sorts one range, then the ranges are merged.

    The unbalanced layout merges as if there were four equal ranges; RuntimeError
    is raised when the result is not sorted.
    """
    ranges = split_ranges(len(values), workers, balanced)
    _sort_ranges(values, ranges)
    _merge_ranges(values, ranges, balanced)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(first <= second for first, second in pairwise(values))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parsortbench-merge", description="Time a merge sort over random data."
    )
    parser.add_argument("size", type=int, nargs="?", default=None)
    parser.add_argument("print_values", type=int, nargs="?", default=0)
    parser.add_argument("threads", type=int, nargs="?", default=2)
    parser.add_argument("balanced", type=int, nargs="?", default=1)
    parser.add_argument(
        "--mode", choices=("serial", "tasks", "threads"), default="threads"
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the merge sort benchmark from the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.mode in ("serial", "tasks"):
        size = 10 if args.size is None else args.size
        if size < 0:
            parser.error("size must not be negative")
        values = fill_randomly(size, 0, 100, rng)
        if args.mode == "serial":
            begin = time.process_time()
            merge_sort(values)
            elapsed = time.process_time() - begin
            print(f"Time to sort data: {elapsed:f} Seconds")
            return 0
        if args.print_values:
            print("List Before Sorting...")
            print(format_array(values))
        begin = time.process_time()
        task_merge_sort(values)
        elapsed = time.process_time() - begin
        print(f"Time to sort data: {elapsed:f} Seconds")
        if args.print_values:
            print("\nList After Sorting...")
            print(format_array(values))
        return 0

    size = 20 if args.size is None else args.size
    if size < 0:
        parser.error("size must not be negative")
    if args.threads < 1:
        parser.error("threads must be positive")
    balanced = bool(args.balanced)

    begin = time.process_time()
    values = fill_randomly(size, 0, 100, rng)
    elapsed = time.process_time() - begin
    print(f"Time to fill array with random data: {elapsed:f} Seconds")

    ranges = split_ranges(size, args.threads, balanced)
    if args.print_values:
        print(f"THREADS:{args.threads} MAX:{size} LEN:{size // args.threads}")
        for index, (low, high) in enumerate(ranges):
            print(f"RANGE {index}: {low} {high}")

    begin = time.process_time()
    _sort_ranges(values, ranges)
    elapsed = time.process_time() - begin
    print(f"Time to sort data: {elapsed:f} Seconds")
    if args.print_values:
        for index, (low, high) in enumerate(ranges):
            print(f"SUB {index}:" + "".join(f" {value}" for value in values[low : high + 1]))

    try:
        _merge_ranges(values, ranges, balanced)
    except RuntimeError as error:
        print(f"error: {error}")
        return 1

    if args.print_values:
        print(format_array(values))
    return 0