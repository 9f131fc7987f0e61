"""Binary search benchmark: serial, quartered-task and threaded variants."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from parsortbench.randfill import fill_randomly, format_array

_PARTS = 4


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def range_search(
    values: Sequence[int],
    key: int,
    low: int,
    high: int,
    stop: threading.Event,
) -> bool:
    """Search ``values[low:high]`` for ``key`` until found or ``stop`` is set.

    Sets ``stop`` and returns True when this call finds the key.
    """
    high = min(high, len(values))
    while low < high and not stop.is_set():
        mid = (high - low) // 2 + low
        if values[mid] == key:
            stop.set()
            return True
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return False


def _quarter_bounds(size: int, part: int) -> tuple[int, int]:
    quarter = size // _PARTS
    return part * quarter, (part + 1) * quarter


def _search_parts(values: Sequence[int], key: int, parts: int) -> bool:
    stop = threading.Event()
    with ThreadPoolExecutor(max_workers=parts) as pool:
        futures = [
            pool.submit(range_search, values, key, *_quarter_bounds(len(values), part), stop)
            for part in range(parts)
        ]
        for future in futures:
            future.result()
    return stop.is_set()


def quartered_search(values: Sequence[int], key: int) -> bool:
    """Search the four quarters of ``values`` as concurrent tasks."""
    return _search_parts(values, key, _PARTS)


def threaded_search(values: Sequence[int], key: int, workers: int) -> bool:
    """Search with ``workers`` threads, thread ``i`` taking the ``i``-th quarter."""
    if workers < 1:
        raise ValueError(f"workers must be positive: {workers}")
    return _search_parts(values, key, workers)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parsortbench-search", description="Time a binary search over random data."
    )
    parser.add_argument("size", type=int, nargs="?", default=20)
    parser.add_argument("print_values", type=int, nargs="?", default=0)
    parser.add_argument("key", type=int, nargs="?", default=None)
    parser.add_argument("threads", type=int, nargs="?", default=4)
    parser.add_argument(
        "--mode", choices=("serial", "tasks", "threads"), default="threads"
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search benchmark from the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    if args.mode == "threads" and args.threads < 1:
        parser.error("threads must be positive")
    rng = random.Random(args.seed)

    if args.mode == "serial":
        key = 152 if args.key is None else args.key
        values = fill_randomly(args.size, 0, 100, rng)
        begin = time.process_time()
        index = binary_search(values, key)
        elapsed = time.process_time() - begin
        print(f"Time to search for value: {elapsed:f} Seconds")
        if index is None:
            print("Element is not present in array")
        else:
            print(f"Element is present at index {index}")
        return 0

    key = 110 if args.key is None else args.key
    begin = time.process_time()
    values = fill_randomly(args.size, 0, 100, rng)
    elapsed = time.process_time() - begin
    print(f"Time to fill array with random data: {elapsed:f} Seconds")
    if args.print_values:
        print("Given array is: " + format_array(values))
    begin = time.process_time()
    if args.mode == "tasks":
        found = quartered_search(values, key)
    else:
        found = threaded_search(values, key, args.threads)
    elapsed = time.process_time() - begin
    print(f"Time to search value: {elapsed:f} Seconds")
    print(f"{key} found in array" if found else f"{key} not found in array")
    return 0