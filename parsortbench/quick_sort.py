"""Quick sort benchmark: serial, task-spawning and depth-limited threaded variants."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Callable, MutableSequence, Sequence

from parsortbench.randfill import fill_randomly, format_array

_Partition = Callable[[MutableSequence[int], int, int], int]


def _check_range(values: Sequence[int], low: int, high: int) -> None:
    if not 0 <= low <= high < len(values):
        raise IndexError(f"range [{low}, {high}] outside a sequence of {len(values)}")


def lomuto_partition(
    values: MutableSequence[int], low: int, high: int, strict: bool = True
) -> int:
    """Partition ``values[low..high]`` around its last element and return the pivot's index.

    With ``strict`` only elements smaller than the pivot move to its left;
    otherwise elements equal to it move left as well.
    """
    _check_range(values, low, high)
    pivot = values[high]
    boundary = low
    for index in range(low, high):
        current = values[index]
        if current < pivot or (not strict and current == pivot):
            values[boundary], values[index] = values[index], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def hoare_partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low..high]`` around its first element and return the pivot's index.

    Elements not greater than the pivot end up to its left, greater ones to its right.
    """
    _check_range(values, low, high)
    pivot = values[low]
    left, right = low, high + 1
    while True:
        left += 1
        while left <= high and values[left] <= pivot:
            left += 1
        right -= 1
        while values[right] > pivot:
            right -= 1
        if left >= right:
            break
        values[left], values[right] = values[right], values[left]
    values[low], values[right] = values[right], values[low]
    return right


def _sort_range(
    values: MutableSequence[int], low: int, high: int, partition: _Partition
) -> None:
    pending = [(low, high)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(values, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))


def _strict_partition(values: MutableSequence[int], low: int, high: int) -> int:
    return lomuto_partition(values, low, high, strict=True)


def _loose_partition(values: MutableSequence[int], low: int, high: int) -> int:
    return lomuto_partition(values, low, high, strict=False)


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with a quick sort on the last element as pivot."""
    _sort_range(values, 0, len(values) - 1, _strict_partition)


def _task_worker(
    values: MutableSequence[int], low: int, high: int, slots: threading.Semaphore
) -> None:
    pending = [(low, high)]
    spawned: list[threading.Thread] = []
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _loose_partition(values, low, high)
        if pivot - 1 > low and slots.acquire(blocking=False):
            task = threading.Thread(
                target=_spawned_task, args=(values, low, pivot - 1, slots)
            )
            task.start()
            spawned.append(task)
        else:
            pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    for task in spawned:
        task.join()


def _spawned_task(
    values: MutableSequence[int], low: int, high: int, slots: threading.Semaphore
) -> None:
    try:
        _task_worker(values, low, high, slots)
    finally:
        slots.release()


def task_quick_sort(values: MutableSequence[int], workers: int = 4) -> None:
    """Sort ``values`` in place, handing left partitions to tasks on up to ``workers`` threads.

    The right partition is always sorted by the thread that split the range.
    """
    if workers < 1:
        raise ValueError(f"workers must be positive: {workers}")
    slots = threading.Semaphore(workers - 1)
    _task_worker(values, 0, len(values) - 1, slots)


def _threaded_range(
    values: MutableSequence[int], low: int, high: int, depth: int
) -> None:
    if low >= high:
        return
    if depth <= 0:
        _sort_range(values, low, high, hoare_partition)
        return
    pivot = hoare_partition(values, low, high)
    halves = [
        threading.Thread(target=_threaded_range, args=(values, low, pivot - 1, depth - 1)),
        threading.Thread(target=_threaded_range, args=(values, pivot + 1, high, depth - 1)),
    ]
    for half in halves:
        half.start()
    for half in halves:
        half.join()


def threaded_quick_sort(values: MutableSequence[int], depth: int = 2) -> None:
    """Sort ``values`` in place, giving each half its own thread for ``depth`` levels of splitting."""
    _threaded_range(values, 0, len(values) - 1, depth)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parsortbench-quick", description="Time a quick sort over random data."
    )
    parser.add_argument("size", type=int, nargs="?", default=None)
    parser.add_argument("print_values", type=int, nargs="?", default=0)
    parser.add_argument(
        "parallelism",
        type=int,
        nargs="?",
        default=None,
        help="worker threads for tasks mode, recursion depth for threads mode",
    )
    parser.add_argument(
        "--mode", choices=("serial", "tasks", "threads"), default="threads"
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the quick sort benchmark from the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    if args.mode in ("serial", "tasks"):
        size = 10 if args.size is None else args.size
        if size < 0:
            parser.error("size must not be negative")
        if args.mode == "serial":
            values = fill_randomly(size, 0, 100, rng)
            begin = time.process_time()
            quick_sort(values)
            elapsed = time.process_time() - begin
            print(f"Time to sort data: {elapsed:f} Seconds")
            return 0
        workers = 4 if args.parallelism is None else args.parallelism
        if workers < 1:
            parser.error("threads must be positive")
        values = fill_randomly(size, 0, 100, rng)
        if args.print_values:
            print(format_array(values))
        begin = time.process_time()
        task_quick_sort(values, workers)
        elapsed = time.process_time() - begin
        print(f"Time to sort data: {elapsed:f} Seconds")
        if args.print_values:
            print("Sorted array: ")
            print(format_array(values))
        return 0

    size = 20 if args.size is None else args.size
    if size < 0:
        parser.error("size must not be negative")
    depth = 2 if args.parallelism is None else args.parallelism

    begin = time.process_time()
    values = fill_randomly(size, 0, 100, rng)
    elapsed = time.process_time() - begin
    print(f"Time to fill array with random data: {elapsed:f} Seconds")
    if args.print_values:
        sys.stdout.write("\nUnsorted array:\t" + "".join(f" {value} " for value in values))
    print()

    begin = time.process_time()
    threaded_quick_sort(values, depth)
    elapsed = time.process_time() - begin
    print(f"Time to sort data: {elapsed:f} Seconds")
    if args.print_values:
        print("\n\nSorted array:\t" + "".join(f" {value} " for value in values))
    return 0