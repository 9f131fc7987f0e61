"""Serial, task-based and threaded binary search, merge sort and quicksort benchmarks."""

__version__ = "0.1.0"

__all__ = ["binary_search", "merge_sort", "quick_sort", "randfill"]