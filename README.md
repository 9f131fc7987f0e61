# parsortbench

Small benchmarks that time searching and sorting on arrays of random
integers, each in three flavours: a plain serial version, a task-based
version and a version that splits the work across threads.

Arrays are filled with uniformly distributed integers between 0 and 100,
drawn by bucketed rejection sampling so that no value is favoured.
Times are measured as process CPU time (`time.process_time`).

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Three commands are installed. Each takes optional positional arguments,
a `--mode` option (`serial`, `tasks` or `threads`, default `threads`)
and a `--seed` option that makes the random data reproducible. A
`print_values` argument other than `0` prints the data as well.

### parsortbench-search

```
parsortbench-search [size] [print_values] [key] [threads] [--mode MODE] [--seed N]
```

Fills an array of `size` values (default 20) and looks for `key` with
binary search, then reports whether it was found.

- `serial`: one binary search over the whole array (default key 152);
  reports the index where the key was found, or that it is not present.
  The array is not printed in this mode.
- `tasks`: the array is split into four quarters searched concurrently
  (default key 110).
- `threads`: `threads` workers (default 4), worker `i` searching the
  `i`-th quarter of the array (default key 110). Workers past the fourth
  get empty ranges.

The array is searched as generated, without sorting it first, so a key
that is present can be reported as missing. Any remainder after
dividing the array into quarters is not searched in `tasks` and
`threads` mode.

### parsortbench-merge

```
parsortbench-merge [size] [print_values] [threads] [balanced] [--mode MODE] [--seed N]
```

- `serial`: top-down merge sort (default size 10); prints only the time.
- `tasks`: merge sort whose halves run as concurrent threads down to a
  depth giving about one task per processor (default size 10).
- `threads`: the array (default size 20) is cut into `threads` ranges
  (default 2), each sorted by its own thread, and the ranges are then
  merged. With `balanced` set (default 1) the last range also takes the
  remainder; with `balanced` 0 every range has `size // threads`
  elements and the final merge assumes four equal ranges. If the merged
  result is not sorted, the command prints an error and exits with
  status 1.

### parsortbench-quick

```
parsortbench-quick [size] [print_values] [parallelism] [--mode MODE] [--seed N]
```

- `serial`: quicksort with Lomuto partitioning on the last element
  (default size 10); prints only the time.
- `tasks`: Lomuto quicksort where left partitions are handed to tasks on
  up to `parallelism` threads (default 4, default size 10).
- `threads`: Hoare partitioning on the first element, giving each half
  its own thread for `parallelism` levels of splitting (default 2,
  default size 20).

## Library use

The building blocks can be used directly from Python.

```python
import random

from parsortbench.randfill import fill_randomly, format_array
from parsortbench.binary_search import binary_search
from parsortbench.merge_sort import merge_sort

rng = random.Random(42)
data = fill_randomly(20, 0, 100, rng)
print(format_array(data))

merge_sort(data)
print(binary_search(data, 50))  # an index, or None
```

All sorting functions sort the given list in place.

| Module | Functions |
| --- | --- |
| `parsortbench.randfill` | `rand_interval`, `fill_randomly`, `format_array` |
| `parsortbench.binary_search` | `binary_search`, `range_search`, `quartered_search`, `threaded_search` |
| `parsortbench.merge_sort` | `merge`, `merge_sort`, `task_merge_sort`, `split_ranges`, `threaded_merge_sort`, `is_sorted` |
| `parsortbench.quick_sort` | `lomuto_partition`, `quick_sort`, `task_quick_sort`, `hoare_partition`, `threaded_quick_sort` |

## Limitations

The threaded variants run on Python threads, which share one
interpreter, so they show how the work is divided rather than giving a
speed-up. The timings are meant for comparing the strategies against
each other, not as absolute performance figures. Results are only
printed; nothing is saved.