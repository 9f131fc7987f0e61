[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parsortbench"
version = "0.1.0"
description = "Serial, task-based and threaded searching and sorting benchmarks on random integer arrays"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "binary search",
    "merge sort",
    "quicksort",
    "threads",
    "parallel",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parsortbench-search = "parsortbench.binary_search:main"
parsortbench-merge = "parsortbench.merge_sort:main"
parsortbench-quick = "parsortbench.quick_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["parsortbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
