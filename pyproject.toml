[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Classic abstract data types (sets, hash tables, deques, priority queues) with small word, sorting and Huffman tools built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "hash table",
    "deque",
    "priority queue",
    "huffman",
    "radix sort",
    "quicksort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtkit-count = "adtkit.words:main"
adtkit-parity = "adtkit.wordsets:parity_main"
adtkit-unique = "adtkit.wordsets:unique_main"
adtkit-counts = "adtkit.wordsets:counts_main"
adtkit-radix = "adtkit.sorting:radix_main"
adtkit-qsort = "adtkit.sorting:qsort_main"
adtkit-sort = "adtkit.sorting:sort_main"
adtkit-huffman = "adtkit.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.hatch.build.targets.sdist]
include = ["adtkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
