"""
UString random-access benchmark script.

Compares Python's built-in `str` against `UString` on the operations the
fixed-width layout is meant for: indexing, slicing, iteration and appends.

Example usage:

    # Benchmark with a file
    python scripts/bench.py --haystack-path leipzig1M.txt

    # Benchmark with synthetic data
    python scripts/bench.py --haystack-pattern "héllo wörld 😀 " --haystack-length 1000000
"""

import time
from random import randint, seed

import fire

from ustring import UString


def log(name: str, chars_length: int, operator: callable):
    a = time.time_ns()
    operator()
    b = time.time_ns()
    secs = (b - a) / 1e9
    mchars_per_sec = chars_length / (1e6 * secs) if secs else float("inf")
    print(f"{name}: took {secs:.4f} seconds ~ {mchars_per_sec:.3f} M chars/s")


def log_functionality(pythonic_str: str, ustring_str: UString, probes: int):
    offsets = [randint(0, len(pythonic_str) - 1) for _ in range(probes)]
    ranges = [(offset, randint(offset, len(pythonic_str))) for offset in offsets]

    log("str.__getitem__", probes, lambda: [pythonic_str[i] for i in offsets])
    log("UString.__getitem__", probes, lambda: [ustring_str[i] for i in offsets])

    log("str.slice", probes, lambda: [pythonic_str[a:b] for a, b in ranges])
    log("UString.slice", probes, lambda: [ustring_str[a:b] for a, b in ranges])

    length = len(pythonic_str)
    log("str.__iter__", length, lambda: sum(1 for _ in pythonic_str))
    log("UString.__iter__", length, lambda: sum(1 for _ in ustring_str))
    log("UString.drain", length, lambda: sum(1 for _ in ustring_str.copy().drain()))

    def append_all(target):
        for char in pythonic_str:
            target.append(char)

    log("list.append", length, lambda: append_all([]))
    log("UString.append", length, lambda: append_all(UString()))


def bench(
    haystack_path: str = None,
    haystack_pattern: str = None,
    haystack_length: int = None,
    probes: int = 100_000,
    seed_value: int = 42,
):
    """Run random-access benchmarks."""
    if haystack_path:
        with open(haystack_path, "r", encoding="utf-8") as f:
            pythonic_str: str = f.read()
    else:
        haystack_length = int(haystack_length)
        repetitions = haystack_length // len(haystack_pattern)
        pythonic_str: str = haystack_pattern * repetitions

    seed(seed_value)
    ustring_str = UString(pythonic_str)
    print(f"Haystack: {len(pythonic_str):,} scalar values, {len(pythonic_str.encode('utf-8')):,} UTF-8 bytes")
    log_functionality(pythonic_str, ustring_str, int(probes))


if __name__ == "__main__":
    fire.Fire(bench)
