"""
Benchmarks comparing runiter with itertools.groupby.

groupby is the usual one-directional way to run-length encode in Python, so
it sets the baseline for front-only traversal. Back and alternating
traversal have no groupby equivalent and are timed on their own.

    python benchmarks/benchmark.py
"""

import itertools
import random
import time
from collections.abc import Callable
from typing import Any

from runiter import run_length_encode

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


def _long_runs(n: int) -> list[int]:
    rng = random.Random(0)
    out: list[int] = []
    while len(out) < n:
        out.extend([rng.randrange(8)] * rng.randrange(1, 200))
    return out[:n]


def _short_runs(n: int) -> str:
    rng = random.Random(1)
    return "".join(rng.choice("ab") for _ in range(n))


def _groupby_encode(data) -> list[tuple[int, Any]]:
    return [(sum(1 for _ in group), key) for key, group in itertools.groupby(data)]


def _alternate(data) -> int:
    rle = run_length_encode(data)
    forward = True
    runs = 0
    while (rle.pull_front() if forward else rle.pull_back()) is not None:
        runs += 1
        forward = not forward
    return runs


# ---------------------------------------------------------------------------
# Benchmark harness
# ---------------------------------------------------------------------------


def benchmark(
    name: str,
    runiter_fn: Callable[[], Any],
    baseline_fn: Callable[[], Any],
    iterations: int = 3,
):
    """
    Benchmark a runiter function against a baseline.

    Args:
        name: Name of the benchmark
        runiter_fn: Function using runiter
        baseline_fn: Function using the baseline
        iterations: Number of times to run each function
    """
    print(f"\n{'=' * 60}")
    print(f"Benchmark: {name}")
    print(f"{'=' * 60}")

    # Warm-up
    runiter_fn()
    baseline_fn()

    runiter_times = []
    for _ in range(iterations):
        start = time.perf_counter()
        runiter_fn()
        runiter_times.append(time.perf_counter() - start)

    baseline_times = []
    for _ in range(iterations):
        start = time.perf_counter()
        baseline_fn()
        baseline_times.append(time.perf_counter() - start)

    avg_runiter = sum(runiter_times) / len(runiter_times)
    avg_baseline = sum(baseline_times) / len(baseline_times)
    ratio = avg_runiter / avg_baseline

    print(f"runiter (avg):  {avg_runiter:.4f} seconds")
    print(f"baseline (avg): {avg_baseline:.4f} seconds")
    print(f"Ratio:          {ratio:.2f}x")

    return ratio


# ---------------------------------------------------------------------------
# Individual benchmarks
# ---------------------------------------------------------------------------


def bench_long_runs():
    """Benchmark: Front-only encoding of long runs."""
    data = _long_runs(1_000_000)
    return benchmark(
        "Long Runs, Front Only",
        lambda: run_length_encode(data).collect(),
        lambda: _groupby_encode(data),
    )


def bench_short_runs():
    """Benchmark: Front-only encoding of short runs."""
    data = _short_runs(1_000_000)
    return benchmark(
        "Short Runs, Front Only",
        lambda: run_length_encode(data).collect(),
        lambda: _groupby_encode(data),
    )


def bench_back_and_alternating():
    """Benchmark: Back-only and alternating traversal."""
    print(f"\n{'=' * 60}")
    print("Back and Alternating Traversal")
    print(f"{'=' * 60}")

    data = _long_runs(1_000_000)
    for label, fn in (
        ("back only", lambda: run_length_encode(data).collect_back()),
        ("alternating", lambda: _alternate(data)),
    ):
        start = time.perf_counter()
        fn()
        print(f"{label:<12} {time.perf_counter() - start:.4f}s")


def main():
    """Run all benchmarks."""
    print("runiter Benchmarks")
    print("=" * 60)

    ratios = [bench_long_runs(), bench_short_runs()]
    bench_back_and_alternating()

    print(f"\n{'=' * 60}")
    print("Summary")
    print(f"{'=' * 60}")
    print(f"Average ratio vs groupby: {sum(ratios) / len(ratios):.2f}x")


if __name__ == "__main__":
    main()
