"""
Benchmark: levdiff distance strategies, edit generation and edit application.

Compares the three distance strategies on the same inputs:
    1. naive recursion   — exponential, only run on tiny inputs
    2. tabulation        — the default
    3. memoization       — top-down, explicit stack

and times generate_edits / apply_edits on the matrices they produce.

Inputs are slices of a fixed pseudo-random a-z byte string, so every run
measures the same work.
"""

import os
import random
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from levdiff.core import distance, distance_memoized, distance_naive, distance_tabulation
from levdiff.edits import apply_edits, generate_edits


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

SEED = 2000
DATA_LENGTH = 2_000

NAIVE_SIZE = 6
STRATEGY_SIZES = [10, 100, 500]
EDIT_SIZES = [100, 500]
REPEAT = 3


def _make_data():
    rng = random.Random(SEED)
    return bytes(rng.choice(b"abcdefghijklmnopqrstuvwxyz") for _ in range(DATA_LENGTH))


DATA = _make_data()


def _pair(n):
    """Two disjoint length-n slices of DATA."""
    return DATA[0:n], DATA[n:2 * n]


def _best_of(fn, *args):
    """Best wall-clock time of REPEAT calls, in milliseconds."""
    best = float("inf")
    for _ in range(REPEAT):
        t0 = time.perf_counter()
        fn(*args)
        best = min(best, time.perf_counter() - t0)
    return best * 1000


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_distance():
    print("=" * 70)
    print("  §1  DISTANCE STRATEGIES")
    print("=" * 70)
    print()

    # Naive is measured separately because it is far too slow for larger cases.
    s1, s2 = _pair(NAIVE_SIZE)
    dt = _best_of(distance_naive, s1, s2)
    print(f"  naive        n={NAIVE_SIZE:>5}: {dt:>10.2f}ms")

    for n in STRATEGY_SIZES:
        s1, s2 = _pair(n)
        dt_tab = _best_of(distance_tabulation, s1, s2)
        dt_memo = _best_of(distance_memoized, s1, s2)
        print(f"  tabulation   n={n:>5}: {dt_tab:>10.2f}ms")
        print(f"  memoization  n={n:>5}: {dt_memo:>10.2f}ms")

        d_tab, m_tab = distance_tabulation(s1, s2)
        d_memo, m_memo = distance_memoized(s1, s2)
        if d_tab != d_memo or m_tab != m_memo:
            print(f"  ✗ MISMATCH at n={n}: tabulation={d_tab}, memoization={d_memo}")
    print()


def benchmark_generate_edits():
    print("=" * 70)
    print("  §2  GENERATE EDITS")
    print("=" * 70)
    print()

    for n in EDIT_SIZES:
        s1, s2 = _pair(n)
        d, matrix = distance(s1, s2)
        dt = _best_of(generate_edits, s1, s2, matrix)
        print(f"  n={n:>5}: d={d:>5}  {dt:>10.2f}ms")
    print()


def benchmark_apply_edits():
    print("=" * 70)
    print("  §3  APPLY EDITS")
    print("=" * 70)
    print()

    for n in EDIT_SIZES:
        s1, s2 = _pair(n)
        _, matrix = distance(s1, s2)
        edits = generate_edits(s1, s2, matrix)
        dt = _best_of(apply_edits, s1, edits)
        ok = "✓" if apply_edits(s1, edits) == s2 else "✗"
        print(f"  {ok} n={n:>5}: {len(edits):>5} edits  {dt:>10.2f}ms")
    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          LEVENSHTEIN DIFF — BENCHMARK SUITE                         ║")
    print("║          levdiff v0.1.0                                             ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_distance()
    benchmark_generate_edits()
    benchmark_apply_edits()


if __name__ == "__main__":
    main()
