"""
levdiff.core — Levenshtein Distance Engine
===========================================

§1  THE RECURRENCE
──────────────────

For a source sequence a₁..aₘ and a target sequence b₁..bₙ, the distance
matrix D has shape (m+1) × (n+1) and D[i][j] is the edit distance
between the prefixes a[:i] and b[:j]:

    D[0][j] = j                              (insert j elements)
    D[i][0] = i                              (delete i elements)
    D[i][j] = D[i-1][j-1]                    if aᵢ == bⱼ
    D[i][j] = 1 + min(
        D[i-1][j],                           # delete aᵢ
        D[i][j-1],                           # insert bⱼ
        D[i-1][j-1],                         # substitute aᵢ → bⱼ
    )                                        otherwise

Final distance = D[m][n].  Elements are only compared with ==, so any
indexable sequence works: str, bytes, lists of tokens, tuples of records.


§2  THREE STRATEGIES
────────────────────

    distance_tabulation   bottom-up, row-major fill.     O(m·n) time/space
    distance_memoized     top-down from (m, n), lazily
                          filled table.                  O(m·n) time/space
    distance_naive        plain recursion, no table.     O(3^(m+n)) time

All three agree on the distance.  Tabulation and memoization also return
the same matrix, cell for cell, so either can feed levdiff.edits.

`distance` is the default entry point and uses tabulation.


§3  RECURSION DEPTH
───────────────────

A recursive top-down evaluation is m+n frames deep, which overflows
CPython's default recursion limit at ~1000 elements.  The memoized
strategy therefore walks an explicit work stack instead of recursing.
The naive strategy keeps plain recursion: its running time is the
binding constraint long before its depth is.
"""

import logging
from typing import Any, Sequence


logger = logging.getLogger(__name__)

DistanceMatrix = list[list[int]]

# Marks a cell of the memo table that has not been computed yet.
UNSET = -1

# Combined input length above which distance_naive logs that it will be slow.
NAIVE_WARN_LENGTH = 16


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE TABLE
# ═══════════════════════════════════════════════════════════════════

def new_distance_table(m: int, n: int) -> DistanceMatrix:
    """
    Allocate an (m+1) × (n+1) table with the base cases filled in.

    Row 0 is 0..n, column 0 is 0..m, every other cell is UNSET.
    """
    table = [list(range(n + 1))]
    for i in range(1, m + 1):
        row = [UNSET] * (n + 1)
        row[0] = i
        table.append(row)
    return table


def _cell(table: DistanceMatrix, source: Sequence[Any], target: Sequence[Any],
          i: int, j: int) -> int:
    """Value of D[i][j] from its three already-computed neighbours."""
    if source[i - 1] == target[j - 1]:
        return table[i - 1][j - 1]
    return 1 + min(table[i - 1][j], table[i][j - 1], table[i - 1][j - 1])


# ═══════════════════════════════════════════════════════════════════
#  STRATEGIES
# ═══════════════════════════════════════════════════════════════════

def distance_tabulation(source: Sequence[Any],
                        target: Sequence[Any]) -> tuple[int, DistanceMatrix]:
    """
    Levenshtein distance and full distance matrix, built bottom-up.

    Cells are filled row by row so that the up, left and up-left
    neighbours of every cell are known before the cell itself.

        distance_tabulation("SATURDAY", "SUNDAY")[0]  → 3
    """
    m, n = len(source), len(target)
    table = new_distance_table(m, n)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            table[i][j] = _cell(table, source, target, i, j)

    logger.debug("tabulated %dx%d distance matrix", m + 1, n + 1)
    return table[m][n], table


def distance_memoized(source: Sequence[Any],
                      target: Sequence[Any]) -> tuple[int, DistanceMatrix]:
    """
    Levenshtein distance and full distance matrix, computed top-down.

    Starts at (m, n) and only descends into cells the recurrence needs,
    caching each one in the table the first time it is computed.  Uses
    an explicit stack, so input length is not bounded by the recursion
    limit.

    A matching pair of elements only depends on its diagonal neighbour,
    so the walk may leave cells untouched.  Those are completed from the
    same recurrence before returning, which makes the matrix identical
    to the one distance_tabulation builds.
    """
    m, n = len(source), len(target)
    table = new_distance_table(m, n)

    stack = [(m, n)]
    while stack:
        i, j = stack[-1]
        if table[i][j] != UNSET:
            stack.pop()
            continue

        if source[i - 1] == target[j - 1]:
            needed = ((i - 1, j - 1),)
        else:
            needed = ((i - 1, j), (i, j - 1), (i - 1, j - 1))
        pending = [(a, b) for a, b in needed if table[a][b] == UNSET]
        if pending:
            stack.extend(pending)
            continue

        stack.pop()
        table[i][j] = _cell(table, source, target, i, j)

    # Cells off the top-down path; row-major order keeps their
    # neighbours available.
    for i in range(1, m + 1):
        row = table[i]
        for j in range(1, n + 1):
            if row[j] == UNSET:
                row[j] = _cell(table, source, target, i, j)

    logger.debug("memoized %dx%d distance matrix", m + 1, n + 1)
    return table[m][n], table


def distance_naive(source: Sequence[Any], target: Sequence[Any]) -> int:
    """
    Levenshtein distance by plain recursion, with no memoization.

    Kept for comparison with the other two strategies.  The running time
    is exponential in len(source) + len(target): do not call this on
    anything longer than a dozen or so elements.  No matrix is produced.
    """
    if len(source) + len(target) > NAIVE_WARN_LENGTH:
        logger.debug("distance_naive called on %d + %d elements; "
                     "this takes exponential time", len(source), len(target))

    def _naive(i: int, j: int) -> int:
        if i == 0 or j == 0:
            return max(i, j)
        if source[i - 1] == target[j - 1]:
            return _naive(i - 1, j - 1)
        return 1 + min(
            _naive(i - 1, j),       # delete
            _naive(i, j - 1),       # insert
            _naive(i - 1, j - 1),   # substitute
        )

    return _naive(len(source), len(target))


def distance(source: Sequence[Any],
             target: Sequence[Any]) -> tuple[int, DistanceMatrix]:
    """
    Levenshtein distance between `source` and `target`.

    This is the default entry point.  Returns (distance, matrix) where
    the matrix is the input levdiff.edits.generate_edits expects.

        distance("FLAW", "LAWN")[0]                → 2
        distance([0, 1, 2], [1, 2, 3, 4])[0]       → 3
    """
    return distance_tabulation(source, target)


def normalized_distance(source: Sequence[Any], target: Sequence[Any]) -> float:
    """
    Distance scaled to [0, 1] by the length of the longer sequence.

    0.0 = identical, 1.0 = nothing in common at any aligned position.
    Two empty sequences are identical.
    """
    longest = max(len(source), len(target))
    if longest == 0:
        return 0.0
    d, _ = distance(source, target)
    return d / longest
