"""
levdiff — Levenshtein distance and edit scripts for any sequence
=================================================================

    distance("SATURDAY", "SUNDAY")              → (3, matrix)
    distance([1, 2, 3], [1, 3])                 → (1, matrix)
    generate_edits("SATURDAY", "SUNDAY", matrix)
        → [DELETE at 2, DELETE at 2, SUBSTITUTE at 3: 'N']
    apply_edits("SATURDAY", edits)              → 'SUNDAY'

Works on str, bytes, lists and tuples: elements only need ==.

The distance can be computed three ways (tabulation, memoization, naive
recursion) that always agree.  The matrix returned by the first two is
what generate_edits backtracks through to recover a minimal edit script,
and apply_edits replays that script to rebuild the target.
"""

from levdiff.core import (
    DistanceMatrix,
    distance,
    distance_tabulation,
    distance_memoized,
    distance_naive,
    normalized_distance,
)
from levdiff.edits import (
    Edit,
    EditOp,
    generate_edits,
    apply_edits,
)
from levdiff.errors import (
    LevenshteinError,
    InvalidDistanceMatrixError,
    DimensionMismatchError,
    InvalidEditPositionError,
)
from levdiff.formats import (
    format_matrix, format_edits,
    script_to_python, script_from_python, script_to_json, script_from_json,
)

__version__ = "0.1.0"
__all__ = [
    "DistanceMatrix",
    "distance", "distance_tabulation", "distance_memoized", "distance_naive",
    "normalized_distance",
    "Edit", "EditOp", "generate_edits", "apply_edits",
    "LevenshteinError", "InvalidDistanceMatrixError",
    "DimensionMismatchError", "InvalidEditPositionError",
    "format_matrix", "format_edits",
    "script_to_python", "script_from_python", "script_to_json", "script_from_json",
]
