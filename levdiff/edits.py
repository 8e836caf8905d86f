"""
levdiff.edits — Edit scripts (generate / apply)
================================================

An edit script is the answer to "HOW do I get from source to target?",
read back out of the distance matrix built by levdiff.core.

    d, matrix = distance("SATURDAY", "SUNDAY")
    edits = generate_edits("SATURDAY", "SUNDAY", matrix)
        → [DELETE at 2, DELETE at 2, SUBSTITUTE at 3: 'N']
    apply_edits("SATURDAY", edits)
        → 'SUNDAY'

POSITIONS
─────────
Positions are 1-based and refer to the sequence AS IT STANDS when the
edit is applied, after every earlier edit in the script.  Scripts are
applied front to back with no renumbering.

Backtracking keeps the invariant that, once the edits for the prefix
pair (a[:i], b[:j]) have been applied, the working sequence reads
b[:j] + a[i:].  Leaving cell (i, j) therefore emits:

    substitute  (i, j) → (i-1, j-1)    SUBSTITUTE at j   with b[j-1]
    delete      (i, j) → (i-1, j)      DELETE     at j+1
    insert      (i, j) → (i, j-1)      INSERT     at j   with b[j-1]

TIE-BREAK
─────────
When several neighbours satisfy the recurrence the choice is fixed:
substitute, then delete, then insert.  For a given (source, target)
the script is unique.
"""

import logging
import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Sequence

from .core import DistanceMatrix
from .errors import (
    DimensionMismatchError,
    InvalidDistanceMatrixError,
    InvalidEditPositionError,
)


logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  EDIT OPERATIONS
# ═══════════════════════════════════════════════════════════════════

class EditOp(Enum):
    """Types of edit operations."""
    INSERT = auto()
    DELETE = auto()
    SUBSTITUTE = auto()


@dataclass(frozen=True, slots=True)
class Edit:
    """
    A single edit, anchored at a 1-based position in the current sequence.

    `element` is the value written by INSERT and SUBSTITUTE; it is None
    for DELETE.
    """
    op: EditOp
    position: int
    element: Optional[Any] = None

    @classmethod
    def insert(cls, position: int, element: Any) -> "Edit":
        return cls(EditOp.INSERT, position, element)

    @classmethod
    def delete(cls, position: int) -> "Edit":
        return cls(EditOp.DELETE, position)

    @classmethod
    def substitute(cls, position: int, element: Any) -> "Edit":
        return cls(EditOp.SUBSTITUTE, position, element)

    def __repr__(self) -> str:
        if self.op == EditOp.DELETE:
            return f"DELETE at {self.position}"
        return f"{self.op.name} at {self.position}: {self.element!r}"


EditScript = list[Edit]


# ═══════════════════════════════════════════════════════════════════
#  GENERATE (trace-back)
# ═══════════════════════════════════════════════════════════════════

def _check_shape(matrix: DistanceMatrix, m: int, n: int) -> None:
    expected = (m + 1, n + 1)
    if len(matrix) != m + 1:
        width = len(matrix[0]) if matrix else 0
        raise DimensionMismatchError(expected, (len(matrix), width))
    for row in matrix:
        if len(row) != n + 1:
            raise DimensionMismatchError(expected, (len(matrix), len(row)))


def generate_edits(source: Sequence[Any], target: Sequence[Any],
                   matrix: DistanceMatrix) -> EditScript:
    """
    Trace back through `matrix` to produce the edit script that turns
    `source` into `target`.

    `matrix` must be the distance matrix computed for exactly this pair
    (levdiff.core.distance or distance_memoized).  A matrix of the wrong
    shape raises DimensionMismatchError; a matrix of the right shape
    whose cells do not follow the recurrence raises
    InvalidDistanceMatrixError.

    The returned edits are in forward-application order.
    """
    m, n = len(source), len(target)
    _check_shape(matrix, m, n)

    edits: EditScript = []
    i, j = m, n
    while i > 0 or j > 0:
        current = matrix[i][j]

        if (i > 0 and j > 0 and source[i - 1] == target[j - 1]
                and current == matrix[i - 1][j - 1]):
            i -= 1
            j -= 1
            continue

        if i > 0 and j > 0 and matrix[i - 1][j - 1] == current - 1:
            edits.append(Edit.substitute(j, target[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and matrix[i - 1][j] == current - 1:
            edits.append(Edit.delete(j + 1))
            i -= 1
        elif j > 0 and matrix[i][j - 1] == current - 1:
            edits.append(Edit.insert(j, target[j - 1]))
            j -= 1
        else:
            raise InvalidDistanceMatrixError(
                f"cell ({i}, {j}) = {current} has no predecessor under the "
                f"Levenshtein recurrence; the matrix was not computed for "
                f"this source and target"
            )

    edits.reverse()
    logger.debug("generated %d edits for %d -> %d elements", len(edits), m, n)
    return edits


# ═══════════════════════════════════════════════════════════════════
#  APPLY
# ═══════════════════════════════════════════════════════════════════

def _rebuild(source: Sequence[Any], items: list[Any]) -> Sequence[Any]:
    """Give `items` the same container type as `source` where possible."""
    if isinstance(source, str):
        return "".join(items)
    if isinstance(source, (bytes, bytearray)):
        return type(source)(items)
    if isinstance(source, tuple):
        return tuple(items)
    return items


def _position(edit: Edit, index: int, length: int) -> int:
    """The edit's position as a plain int; bools and non-integers are rejected."""
    if isinstance(edit.position, bool):
        raise InvalidEditPositionError(edit, index, length)
    try:
        return operator.index(edit.position)
    except TypeError:
        raise InvalidEditPositionError(edit, index, length) from None


def apply_edits(source: Sequence[Any], edits: Sequence[Edit]) -> Sequence[Any]:
    """
    Apply an edit script to `source` and return the result.

    This is the inverse of generate_edits:
        apply_edits(a, generate_edits(a, b, distance(a, b)[1])) == b

    `source` is not modified.  The result is a str for str sources, bytes
    for bytes, a tuple for tuples and a list for everything else.  The
    law above therefore holds when `a` and `b` are the same container
    type; for mixed types (a str source and a list target, say) the
    elements match but the container follows `a`.

    Raises InvalidEditPositionError when an edit points outside the
    sequence as it stands at that step, or its position is not an
    integer.
    """
    result = list(source)

    for index, edit in enumerate(edits):
        length = len(result)
        position = _position(edit, index, length)

        if edit.op == EditOp.INSERT:
            if not 1 <= position <= length + 1:
                raise InvalidEditPositionError(edit, index, length)
            result.insert(position - 1, edit.element)
        elif edit.op == EditOp.DELETE:
            if not 1 <= position <= length:
                raise InvalidEditPositionError(edit, index, length)
            del result[position - 1]
        elif edit.op == EditOp.SUBSTITUTE:
            if not 1 <= position <= length:
                raise InvalidEditPositionError(edit, index, length)
            result[position - 1] = edit.element
        else:
            raise TypeError(f"Unknown edit operation: {edit.op!r}")

    logger.debug("applied %d edits to %d elements", len(edits), len(source))
    return _rebuild(source, result)
