"""
levdiff.formats — Rendering and conversion helpers.

Supported conversions:
    • DistanceMatrix → aligned text table (for debugging trace-backs)
    • Edit script    → one-line-per-edit text
    • Edit script    ↔ plain Python lists/dicts ↔ JSON strings
"""

import json
import operator
from typing import Any, Optional, Sequence

from .core import DistanceMatrix
from .edits import Edit, EditOp


# ═══════════════════════════════════════════════════════════════════
#  TEXT RENDERING
# ═══════════════════════════════════════════════════════════════════

def format_matrix(matrix: DistanceMatrix,
                  source: Optional[Sequence[Any]] = None,
                  target: Optional[Sequence[Any]] = None) -> str:
    """
    Render a distance matrix as a right-aligned text table.

    `source` labels the rows and `target` labels the columns; either can
    be given on its own.  The first row/column is labelled with an empty
    cell for the empty prefix:

            S U N D A Y
          0 1 2 3 4 5 6
        S 1 0 1 2 3 4 5
        A 2 1 1 2 3 3 4
        ...
    """
    cells = [[str(v) for v in row] for row in matrix]
    if target is not None:
        cells = [["", *map(str, target)]] + cells
    if source is not None:
        row_labels = ["", *map(str, source)]
        if target is not None:
            row_labels = [""] + row_labels
        cells = [[label, *row] for label, row in zip(row_labels, cells)]

    width = max((len(c) for row in cells for c in row), default=1)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def format_edits(edits: Sequence[Edit]) -> str:
    """One edit per line, in application order."""
    return "\n".join(repr(edit) for edit in edits)


# ═══════════════════════════════════════════════════════════════════
#  PYTHON OBJECTS ↔ EDIT SCRIPTS
# ═══════════════════════════════════════════════════════════════════

def script_to_python(edits: Sequence[Edit]) -> list[dict[str, Any]]:
    """
    Convert an edit script to plain Python objects.

    Mapping:
        Edit.insert(3, "x")     → {"op": "insert", "position": 3, "element": "x"}
        Edit.delete(2)          → {"op": "delete", "position": 2}
        Edit.substitute(1, "y") → {"op": "substitute", "position": 1, "element": "y"}
    """
    out = []
    for edit in edits:
        entry: dict[str, Any] = {"op": edit.op.name.lower(), "position": edit.position}
        if edit.op != EditOp.DELETE:
            entry["element"] = edit.element
        out.append(entry)
    return out


def _position(pos: Any) -> int:
    if isinstance(pos, bool):
        raise ValueError(f"Invalid edit position: {pos!r}")
    try:
        return operator.index(pos)
    except TypeError:
        raise ValueError(f"Invalid edit position: {pos!r}") from None


def script_from_python(obj: list[dict[str, Any]]) -> list[Edit]:
    """
    Convert plain Python objects back into an edit script.

    Inverse of script_to_python.  Unknown operation names raise
    ValueError, as do positions that are not integers.  Positions are not
    range-checked here (apply_edits does that against the sequence the
    script is applied to).
    """
    edits = []
    for entry in obj:
        name = str(entry["op"]).upper()
        try:
            op = EditOp[name]
        except KeyError:
            raise ValueError(f"Unknown edit operation: {entry['op']!r}") from None
        edits.append(Edit(op, _position(entry["position"]), entry.get("element")))
    return edits


# ═══════════════════════════════════════════════════════════════════
#  JSON STRINGS ↔ EDIT SCRIPTS
# ═══════════════════════════════════════════════════════════════════

def script_to_json(edits: Sequence[Edit], **kwargs) -> str:
    """Serialize an edit script to a JSON string."""
    return json.dumps(script_to_python(edits), **kwargs)


def script_from_json(text: str) -> list[Edit]:
    """Parse a JSON string produced by script_to_json."""
    return script_from_python(json.loads(text))
