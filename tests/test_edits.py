"""
Test suite for levdiff.edits — generating and applying edit scripts.

    §1  Known scripts
    §2  Generate / apply round-trip
    §3  Generator errors
    §4  Applier semantics and errors
"""

import itertools
import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from levdiff.core import distance, distance_memoized
from levdiff.edits import Edit, EditOp, apply_edits, generate_edits
from levdiff.errors import (
    DimensionMismatchError,
    InvalidDistanceMatrixError,
    InvalidEditPositionError,
    LevenshteinError,
)


def _script(source, target):
    _, matrix = distance(source, target)
    return generate_edits(source, target, matrix)


# ═══════════════════════════════════════════════════════════════════
#  §1  KNOWN SCRIPTS
# ═══════════════════════════════════════════════════════════════════

class TestKnownScripts:

    def test_saturday_sunday(self):
        edits = _script("SATURDAY", "SUNDAY")
        assert edits == [
            Edit.delete(2),
            Edit.delete(2),
            Edit.substitute(3, "N"),
        ]
        assert apply_edits("SATURDAY", edits) == "SUNDAY"

    def test_empty_source_is_all_inserts(self):
        edits = _script("", "ABC")
        assert edits == [Edit.insert(1, "A"), Edit.insert(2, "B"), Edit.insert(3, "C")]
        assert apply_edits("", edits) == "ABC"

    def test_empty_target_is_all_deletes(self):
        edits = _script("ABC", "")
        assert edits == [Edit.delete(1)] * 3
        assert all(e.op == EditOp.DELETE for e in edits)
        assert apply_edits("ABC", edits) == ""

    def test_identical_is_empty(self):
        assert _script("SATURDAY", "SATURDAY") == []
        assert _script([], []) == []

    def test_insert_in_the_middle(self):
        assert _script("ac", "abc") == [Edit.insert(2, "b")]

    def test_delete_in_the_middle(self):
        assert _script("abc", "ac") == [Edit.delete(2)]

    def test_substitution_preferred_over_delete_insert(self):
        """"ab" → "ba" is two substitutions, not a delete plus an insert."""
        assert _script("ab", "ba") == [Edit.substitute(1, "b"), Edit.substitute(2, "a")]

    def test_script_length_equals_distance(self):
        for source, target in [("kitten", "sitting"), ("intention", "execution"),
                               ("FLOWER", "FOLLOWER"), ("LAWN", "FFLAWANN")]:
            d, matrix = distance(source, target)
            assert len(generate_edits(source, target, matrix)) == d

    def test_deterministic(self):
        assert _script("intention", "execution") == _script("intention", "execution")

    def test_memoized_matrix_gives_same_script(self):
        _, matrix = distance_memoized("kitten", "sitting")
        assert generate_edits("kitten", "sitting", matrix) == _script("kitten", "sitting")


# ═══════════════════════════════════════════════════════════════════
#  §2  ROUND-TRIP
# ═══════════════════════════════════════════════════════════════════

class TestRoundTrip:
    """apply_edits(a, generate_edits(a, b, distance(a, b)[1])) == b"""

    def _assert_round_trip(self, a, b):
        result = apply_edits(a, _script(a, b))
        assert result == b, f"Round-trip failed: {a!r} → {result!r}, expected {b!r}"

    @pytest.mark.parametrize("a,b", [
        ("SATURDAY", "SUNDAY"),
        ("SUNDAY", "SATURDAY"),
        ("kitten", "sitting"),
        ("FLOWER", "FOLLOWER"),
        ("intention", "execution"),
        ("", ""),
        ("abc", "xyz"),
        ("aaaa", "a"),
        ("a", "aaaa"),
    ])
    def test_strings(self, a, b):
        self._assert_round_trip(a, b)

    def test_exhaustive_small_strings(self):
        strings = [""] + ["".join(c) for n in range(1, 4)
                          for c in itertools.product("ab", repeat=n)]
        for a in strings:
            for b in strings:
                self._assert_round_trip(a, b)

    def test_random_pairs(self):
        rng = random.Random(42)
        for _ in range(200):
            a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 10)))
            b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 10)))
            self._assert_round_trip(a, b)

    def test_lists(self):
        self._assert_round_trip([1, 2, 3, 4], [0, 2, 4, 5, 6])

    def test_tuples(self):
        self._assert_round_trip((("x", 1), ("y", 2)), (("y", 2), ("z", 3)))

    def test_bytes(self):
        self._assert_round_trip(b"FLOWER", b"FOLLOWER")

    def test_tokens(self):
        self._assert_round_trip("the quick brown fox".split(),
                                "the slow brown dog jumps".split())

    def test_mixed_containers_follow_source(self):
        """A str source rebuilds a str even when the target was a list."""
        target = ["a", "b", "c"]
        _, matrix = distance("ab", target)
        result = apply_edits("ab", generate_edits("ab", target, matrix))
        assert result == "abc"
        assert list(result) == target


# ═══════════════════════════════════════════════════════════════════
#  §3  GENERATOR ERRORS
# ═══════════════════════════════════════════════════════════════════

class TestGenerateErrors:

    def test_matrix_for_other_pair(self):
        _, matrix = distance("SATURDAY", "SUN")
        with pytest.raises(DimensionMismatchError) as excinfo:
            generate_edits("SATURDAY", "SUNDAY", matrix)
        assert excinfo.value.expected == (9, 7)
        assert excinfo.value.actual == (9, 4)

    def test_too_many_rows(self):
        _, matrix = distance("SATURDAY", "SUNDAY")
        with pytest.raises(DimensionMismatchError):
            generate_edits("SATURDA", "SUNDAY", matrix)

    def test_empty_matrix(self):
        with pytest.raises(DimensionMismatchError) as excinfo:
            generate_edits("", "", [])
        assert excinfo.value.actual == (0, 0)

    def test_ragged_matrix(self):
        matrix = [[0, 1], [1]]
        with pytest.raises(DimensionMismatchError):
            generate_edits("a", "b", matrix)

    def test_dimension_mismatch_hierarchy(self):
        _, matrix = distance("ab", "c")
        with pytest.raises(InvalidDistanceMatrixError):
            generate_edits("abc", "c", matrix)
        with pytest.raises(LevenshteinError):
            generate_edits("abc", "c", matrix)
        with pytest.raises(ValueError):
            generate_edits("abc", "c", matrix)

    def test_inconsistent_matrix(self):
        """Right shape, but no cell satisfies the recurrence."""
        matrix = [[0, 1], [1, 5]]
        with pytest.raises(InvalidDistanceMatrixError) as excinfo:
            generate_edits("a", "b", matrix)
        assert not isinstance(excinfo.value, DimensionMismatchError)


# ═══════════════════════════════════════════════════════════════════
#  §4  APPLIER
# ═══════════════════════════════════════════════════════════════════

class TestApply:

    def test_insert_positions(self):
        assert apply_edits("bc", [Edit.insert(1, "a")]) == "abc"
        assert apply_edits("ac", [Edit.insert(2, "b")]) == "abc"
        assert apply_edits("ab", [Edit.insert(3, "c")]) == "abc"

    def test_positions_follow_earlier_edits(self):
        edits = [Edit.insert(1, "x"), Edit.delete(2), Edit.substitute(2, "y")]
        # "abc" → "xabc" → "xbc" → "xyc"
        assert apply_edits("abc", edits) == "xyc"

    def test_source_not_mutated(self):
        source = [1, 2, 3]
        result = apply_edits(source, [Edit.delete(1), Edit.insert(3, 4)])
        assert result == [2, 3, 4]
        assert source == [1, 2, 3]

    def test_result_type_follows_source(self):
        assert apply_edits("ab", []) == "ab"
        assert apply_edits(b"ab", [Edit.substitute(1, ord("x"))]) == b"xb"
        assert apply_edits((1, 2), [Edit.delete(2)]) == (1,)
        assert apply_edits(range(3), [Edit.delete(1)]) == [1, 2]

    @pytest.mark.parametrize("source,edit", [
        ("abc", Edit.delete(0)),
        ("abc", Edit.delete(4)),
        ("abc", Edit.substitute(0, "x")),
        ("abc", Edit.substitute(4, "x")),
        ("abc", Edit.insert(0, "x")),
        ("abc", Edit.insert(5, "x")),
        ("", Edit.delete(1)),
        ("abc", Edit.insert(1.5, "x")),
        ("abc", Edit.delete(2.0)),
        ("abc", Edit.substitute("2", "x")),
        ("abc", Edit.delete(None)),
        ("abc", Edit.delete(True)),
        ("abc", Edit.insert(False, "x")),
    ])
    def test_out_of_range(self, source, edit):
        with pytest.raises(InvalidEditPositionError) as excinfo:
            apply_edits(source, [edit])
        assert excinfo.value.edit == edit
        assert excinfo.value.index == 0
        assert excinfo.value.length == len(source)

    def test_out_of_range_after_shrinking(self):
        with pytest.raises(InvalidEditPositionError) as excinfo:
            apply_edits("abc", [Edit.delete(3), Edit.delete(3)])
        assert excinfo.value.index == 1
        assert excinfo.value.length == 2

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            apply_edits("abc", [Edit.delete(10)])
        with pytest.raises(LevenshteinError):
            apply_edits("abc", [Edit.delete(10)])

    def test_unknown_operation(self):
        with pytest.raises(TypeError):
            apply_edits("abc", [Edit("bogus", 1)])


class TestEditRepr:

    def test_repr(self):
        assert repr(Edit.delete(2)) == "DELETE at 2"
        assert repr(Edit.insert(1, "a")) == "INSERT at 1: 'a'"
        assert repr(Edit.substitute(3, "N")) == "SUBSTITUTE at 3: 'N'"

    def test_frozen(self):
        edit = Edit.delete(1)
        with pytest.raises(AttributeError):
            edit.position = 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
