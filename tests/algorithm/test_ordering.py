"""Tests for the canonical change-record order."""

from __future__ import annotations

from json_structural_diff.algorithm.ordering import change_sort_key, sort_changes
from json_structural_diff.result import ChangeRecord


class TestKindPrecedence:
    def test_removed_before_modified_before_added(self) -> None:
        added = ChangeRecord.added(("a",), 1)
        modified = ChangeRecord.modified(("a",), 1, 2)
        removed = ChangeRecord.removed(("a",), 1)
        assert sort_changes([added, modified, removed]) == [removed, modified, added]


class TestPathOrder:
    def test_lexicographic_path_strings(self) -> None:
        b = ChangeRecord.added(("b",), 1)
        a = ChangeRecord.added(("a",), 1)
        assert sort_changes([b, a]) == [a, b]

    def test_path_beats_kind(self) -> None:
        added_a = ChangeRecord.added(("a",), 1)
        removed_b = ChangeRecord.removed(("b",), 1)
        assert sort_changes([removed_b, added_a]) == [added_a, removed_b]

    def test_root_sorts_first(self) -> None:
        root = ChangeRecord.modified((), 1, 2)
        child = ChangeRecord.added((0,), 1)
        assert sort_changes([child, root]) == [root, child]

    def test_uppercase_before_lowercase(self) -> None:
        # Code-unit order, not locale order
        lower = ChangeRecord.added(("apple",), 1)
        upper = ChangeRecord.added(("Zebra",), 1)
        assert sort_changes([lower, upper]) == [upper, lower]

    def test_key_segment_before_index_segment(self) -> None:
        # '.' (0x2E) sorts before '[' (0x5B)
        key = ChangeRecord.added(("a", "b"), 1)
        index = ChangeRecord.added(("a", 0), 1)
        assert sort_changes([index, key]) == [key, index]

    def test_utf16_code_unit_order(self) -> None:
        # U+1F600 is a surrogate pair (0xD83D...) which sorts below U+FF5E
        astral = ChangeRecord.added(("\U0001f600",), 1)
        bmp = ChangeRecord.added(("～",), 1)
        assert sort_changes([bmp, astral]) == [astral, bmp]

    def test_sort_key_shape(self) -> None:
        key = change_sort_key(ChangeRecord.removed(("a",), 1))
        assert key == (".a".encode("utf-16-be"), 0)

    def test_input_is_not_mutated(self) -> None:
        changes = [ChangeRecord.added(("b",), 1), ChangeRecord.added(("a",), 1)]
        snapshot = list(changes)
        sort_changes(changes)
        assert changes == snapshot
