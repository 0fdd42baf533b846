"""Tests for StructuralDiffer.

Covers:
- Added / removed / modified classification for objects, arrays and scalars
- Type changes and null transitions are single MODIFIED records
- Absence (MISSING) versus explicit null
- Subtrees reported as one unit when added or removed
- Array length changes produce trailing ADDED/REMOVED records
- Key renames produce REMOVED + ADDED pairs in canonical order
- Deep nesting does not hit the recursion limit
"""

from __future__ import annotations

import pytest

from json_structural_diff import MISSING
from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.result import ChangeRecord

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def differ() -> StructuralDiffer:
    """A fresh StructuralDiffer instance for each test."""
    return StructuralDiffer()


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


class TestObjects:
    def test_added_property(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"name": "John"}, {"name": "John", "age": 30}) == [
            ChangeRecord.added(("age",), 30)
        ]

    def test_removed_property(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"name": "John", "age": 30}, {"name": "John"}) == [
            ChangeRecord.removed(("age",), 30)
        ]

    def test_modified_value(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"name": "John", "age": 30}, {"name": "John", "age": 31}) == [
            ChangeRecord.modified(("age",), 30, 31)
        ]

    def test_nested_objects(self, differ: StructuralDiffer) -> None:
        left = {"person": {"name": "John", "address": {"city": "New York"}}}
        right = {"person": {"name": "John", "address": {"city": "Boston"}}}
        assert differ.diff(left, right) == [
            ChangeRecord.modified(("person", "address", "city"), "New York", "Boston")
        ]

    def test_empty_object_gains_key(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"data": {}}, {"data": {"name": "John"}}) == [
            ChangeRecord.added(("data", "name"), "John")
        ]

    def test_added_subtree_is_one_record(self, differ: StructuralDiffer) -> None:
        right = {"a": {"b": {"c": [1, 2, 3]}}}
        assert differ.diff({}, right) == [ChangeRecord.added(("a",), right["a"])]

    def test_removed_subtree_is_one_record(self, differ: StructuralDiffer) -> None:
        left = {"keep": 1, "drop": [{"x": 1}, {"y": 2}]}
        assert differ.diff(left, {"keep": 1}) == [
            ChangeRecord.removed(("drop",), left["drop"])
        ]

    def test_key_order_is_irrelevant(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": 1, "b": 2}, {"b": 2, "a": 1}) == []


class TestKeyRenames:
    def test_single_rename(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"firstName": "John"}, {"givenName": "John"}) == [
            ChangeRecord.removed(("firstName",), "John"),
            ChangeRecord.added(("givenName",), "John"),
        ]

    def test_multiple_renames(self, differ: StructuralDiffer) -> None:
        left = {"firstName": "John", "lastName": "Doe", "age": 30}
        right = {"givenName": "John", "familyName": "Doe", "age": 30}
        assert differ.diff(left, right) == [
            ChangeRecord.added(("familyName",), "Doe"),
            ChangeRecord.removed(("firstName",), "John"),
            ChangeRecord.added(("givenName",), "John"),
            ChangeRecord.removed(("lastName",), "Doe"),
        ]

    def test_nested_renames(self, differ: StructuralDiffer) -> None:
        left = {
            "person": {
                "firstName": "John",
                "contact": {"phoneNumber": "123-456-7890"},
            }
        }
        right = {
            "person": {
                "givenName": "John",
                "contact": {"phone": "123-456-7890"},
            }
        }
        assert differ.diff(left, right) == [
            ChangeRecord.added(("person", "contact", "phone"), "123-456-7890"),
            ChangeRecord.removed(("person", "contact", "phoneNumber"), "123-456-7890"),
            ChangeRecord.removed(("person", "firstName"), "John"),
            ChangeRecord.added(("person", "givenName"), "John"),
        ]

    def test_renames_inside_array_of_objects(self, differ: StructuralDiffer) -> None:
        left = {
            "users": [
                {"firstName": "John", "lastName": "Doe"},
                {"firstName": "Jane", "lastName": "Smith"},
            ]
        }
        right = {
            "users": [
                {"givenName": "John", "familyName": "Doe"},
                {"givenName": "Jane", "familyName": "Smith"},
            ]
        }
        assert differ.diff(left, right) == [
            ChangeRecord.added(("users", 0, "familyName"), "Doe"),
            ChangeRecord.removed(("users", 0, "firstName"), "John"),
            ChangeRecord.added(("users", 0, "givenName"), "John"),
            ChangeRecord.removed(("users", 0, "lastName"), "Doe"),
            ChangeRecord.added(("users", 1, "familyName"), "Smith"),
            ChangeRecord.removed(("users", 1, "firstName"), "Jane"),
            ChangeRecord.added(("users", 1, "givenName"), "Jane"),
            ChangeRecord.removed(("users", 1, "lastName"), "Smith"),
        ]

    def test_renames_mixed_with_modifications(self, differ: StructuralDiffer) -> None:
        left = {
            "person": {
                "firstName": "John",
                "age": 30,
                "contact": {"phoneNumber": "123-456-7890"},
            }
        }
        right = {
            "person": {
                "givenName": "Johnny",
                "age": 31,
                "contact": {"phone": "123-456-7890"},
            }
        }
        assert differ.diff(left, right) == [
            ChangeRecord.modified(("person", "age"), 30, 31),
            ChangeRecord.added(("person", "contact", "phone"), "123-456-7890"),
            ChangeRecord.removed(("person", "contact", "phoneNumber"), "123-456-7890"),
            ChangeRecord.removed(("person", "firstName"), "John"),
            ChangeRecord.added(("person", "givenName"), "Johnny"),
        ]


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArrays:
    def test_modified_element(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"items": [1, 2, 3]}, {"items": [1, 2, 4]}) == [
            ChangeRecord.modified(("items", 2), 3, 4)
        ]

    def test_growing_array(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"items": [1, 2]}, {"items": [1, 2, 3]}) == [
            ChangeRecord.added(("items", 2), 3)
        ]

    def test_shrinking_by_k_yields_k_trailing_removals(
        self, differ: StructuralDiffer
    ) -> None:
        assert differ.diff([1, 2, 3, 4, 5], [1, 2]) == [
            ChangeRecord.removed((2,), 3),
            ChangeRecord.removed((3,), 4),
            ChangeRecord.removed((4,), 5),
        ]

    def test_growing_by_k_yields_k_trailing_additions(
        self, differ: StructuralDiffer
    ) -> None:
        assert differ.diff([], ["a", "b"]) == [
            ChangeRecord.added((0,), "a"),
            ChangeRecord.added((1,), "b"),
        ]

    def test_objects_in_arrays(self, differ: StructuralDiffer) -> None:
        left = {"users": [{"id": 1, "name": "John"}, {"id": 2, "name": "Jane"}]}
        right = {"users": [{"id": 1, "name": "John"}, {"id": 2, "name": "Janet"}]}
        assert differ.diff(left, right) == [
            ChangeRecord.modified(("users", 1, "name"), "Jane", "Janet")
        ]

    def test_indices_sort_as_path_strings(self, differ: StructuralDiffer) -> None:
        # "[10]" < "[2]" in code-unit order
        left = list(range(11))
        right = [*range(11)]
        right[2] = -2
        right[10] = -10
        paths = [change.path for change in differ.diff(left, right)]
        assert paths == [(10,), (2,)]

    def test_no_reordering_detection(self, differ: StructuralDiffer) -> None:
        assert differ.diff([1, 2], [2, 1]) == [
            ChangeRecord.modified((0,), 1, 2),
            ChangeRecord.modified((1,), 2, 1),
        ]


# ---------------------------------------------------------------------------
# Scalars, null, type changes, absence
# ---------------------------------------------------------------------------


class TestScalarsAndTypes:
    def test_null_to_value(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"name": "John", "age": None}, {"name": "John", "age": 30}) == [
            ChangeRecord.modified(("age",), None, 30)
        ]

    def test_value_to_null(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": {"b": 1}}, {"a": None}) == [
            ChangeRecord.modified(("a",), {"b": 1}, None)
        ]

    def test_null_equals_null(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": None}, {"a": None}) == []

    def test_string_versus_number(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"value": "123"}, {"value": 123}) == [
            ChangeRecord.modified(("value",), "123", 123)
        ]

    def test_bool_versus_int(self, differ: StructuralDiffer) -> None:
        assert differ.diff([True], [1]) == [ChangeRecord.modified((0,), True, 1)]

    def test_int_and_float_are_one_kind(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"n": 1}, {"n": 1.0}) == []

    def test_object_versus_array(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": {}}, {"a": []}) == [ChangeRecord.modified(("a",), {}, [])]

    def test_root_scalars(self, differ: StructuralDiffer) -> None:
        assert differ.diff(1, 2) == [ChangeRecord.modified((), 1, 2)]

    def test_nan_is_identical_to_itself(self, differ: StructuralDiffer) -> None:
        nan = float("nan")
        assert differ.diff({"x": nan}, {"x": nan}) == []


class TestMissing:
    def test_missing_left_is_added(self, differ: StructuralDiffer) -> None:
        assert differ.diff(MISSING, {"a": 1}) == [ChangeRecord.added((), {"a": 1})]

    def test_missing_right_is_removed(self, differ: StructuralDiffer) -> None:
        assert differ.diff([1], MISSING) == [ChangeRecord.removed((), [1])]

    def test_missing_is_not_null(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": MISSING}, {"a": None}) == [
            ChangeRecord.added(("a",), None)
        ]

    def test_missing_valued_key_equals_absent_key(self, differ: StructuralDiffer) -> None:
        assert differ.diff({"a": MISSING}, {}) == []

    def test_both_missing(self, differ: StructuralDiffer) -> None:
        assert differ.diff(MISSING, MISSING) == []


# ---------------------------------------------------------------------------
# Robustness
# ---------------------------------------------------------------------------


class TestRobustness:
    def test_identical_input_yields_nothing(self, differ: StructuralDiffer) -> None:
        doc = {"a": [1, {"b": None, "c": [True, "x"]}], "d": 2.5}
        assert differ.diff(doc, doc) == []

    def test_deep_nesting_beyond_recursion_limit(self, differ: StructuralDiffer) -> None:
        left: object = 1
        right: object = 2
        for _ in range(5000):
            left = [left]
            right = [right]
        changes = differ.diff(left, right)
        assert len(changes) == 1
        assert changes[0].path == (0,) * 5000

    def test_unsupported_type_raises(self, differ: StructuralDiffer) -> None:
        with pytest.raises(TypeError):
            differ.diff({"a": {1, 2}}, {"a": {1, 2}})

    def test_stateless_between_calls(self, differ: StructuralDiffer) -> None:
        first = differ.diff({"a": 1}, {"a": 2})
        second = differ.diff({"a": 1}, {"a": 2})
        assert first == second
