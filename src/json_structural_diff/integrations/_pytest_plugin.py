"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_structural_diff import ChangeKind, ChangeRecord, compare


def _describe(change: ChangeRecord) -> str:
    location = change.path_string or "<root>"
    if change.kind == ChangeKind.MODIFIED:
        old = json.dumps(change.old_value, default=repr)
        new = json.dumps(change.new_value, default=repr)
        return f"  modified {location}: {old} -> {new}"
    return f"  {change.kind} {location}: {json.dumps(change.value, default=repr)}"


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh StructuralDiffer per call).

    Usage in tests::

        def test_payload(assert_json_unchanged):
            assert_json_unchanged({"a": [1, 2]}, {"a": [1, 2]})

        def test_drift(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"modified \\.a"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` listing every change when the two values differ.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two JSON values have no structural differences.

        Changes are reported from ``expected`` (old) to ``actual`` (new):
        ``added`` means ``actual`` has something ``expected`` lacks.

        Raises:
            AssertionError: When compare(expected, actual) is not empty.
        """
        changes = compare(expected, actual)
        if changes:
            details = "\n".join(_describe(change) for change in changes)
            raise AssertionError(
                f"JSON documents differ ({len(changes)} change(s)):\n{details}"
            )

    return _assert
