"""StructuralDiffer: path-by-path comparison of two JSON value trees.

Walks both trees simultaneously and classifies every differing path as
ADDED, REMOVED or MODIFIED:

- Identical primitives (same kind, equal value) produce nothing.
- ``MISSING`` on exactly one side reports the whole present subtree as one
  ADDED/REMOVED record; the subtree is not entered.
- ``null`` against a non-null value, or two different kinds, is one MODIFIED
  record; the subtree is not entered.
- Arrays are aligned index by index.  Surplus right elements are ADDED,
  surplus left elements are REMOVED.
- Objects are aligned by key over the union of both key sets.
- Differing scalars are MODIFIED.

The walk uses an explicit work stack, so nesting depth is bounded by memory
rather than by the interpreter's recursion limit.  The collected records are
sorted once at the end by ``(path string, removed < modified < added)``.
That key is a total order over one result (a path is classified at most once),
so a single final sort yields the same list as re-sorting at every level.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.algorithm.ordering import sort_changes
from json_structural_diff.paths import Path
from json_structural_diff.result import ChangeRecord
from json_structural_diff.tree.kinds import MISSING, ValueKind, kind_of

__all__ = ["StructuralDiffer"]


class StructuralDiffer:
    """Computes the ordered list of structural differences between two values.

    Holds no state between calls; one instance may be reused freely.

    Example::

        differ = StructuralDiffer()
        differ.diff({"name": "John"}, {"name": "John", "age": 30})
        # [ChangeRecord(path=('age',), kind=<ChangeKind.ADDED: 'added'>, value=30, ...)]
    """

    def diff(self, left: Any, right: Any) -> list[ChangeRecord]:
        """Compare two JSON values.

        Args:
            left:  Old JSON value (dict, list, str, int, float, bool, None, MISSING).
            right: New JSON value.

        Returns:
            Change records sorted by path string, then kind precedence.

        Raises:
            TypeError: If either tree contains a non-JSON Python object.
        """
        changes: list[ChangeRecord] = []
        stack: list[tuple[Path, Any, Any]] = [((), left, right)]

        while stack:
            path, a, b = stack.pop()
            self._visit(path, a, b, changes, stack)

        return sort_changes(changes)

    def _visit(
        self,
        path: Path,
        a: Any,
        b: Any,
        changes: list[ChangeRecord],
        stack: list[tuple[Path, Any, Any]],
    ) -> None:
        """Classify one aligned pair of nodes, pushing child pairs onto ``stack``."""
        kind_a = kind_of(a)
        kind_b = kind_of(b)

        # Absence: report the present side as a single unit
        if kind_a == ValueKind.MISSING or kind_b == ValueKind.MISSING:
            if kind_a == kind_b:
                return
            if kind_a == ValueKind.MISSING:
                changes.append(ChangeRecord.added(path, b))
            else:
                changes.append(ChangeRecord.removed(path, a))
            return

        if kind_a != kind_b:
            changes.append(ChangeRecord.modified(path, a, b))
            return

        if kind_a == ValueKind.ARRAY:
            for idx in range(max(len(a), len(b))):
                stack.append(
                    (
                        (*path, idx),
                        a[idx] if idx < len(a) else MISSING,
                        b[idx] if idx < len(b) else MISSING,
                    )
                )
            return

        if kind_a == ValueKind.OBJECT:
            # dict.fromkeys keeps each key once, left keys first
            for key in dict.fromkeys([*a, *b]):
                stack.append(((*path, key), a.get(key, MISSING), b.get(key, MISSING)))
            return

        # Scalars of the same kind (null == null included); identity covers NaN
        if a is b or a == b:
            return
        changes.append(ChangeRecord.modified(path, a, b))
