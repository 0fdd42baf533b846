"""Public API functions for json-structural-diff.

Each call creates fresh differ/parser state to guarantee zero global state
mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.comparator import DocumentComparator
from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.result import ChangeRecord, DiffReport

__all__ = ["compare", "compare_documents", "is_identical"]


def compare(left: Any, right: Any) -> list[ChangeRecord]:
    """Compare two JSON values and return their ordered structural differences.

    Args:
        left:  Old JSON value (dict, list, str, int, float, bool, None, MISSING).
        right: New JSON value.

    Returns:
        ChangeRecords sorted by canonical path string (UTF-16 code-unit order),
        then by kind with ``removed < modified < added``.  Empty when the two
        values are structurally identical.

    Example::

        compare({"name": "John"}, {"name": "John", "age": 30})
        # [ChangeRecord(path=('age',), kind=ChangeKind.ADDED, value=30)]
    """
    return StructuralDiffer().diff(left, right)


def is_identical(left: Any, right: Any) -> bool:
    """Return True if ``compare(left, right)`` reports no change."""
    return not compare(left, right)


def compare_documents(
    left_text: str,
    right_text: str,
    config: ParserConfig | None = None,
) -> DiffReport:
    """Parse two permissive JSON texts, diff them and annotate source lines.

    Args:
        left_text:  Old document text (comments and bare keys allowed).
        right_text: New document text.
        config:     Parser options.  Defaults to ``ParserConfig()`` when None.

    Returns:
        A ``DiffReport`` whose ``annotated`` entries carry the old/new lines
        of every change.

    Raises:
        JSONPositionError: If either text cannot be parsed.
    """
    return DocumentComparator(config=config).compare_documents(left_text, right_text)
