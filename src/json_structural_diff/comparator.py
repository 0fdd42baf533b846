"""DocumentComparator: wires the position mapper and the diff engine together.

The diff engine and the position mapper never call each other.  This is the
caller-side layer that combines them:

- compare_documents() parses two permissive JSON texts (one pass each, value
  and LineMap together), diffs the two values, and annotates each change with
  the lines it touches on either side.
- compare_values() diffs values the caller already parsed (for example with
  ``json.loads``) and annotates them from the texts when given.
- Parsed documents are memoised per text in a LineMapCache (LRU), so an editor
  that re-diffs after every keystroke only re-tokenizes the text that changed.

Annotation is best-effort: a text that cannot be tokenized yields empty line
tuples, never an exception, so a broken text does not block the diff itself.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.cache import LineMapCache
from json_structural_diff.errors import JSONPositionError
from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.positions.line_map import LineMap
from json_structural_diff.result import (
    AnnotatedChange,
    ChangeKind,
    ChangeRecord,
    DiffReport,
)

__all__ = ["DocumentComparator"]

_LOG = logging.getLogger(__name__)

_EMPTY_LINE_MAP = LineMap()


class DocumentComparator:
    """Orchestrator for line-annotated JSON comparison.

    Two separate ``DocumentComparator`` instances never share cache state;
    each instance maintains its own ``LineMapCache``.

    Example::

        cmp = DocumentComparator()
        report = cmp.compare_documents('{"a": 1}', '{\\n  "a": 2\\n}')
        report.annotated[0].old_lines   # (1,)
        report.annotated[0].new_lines   # (2,)
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        max_cache_size: int = 64,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Parser options for both texts.  Defaults to ``ParserConfig()``.
            max_cache_size: Maximum number of parsed texts held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``ParserConfig``.
        """
        self._cache = LineMapCache(config=config, max_size=max_cache_size)
        self._differ = StructuralDiffer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def line_map(self, text: str) -> LineMap:
        """Return the (memoised) LineMap of ``text``; raises on malformed text."""
        return self._cache.line_map(text)

    def compare_documents(self, left_text: str, right_text: str) -> DiffReport:
        """Parse, diff and annotate two permissive JSON texts.

        Raises:
            TypeError: If either text is not a str.
            JSONPositionError: If either text cannot be parsed at all; there
                is no value tree to diff in that case.
        """
        t0 = time.perf_counter()

        left = self._cache.parse(left_text)
        right = self._cache.parse(right_text)

        changes = self._differ.diff(left.value, right.value)
        annotated = [
            self._annotate_one(change, left.line_map, right.line_map)
            for change in changes
        ]

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return DiffReport(
            changes=changes,
            annotated=annotated,
            computation_time_ms=elapsed_ms,
        )

    def compare_values(
        self,
        left: Any,
        right: Any,
        left_text: str | None = None,
        right_text: str | None = None,
    ) -> DiffReport:
        """Diff two already-parsed values; annotate from their texts when given."""
        t0 = time.perf_counter()

        changes = self._differ.diff(left, right)
        annotated = self.annotate(changes, left_text, right_text)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return DiffReport(
            changes=changes,
            annotated=annotated,
            computation_time_ms=elapsed_ms,
        )

    def annotate(
        self,
        changes: Iterable[ChangeRecord],
        left_text: str | None = None,
        right_text: str | None = None,
    ) -> list[AnnotatedChange]:
        """Attach source lines to ``changes``.  Never raises for bad texts."""
        left_map = self._safe_line_map(left_text)
        right_map = self._safe_line_map(right_text)
        return [self._annotate_one(change, left_map, right_map) for change in changes]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _safe_line_map(self, text: str | None) -> LineMap:
        if text is None:
            return _EMPTY_LINE_MAP
        try:
            return self._cache.line_map(text)
        except (JSONPositionError, TypeError) as exc:
            _LOG.debug("no line information available: %s", exc)
            return _EMPTY_LINE_MAP

    @staticmethod
    def _annotate_one(
        change: ChangeRecord, left_map: LineMap, right_map: LineMap
    ) -> AnnotatedChange:
        key = change.path_string
        old_lines: tuple[int, ...] = ()
        new_lines: tuple[int, ...] = ()

        if change.kind in (ChangeKind.REMOVED, ChangeKind.MODIFIED):
            old_lines = left_map.get(key, ())
        if change.kind in (ChangeKind.ADDED, ChangeKind.MODIFIED):
            new_lines = right_map.get(key, ())

        return AnnotatedChange(change=change, old_lines=old_lines, new_lines=new_lines)
