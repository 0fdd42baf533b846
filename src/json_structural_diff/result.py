"""Result types for structural diff output.

ChangeRecord is returned by compare(); AnnotatedChange and DiffReport are
returned by DocumentComparator, which adds source line numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_structural_diff.paths import Path, path_to_string
from json_structural_diff.tree.kinds import MISSING

__all__ = ["AnnotatedChange", "ChangeKind", "ChangeRecord", "DiffReport"]


class ChangeKind(StrEnum):
    """Classification of one difference between two JSON trees.

    - ADDED    -> "added"    : value present only in the right tree
    - REMOVED  -> "removed"  : value present only in the left tree
    - MODIFIED -> "modified" : value present in both, but different
    """

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """One reported difference at a specific path.

    Attributes:
        path: Tuple of keys and indices addressing the changed node.
        kind: ADDED, REMOVED or MODIFIED.
        value: The added or removed value.  ``MISSING`` for MODIFIED records.
        old_value: Left-hand value of a MODIFIED record, else ``MISSING``.
        new_value: Right-hand value of a MODIFIED record, else ``MISSING``.
    """

    path: Path
    kind: ChangeKind
    value: Any = MISSING
    old_value: Any = MISSING
    new_value: Any = MISSING

    @classmethod
    def added(cls, path: Path, value: Any) -> ChangeRecord:
        return cls(path=path, kind=ChangeKind.ADDED, value=value)

    @classmethod
    def removed(cls, path: Path, value: Any) -> ChangeRecord:
        return cls(path=path, kind=ChangeKind.REMOVED, value=value)

    @classmethod
    def modified(cls, path: Path, old_value: Any, new_value: Any) -> ChangeRecord:
        return cls(
            path=path,
            kind=ChangeKind.MODIFIED,
            old_value=old_value,
            new_value=new_value,
        )

    @property
    def path_string(self) -> str:
        """Canonical string form of ``path`` (see ``path_to_string``)."""
        return path_to_string(self.path)

    def inverted(self) -> ChangeRecord:
        """Return the record that describes the same change in the other direction."""
        if self.kind == ChangeKind.ADDED:
            return ChangeRecord.removed(self.path, self.value)
        if self.kind == ChangeKind.REMOVED:
            return ChangeRecord.added(self.path, self.value)
        return ChangeRecord.modified(self.path, self.new_value, self.old_value)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict.

        Keys follow the wire shape consumed by editor front-ends: ``path``
        (list), ``type``, and either ``value`` or ``oldValue``/``newValue``.
        """
        data: dict[str, Any] = {"path": list(self.path), "type": str(self.kind)}
        if self.kind == ChangeKind.MODIFIED:
            data["oldValue"] = self.old_value
            data["newValue"] = self.new_value
        else:
            data["value"] = self.value
        return data


@dataclass(frozen=True, slots=True)
class AnnotatedChange:
    """A ChangeRecord together with the source lines it touches.

    Attributes:
        change: The underlying change record.
        old_lines: Lines of the changed value in the left (old) text.  Filled
            for REMOVED and MODIFIED records; empty when unknown.
        new_lines: Lines of the changed value in the right (new) text.  Filled
            for ADDED and MODIFIED records; empty when unknown.
    """

    change: ChangeRecord
    old_lines: tuple[int, ...] = ()
    new_lines: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Rich result of a DocumentComparator call.

    Attributes:
        changes: Ordered change records (see ``compare``).
        annotated: The same records, in the same order, with source lines.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    changes: list[ChangeRecord]
    annotated: list[AnnotatedChange]
    computation_time_ms: float

    @property
    def is_identical(self) -> bool:
        return not self.changes
