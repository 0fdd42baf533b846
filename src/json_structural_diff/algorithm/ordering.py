"""Total order over change records.

Primary key: canonical path string, compared by UTF-16 code units so the
order does not depend on locale or on how the host stores strings.
Secondary key: change kind, ``removed < modified < added``.
"""

from __future__ import annotations

from collections.abc import Iterable

from json_structural_diff.result import ChangeKind, ChangeRecord

__all__ = ["change_sort_key", "sort_changes"]

_KIND_PRECEDENCE: dict[ChangeKind, int] = {
    ChangeKind.REMOVED: 0,
    ChangeKind.MODIFIED: 1,
    ChangeKind.ADDED: 2,
}


def _code_units(text: str) -> bytes:
    # Big-endian UTF-16 bytes compare exactly like their 16-bit code units.
    return text.encode("utf-16-be", "surrogatepass")


def change_sort_key(change: ChangeRecord) -> tuple[bytes, int]:
    """Sort key for a single change record."""
    return _code_units(change.path_string), _KIND_PRECEDENCE[change.kind]


def sort_changes(changes: Iterable[ChangeRecord]) -> list[ChangeRecord]:
    """Return a new list of ``changes`` in canonical order."""
    return sorted(changes, key=change_sort_key)
