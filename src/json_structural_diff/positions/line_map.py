"""LineMap: read-only index from canonical path string to source lines.

Values are tuples of 1-based line numbers: a single line for scalars, every
line from the opening to the closing bracket for objects and arrays.  The map
also keeps the line of each object member's key token.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from json_structural_diff.paths import PathSegment, path_to_string

__all__ = ["LineMap"]


class LineMap(Mapping[str, tuple[int, ...]]):
    """Immutable ``path string -> line numbers`` mapping.

    Example::

        line_map = build_line_map('{\\n "a": {\\n  "b": 1\\n }\\n}')
        line_map[".a"]            # (2, 3, 4)
        line_map.lines(["a", "b"])  # [3]
        line_map.key_line(["a"])    # 2
    """

    __slots__ = ("_key_lines", "_lines")

    def __init__(
        self,
        lines: Mapping[str, tuple[int, ...]] | None = None,
        key_lines: Mapping[str, int] | None = None,
    ) -> None:
        self._lines: dict[str, tuple[int, ...]] = dict(lines or {})
        self._key_lines: dict[str, int] = dict(key_lines or {})

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, path_string: str) -> tuple[int, ...]:
        return self._lines[path_string]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"LineMap({self._lines!r})"

    # ------------------------------------------------------------------
    # Path-sequence helpers
    # ------------------------------------------------------------------

    @property
    def key_lines(self) -> Mapping[str, int]:
        """Read-only ``path string -> line of the member's key`` view."""
        return MappingProxyType(self._key_lines)

    def lines(self, path: Sequence[PathSegment]) -> list[int]:
        """Lines occupied by the value at ``path``; ``[]`` when not present."""
        return list(self._lines.get(path_to_string(path), ()))

    def key_line(self, path: Sequence[PathSegment]) -> int | None:
        """Line of the key introducing the object member at ``path``, if any."""
        return self._key_lines.get(path_to_string(path))
