"""Canonical path-string codec.

A path is a sequence of segments addressing a node in a JSON value tree:
``str`` segments are object keys, ``int`` segments are array indices.  The
root path is the empty sequence.

Encoding rules:
- String segment  -> ``.key``
- Integer segment -> ``[index]``
- ``True``/``False``/``None`` segments (synthetic keys only) -> ``[true]``,
  ``[false]``, ``[null]``
- Root path       -> ``""``

Keys containing ``.``, ``[``, ``]`` or ``\\`` would collide with the index
syntax, so those characters are escaped with a backslash inside a string
segment (``{"a.b": 1}`` -> ``.a\\.b``).  Keys without them encode verbatim,
and ``string_to_path`` inverts the encoding for every path.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

__all__ = ["Path", "PathSegment", "encode_segment", "path_to_string", "string_to_path"]

PathSegment = str | int | bool | None
Path = tuple[PathSegment, ...]

# Characters that must be escaped inside a string segment
_NEEDS_ESCAPE = re.compile(r"[.\[\]\\]")

# Contents of a bracketed integer segment
_INDEX = re.compile(r"[0-9]+")

_LITERAL_SEGMENTS: dict[str, PathSegment] = {"true": True, "false": False, "null": None}


def encode_segment(segment: PathSegment) -> str:
    """Encode one path segment; ``path_to_string`` is the concatenation of these."""
    # bool before int: bool subclasses int
    if isinstance(segment, bool):
        return "[true]" if segment else "[false]"
    if segment is None:
        return "[null]"
    if isinstance(segment, int):
        if segment < 0:
            msg = f"array index must be >= 0, got {segment}"
            raise ValueError(msg)
        return f"[{segment}]"
    if isinstance(segment, str):
        return "." + _NEEDS_ESCAPE.sub(r"\\\g<0>", segment)

    raise TypeError(f"Unsupported path segment type: {type(segment)!r}")


def path_to_string(path: Sequence[PathSegment]) -> str:
    """Return the canonical string form of a path.

    Args:
        path: Sequence of ``str`` keys and ``int`` indices.  May be empty.

    Returns:
        The encoded path, e.g. ``.users[0].name``; ``""`` for the root.

    Raises:
        ValueError: If an index is negative.
        TypeError:  If a segment is not a str, int, bool or None.
    """
    return "".join(encode_segment(segment) for segment in path)


def string_to_path(encoded: str) -> Path:
    """Decode a canonical path string back into a path tuple.

    Inverse of ``path_to_string``.  Bracketed digits decode to ``int``,
    ``[true]``/``[false]``/``[null]`` to the matching Python constant.

    Raises:
        ValueError: If ``encoded`` is not a well-formed path string.
    """
    segments: list[PathSegment] = []
    i = 0
    n = len(encoded)

    while i < n:
        ch = encoded[i]

        if ch == ".":
            i += 1
            chars: list[str] = []
            while i < n and encoded[i] not in ".[":
                c = encoded[i]
                if c == "\\":
                    if i + 1 >= n:
                        msg = f"dangling escape at offset {i} in path {encoded!r}"
                        raise ValueError(msg)
                    chars.append(encoded[i + 1])
                    i += 2
                    continue
                if c == "]":
                    msg = f"unexpected ']' at offset {i} in path {encoded!r}"
                    raise ValueError(msg)
                chars.append(c)
                i += 1
            segments.append("".join(chars))

        elif ch == "[":
            close = encoded.find("]", i)
            if close < 0:
                msg = f"unterminated '[' at offset {i} in path {encoded!r}"
                raise ValueError(msg)
            token = encoded[i + 1 : close]
            if token in _LITERAL_SEGMENTS:
                segments.append(_LITERAL_SEGMENTS[token])
            elif _INDEX.fullmatch(token):
                segments.append(int(token))
            else:
                msg = f"invalid index {token!r} in path {encoded!r}"
                raise ValueError(msg)
            i = close + 1

        else:
            msg = f"expected '.' or '[' at offset {i} in path {encoded!r}"
            raise ValueError(msg)

    return tuple(segments)
