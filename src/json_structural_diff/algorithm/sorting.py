"""sort_json: canonical ordering of a JSON value for stable display.

Object keys are sorted ascending.  Array elements are sorted with a
type-aware comparator:

- number vs number       -> numeric order
- composite vs composite -> order of their compact canonical JSON text
                            (taken after the composite itself was sorted)
- anything else          -> order of the JavaScript-style string form
                            (``null``, ``true``, ``1`` for ``1.0``, ...)

Canonical JSON text follows ``JSON.stringify`` conventions: integral floats
render without a fraction (``1.0`` -> ``1``), non-finite numbers render as
``null``, ``MISSING`` members of objects are left out and ``MISSING`` array
elements render as ``null``.

The tree is walked with an explicit stack of frames, children before parents,
so nesting depth is bounded by memory rather than the recursion limit.  Each
finished composite carries its canonical text up to its parent, so no
subtree is serialised twice.

The sort is stable, and applying it twice gives the same value as applying it
once.  The input is never mutated.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator
from functools import cmp_to_key
from typing import Any

from json_structural_diff.tree.kinds import ValueKind, kind_of

__all__ = ["sort_json"]

_COMPOSITE = frozenset({ValueKind.OBJECT, ValueKind.ARRAY})

# Marks an exhausted child iterator; MISSING is a legal child value
_DONE = object()

# (sorted value, kind, canonical JSON text)
_Sorted = tuple[Any, ValueKind, str]


def _number_text(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def _scalar_json(value: Any, kind: ValueKind) -> str:
    if kind == ValueKind.STRING:
        return json.dumps(value, ensure_ascii=False)
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER and math.isfinite(value):
        return _number_text(value)
    # null, MISSING inside an array, NaN and the infinities
    return "null"


def _display_text(value: Any, kind: ValueKind, json_text: str) -> str:
    """String form of a value as a JavaScript ``String(value)`` would render it."""
    if kind in _COMPOSITE:
        return json_text
    if kind == ValueKind.MISSING:
        return "undefined"
    if kind == ValueKind.NUMBER:
        return _number_text(value)
    if kind == ValueKind.STRING:
        return value
    return json_text


def _compare(left: tuple[Any, ...], right: tuple[Any, ...]) -> int:
    value_a, kind_a, text_a = left[:3]
    value_b, kind_b, text_b = right[:3]

    if kind_a == ValueKind.NUMBER and kind_b == ValueKind.NUMBER:
        return (value_a > value_b) - (value_a < value_b)

    return (text_a > text_b) - (text_a < text_b)


class _Frame:
    """One composite whose children are being sorted."""

    __slots__ = ("children", "done", "keys", "kind")

    def __init__(self, value: Any, kind: ValueKind) -> None:
        self.kind = kind
        self.done: list[_Sorted] = []
        if kind == ValueKind.OBJECT:
            self.keys: list[str] = sorted(value)
            self.children: Iterator[Any] = iter([value[key] for key in self.keys])
        else:
            self.keys = []
            self.children = iter(value)

    def finish(self) -> _Sorted:
        if self.kind == ValueKind.OBJECT:
            members = [
                f"{json.dumps(key, ensure_ascii=False)}:{text}"
                for key, (_, kind, text) in zip(self.keys, self.done)
                if kind != ValueKind.MISSING
            ]
            value = {key: item for key, (item, _, _) in zip(self.keys, self.done)}
            return value, self.kind, "{" + ",".join(members) + "}"

        decorated = [
            (item, kind, _display_text(item, kind, text), text)
            for item, kind, text in self.done
        ]
        decorated.sort(key=cmp_to_key(_compare))
        texts = ",".join(text for _, _, _, text in decorated)
        return [item for item, _, _, _ in decorated], self.kind, "[" + texts + "]"


def sort_json(value: Any) -> Any:
    """Return a copy of ``value`` with keys and array elements in canonical order.

    Args:
        value: Any JSON value.  Scalars are returned unchanged.

    Returns:
        A new dict/list tree for composites; the same object for scalars.

    Raises:
        TypeError: If the tree contains a non-JSON Python object.
    """
    kind = kind_of(value)
    if kind not in _COMPOSITE:
        return value

    stack = [_Frame(value, kind)]
    while True:
        frame = stack[-1]
        child = next(frame.children, _DONE)

        if child is not _DONE:
            child_kind = kind_of(child)
            if child_kind in _COMPOSITE:
                stack.append(_Frame(child, child_kind))
            else:
                frame.done.append((child, child_kind, _scalar_json(child, child_kind)))
            continue

        stack.pop()
        finished = frame.finish()
        if not stack:
            return finished[0]
        stack[-1].done.append(finished)
