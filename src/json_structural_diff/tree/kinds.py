"""ValueKind StrEnum and the MISSING sentinel for JSON value trees.

A JSON value tree is made of plain Python objects: ``dict`` (object),
``list`` (array), ``str``, ``int``/``float`` (number), ``bool`` and ``None``.
``MISSING`` stands for "no value at this key", which is distinct from an
explicit JSON ``null``.
"""

from __future__ import annotations

from enum import Enum, StrEnum, auto
from typing import Any, Final

__all__ = ["MISSING", "JsonValue", "ValueKind", "kind_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class _Missing(Enum):
    """Single-member enum so that MISSING survives copy, deepcopy and pickle."""

    MISSING = auto()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING


class ValueKind(StrEnum):
    """Fundamental kind of a JSON value.

    StrEnum values are the lowercased member names:
    - OBJECT  -> "object"  : dict
    - ARRAY   -> "array"   : list
    - STRING  -> "string"  : str
    - NUMBER  -> "number"  : int or float (never bool)
    - BOOLEAN -> "boolean" : bool
    - NULL    -> "null"    : None
    - MISSING -> "missing" : the MISSING sentinel
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    MISSING = auto()


def kind_of(value: Any) -> ValueKind:
    """Classify a JSON value.

    bool MUST be checked before int: bool is a subclass of int in Python, and
    ``True`` and ``1`` are different JSON values.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if value is MISSING:
        return ValueKind.MISSING
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")
