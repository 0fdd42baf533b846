"""Tree subpackage: JSON value classification primitives.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the seven value kinds
- MISSING: sentinel for "no value at this key"
- kind_of: classifies any JSON value into a ValueKind
"""

from json_structural_diff.tree.kinds import MISSING, JsonValue, ValueKind, kind_of

__all__ = ["MISSING", "JsonValue", "ValueKind", "kind_of"]
