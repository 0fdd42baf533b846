"""ParserConfig for the permissive JSON position mapper.

ParserConfig is a frozen (immutable) dataclass holding the tokenizer
options.  Infrastructure parameters such as cache sizes are not part of it.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for the line-tracking parser.

    Attributes:
        max_depth: Deepest object/array nesting accepted before the parser
            gives up with a JSONPositionError.  Must be >= 1.
        allow_comments: Accept ``//`` line and ``/* */`` block comments
            wherever whitespace is allowed.  Default True.
        allow_bare_keys: Accept unquoted object keys.  Default True.
    """

    max_depth: int = 256
    allow_comments: bool = True
    allow_bare_keys: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
