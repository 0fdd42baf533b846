"""Exceptions raised by the source position mapper."""

from __future__ import annotations

__all__ = ["JSONPositionError"]


class JSONPositionError(ValueError):
    """Malformed JSON-like text that the position mapper could not traverse.

    Subclasses ``ValueError`` like ``json.JSONDecodeError``, so callers that
    already catch decode errors as ``ValueError`` keep working.

    Attributes:
        msg:      Unformatted description of the problem.
        position: 0-based character offset of the offending character.
        line:     1-based line of the offending character.
        column:   1-based column of the offending character.
    """

    def __init__(self, msg: str, position: int, line: int, column: int) -> None:
        super().__init__(f"{msg} at position {position}, line {line}, column {column}")
        self.msg = msg
        self.position = position
        self.line = line
        self.column = column

    def __reduce__(self) -> tuple[type[JSONPositionError], tuple[str, int, int, int]]:
        return self.__class__, (self.msg, self.position, self.line, self.column)
