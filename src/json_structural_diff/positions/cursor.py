"""Cursor: explicit tokenizer position state for one parse.

A fresh Cursor is created per parse call and threaded through every parsing
method, so no parser state outlives or leaks between invocations.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_structural_diff.errors import JSONPositionError

__all__ = ["Cursor"]


@dataclass(slots=True)
class Cursor:
    """Read position in a text, with 1-based line and column.

    Attributes:
        text:     The full source text.
        position: 0-based offset of the current character.
        line:     1-based line of the current character.
        column:   1-based column of the current character.
    """

    text: str
    position: int = 0
    line: int = 1
    column: int = 1

    @property
    def current(self) -> str:
        """The character under the cursor, or ``""`` at end of input."""
        if self.position < len(self.text):
            return self.text[self.position]
        return ""

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.position)

    def advance(self, steps: int = 1) -> None:
        """Move forward ``steps`` characters, stopping at end of input."""
        self.advance_to(min(self.position + steps, len(self.text)))

    def advance_to(self, target: int) -> None:
        """Move forward to offset ``target``, counting the newlines crossed."""
        newlines = self.text.count("\n", self.position, target)
        if newlines:
            self.line += newlines
            self.column = target - self.text.rfind("\n", self.position, target)
        else:
            self.column += target - self.position
        self.position = target

    def error(self, msg: str) -> JSONPositionError:
        """Build (not raise) a JSONPositionError at the current position."""
        return JSONPositionError(msg, self.position, self.line, self.column)
