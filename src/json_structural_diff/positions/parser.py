"""LineMapParser: recursive-descent parser that records source lines per path.

Accepts JSON plus ``//`` and ``/* */`` comments and unquoted object keys.
One pass over the text produces both the parsed value and a LineMap:

- Scalars record the line their first character is on (a string's opening
  quote, a number's sign or first digit, a literal's first letter).
- Objects and arrays record every line from the opening bracket to the
  closing bracket, inclusive.
- Object members also record the line of their key token.

Recording is first-writer-wins: once a path has lines, later attempts for the
same path are ignored.  For a duplicated object key the value keeps the last
occurrence (as ``json.loads`` does) while the line map keeps the first
occurrence's lines and key line.  Paths below the first occurrence stay in the
map even when the kept value has no such member, and paths that only the
later occurrence has are added, so the map describes the union of all
occurrences.  A lookup of the duplicated key itself always points at its
first occurrence in the text.

Each recursive call receives its own extended path string, so nothing is
popped on the way back up, and all mutable state lives in the per-call
Cursor and _LineRecorder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from json_structural_diff.paths import encode_segment
from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.positions.cursor import Cursor
from json_structural_diff.positions.line_map import LineMap

__all__ = ["LineMapParser", "ParsedDocument"]

# Compiled regex patterns (module-level, compiled once)

_WHITESPACE = re.compile(r"[ \t\r\n]*")

# Run of string characters that need no special handling
_STRING_CHUNK = re.compile(r'[^"\\]+')

# JSON number grammar: no leading zeros, digits required after '.' and 'e'
_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][-+]?[0-9]+)?")

_HEX4 = re.compile(r"[0-9a-fA-F]{4}")

_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_LITERALS: tuple[tuple[str, Any], ...] = (("true", True), ("false", False), ("null", None))

# Characters that end an unquoted key
_BARE_KEY_STOP = frozenset(':{}[],"' + " \t\r\n")


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Result of a line-tracking parse.

    Attributes:
        value:    The parsed JSON value.
        line_map: Lines occupied by every path in ``value``.
    """

    value: Any
    line_map: LineMap


@dataclass(slots=True)
class _LineRecorder:
    """Accumulates path lines during one parse; frozen into a LineMap at the end."""

    lines: dict[str, tuple[int, ...]] = field(default_factory=dict)
    key_lines: dict[str, int] = field(default_factory=dict)

    def record(self, path: str, lines: tuple[int, ...]) -> None:
        self.lines.setdefault(path, lines)

    def record_key(self, path: str, line: int) -> None:
        self.key_lines.setdefault(path, line)

    def freeze(self) -> LineMap:
        return LineMap(self.lines, self.key_lines)


class LineMapParser:
    """Line-tracking parser for the permissive JSON-with-comments dialect.

    Stateless between calls: every ``parse()`` creates its own Cursor and
    recorder, so one instance can serve any number of callers.

    Example::

        parser = LineMapParser()
        doc = parser.parse('{\\n  // comment\\n  name: "John"\\n}')
        doc.value                  # {"name": "John"}
        doc.line_map[".name"]      # (3,)
        doc.line_map[""]           # (1, 2, 3, 4)
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config: ParserConfig = config if config is not None else ParserConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParsedDocument:
        """Parse ``text`` and record the lines of every value in it.

        Raises:
            TypeError: If ``text`` is not a str.
            JSONPositionError: If the text is empty or malformed.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text)!r}")

        cursor = Cursor(text)
        recorder = _LineRecorder()

        value = self._parse_value(cursor, "", recorder, 0)

        self._skip_whitespace(cursor)
        if not cursor.at_end:
            raise cursor.error("Extra data")

        return ParsedDocument(value=value, line_map=recorder.freeze())

    # ------------------------------------------------------------------
    # Whitespace and comments
    # ------------------------------------------------------------------

    def _skip_whitespace(self, cursor: Cursor) -> None:
        text = cursor.text
        while True:
            end = _WHITESPACE.match(text, cursor.position).end()
            if end > cursor.position:
                cursor.advance_to(end)

            if not self._config.allow_comments:
                return

            if cursor.startswith("//"):
                newline = text.find("\n", cursor.position)
                cursor.advance_to(len(text) if newline < 0 else newline)
            elif cursor.startswith("/*"):
                close = text.find("*/", cursor.position + 2)
                if close < 0:
                    raise cursor.error("Unterminated comment")
                cursor.advance_to(close + 2)
            else:
                return

    def _at_comment(self, cursor: Cursor) -> bool:
        return self._config.allow_comments and (
            cursor.startswith("//") or cursor.startswith("/*")
        )

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _parse_value(
        self, cursor: Cursor, path: str, recorder: _LineRecorder, depth: int
    ) -> Any:
        self._skip_whitespace(cursor)
        ch = cursor.current
        line = cursor.line

        if ch == "{":
            return self._parse_object(cursor, path, recorder, depth)
        if ch == "[":
            return self._parse_array(cursor, path, recorder, depth)
        if ch == '"':
            value: Any = self._parse_string(cursor)
            recorder.record(path, (line,))
            return value
        if ch == "-" or "0" <= ch <= "9":
            value = self._parse_number(cursor)
            recorder.record(path, (line,))
            return value
        for literal, literal_value in _LITERALS:
            if cursor.startswith(literal):
                cursor.advance(len(literal))
                recorder.record(path, (line,))
                return literal_value

        if cursor.at_end:
            raise cursor.error("Expecting value")
        raise cursor.error(f"Unexpected character {ch!r}")

    def _parse_object(
        self, cursor: Cursor, path: str, recorder: _LineRecorder, depth: int
    ) -> dict[str, Any]:
        if depth >= self._config.max_depth:
            raise cursor.error(f"Maximum nesting depth {self._config.max_depth} exceeded")

        start_line = cursor.line
        obj: dict[str, Any] = {}

        cursor.advance()  # '{'
        self._skip_whitespace(cursor)

        if cursor.current != "}":
            while True:
                self._skip_whitespace(cursor)
                key_line = cursor.line
                key = self._parse_key(cursor)

                self._skip_whitespace(cursor)
                if cursor.current != ":":
                    raise cursor.error("Expecting ':' delimiter")
                cursor.advance()

                member_path = path + encode_segment(key)
                recorder.record_key(member_path, key_line)
                obj[key] = self._parse_value(cursor, member_path, recorder, depth + 1)

                self._skip_whitespace(cursor)
                if cursor.current == ",":
                    cursor.advance()
                    continue
                if cursor.current == "}":
                    break
                if cursor.at_end:
                    raise cursor.error("Unterminated object")
                raise cursor.error("Expecting ',' delimiter")

        recorder.record(path, tuple(range(start_line, cursor.line + 1)))
        cursor.advance()  # '}'
        return obj

    def _parse_array(
        self, cursor: Cursor, path: str, recorder: _LineRecorder, depth: int
    ) -> list[Any]:
        if depth >= self._config.max_depth:
            raise cursor.error(f"Maximum nesting depth {self._config.max_depth} exceeded")

        start_line = cursor.line
        arr: list[Any] = []

        cursor.advance()  # '['
        self._skip_whitespace(cursor)

        if cursor.current != "]":
            while True:
                element_path = path + encode_segment(len(arr))
                arr.append(self._parse_value(cursor, element_path, recorder, depth + 1))

                self._skip_whitespace(cursor)
                if cursor.current == ",":
                    cursor.advance()
                    continue
                if cursor.current == "]":
                    break
                if cursor.at_end:
                    raise cursor.error("Unterminated array")
                raise cursor.error("Expecting ',' delimiter")

        recorder.record(path, tuple(range(start_line, cursor.line + 1)))
        cursor.advance()  # ']'
        return arr

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _parse_key(self, cursor: Cursor) -> str:
        if cursor.current == '"':
            return self._parse_string(cursor)

        if not self._config.allow_bare_keys:
            raise cursor.error("Expecting property name enclosed in double quotes")

        start = cursor.position
        while (
            not cursor.at_end
            and cursor.current not in _BARE_KEY_STOP
            and not self._at_comment(cursor)
        ):
            cursor.advance()

        if cursor.position == start:
            raise cursor.error("Expecting property name")
        return cursor.text[start : cursor.position]

    def _parse_string(self, cursor: Cursor) -> str:
        # Unterminated strings are reported at the opening quote
        start = Cursor(cursor.text, cursor.position, cursor.line, cursor.column)
        text = cursor.text
        chunks: list[str] = []

        cursor.advance()  # opening '"'
        while True:
            chunk = _STRING_CHUNK.match(text, cursor.position)
            if chunk is not None:
                chunks.append(chunk.group())
                cursor.advance_to(chunk.end())

            ch = cursor.current
            if ch == '"':
                cursor.advance()
                return "".join(chunks)
            if ch == "":
                raise start.error("Unterminated string starting")

            # ch is a backslash
            cursor.advance()
            escape = cursor.current
            if escape == "":
                raise start.error("Unterminated string starting")
            if escape == "u":
                chunks.append(self._parse_unicode_escape(cursor))
            else:
                # Unknown escapes keep the escaped character
                chunks.append(_ESCAPES.get(escape, escape))
                cursor.advance()

    def _parse_unicode_escape(self, cursor: Cursor) -> str:
        """Decode ``uXXXX`` (cursor on the ``u``); joins a surrogate escape pair."""
        text = cursor.text
        digits = text[cursor.position + 1 : cursor.position + 5]
        if not _HEX4.fullmatch(digits):
            raise cursor.error("Invalid \\uXXXX escape")
        code = int(digits, 16)
        cursor.advance(5)

        if 0xD800 <= code <= 0xDBFF and cursor.startswith("\\u"):
            low_digits = text[cursor.position + 2 : cursor.position + 6]
            if _HEX4.fullmatch(low_digits):
                low = int(low_digits, 16)
                if 0xDC00 <= low <= 0xDFFF:
                    cursor.advance(6)
                    code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)

        return chr(code)

    def _parse_number(self, cursor: Cursor) -> int | float:
        match = _NUMBER.match(cursor.text, cursor.position)
        if match is None:
            raise cursor.error("Invalid number")

        cursor.advance_to(match.end())
        literal = match.group()
        fraction, exponent = match.groups()
        if fraction is not None or exponent is not None:
            return float(literal)
        return int(literal)
