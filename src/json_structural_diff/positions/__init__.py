"""positions subpackage: the source position mapper.

Tokenizes JSON-with-comments text and maps every logical path to the
line(s) its value occupies.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_structural_diff.positions import find_line_number

    find_line_number('{\\n "a": {\\n  "b": 1\\n }\\n}', ["a"])
    # [2, 3, 4]
"""

from __future__ import annotations

from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.positions.cursor import Cursor
from json_structural_diff.positions.line_map import LineMap
from json_structural_diff.positions.mapper import (
    build_line_map,
    find_line_number,
    parse_json,
    parse_with_lines,
)
from json_structural_diff.positions.parser import LineMapParser, ParsedDocument

__all__ = [
    "Cursor",
    "LineMap",
    "LineMapParser",
    "ParsedDocument",
    "ParserConfig",
    "build_line_map",
    "find_line_number",
    "parse_json",
    "parse_with_lines",
]
