"""Module-level entry points of the source position mapper.

``build_line_map`` and ``parse_with_lines`` fail loudly on malformed text.
``find_line_number`` is a best-effort highlighting aid: it never raises and
answers ``[]`` whenever it cannot locate the path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_structural_diff.errors import JSONPositionError
from json_structural_diff.paths import PathSegment, path_to_string
from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.positions.line_map import LineMap
from json_structural_diff.positions.parser import LineMapParser, ParsedDocument

__all__ = ["build_line_map", "find_line_number", "parse_json", "parse_with_lines"]

_LOG = logging.getLogger(__name__)


def parse_with_lines(text: str, config: ParserConfig | None = None) -> ParsedDocument:
    """Parse permissive JSON text into its value and its LineMap in one pass.

    Raises:
        TypeError: If ``text`` is not a str.
        JSONPositionError: If the text is empty or malformed.
    """
    return LineMapParser(config=config).parse(text)


def parse_json(text: str, config: ParserConfig | None = None) -> Any:
    """Parse permissive JSON text (comments, bare keys) into a value."""
    return parse_with_lines(text, config=config).value


def build_line_map(text: str, config: ParserConfig | None = None) -> LineMap:
    """Build the ``path string -> lines`` index for ``text``.

    Raises:
        TypeError: If ``text`` is not a str.
        JSONPositionError: If the text is empty or malformed.
    """
    return parse_with_lines(text, config=config).line_map


def find_line_number(
    text: str,
    path: Sequence[PathSegment],
    line_map: LineMap | None = None,
) -> list[int]:
    """Return the 1-based lines occupied by the value at ``path`` in ``text``.

    Args:
        text:     Source text.  Ignored when ``line_map`` is supplied.
        path:     Keys and indices; ``[]`` addresses the root value.
        line_map: A map previously built from ``text``; skips re-parsing.

    Returns:
        One line for scalars, the full inclusive span for objects and arrays,
        or ``[]`` when the path is unknown or the text cannot be parsed.
    """
    if line_map is None:
        try:
            line_map = build_line_map(text)
        except (JSONPositionError, TypeError) as exc:
            _LOG.debug("no line information for path %r: %s", path, exc)
            return []

    try:
        key = path_to_string(path)
    except (TypeError, ValueError) as exc:
        _LOG.debug("unaddressable path %r: %s", path, exc)
        return []

    return list(line_map.get(key, ()))
