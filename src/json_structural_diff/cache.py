"""LineMapCache: LRU memo of parsed documents keyed by source text.

Editors re-run the position mapper on every keystroke, usually for the same
two texts.  The cache keeps the most recent ParsedDocument per text so that
repeated lookups skip the tokenizer.  The text itself is the key, so an
edited text is a new entry and can never see a stale map.

Each ``LineMapCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from json_structural_diff.cache import LineMapCache

    cache = LineMapCache(max_size=64)
    cache.line_map('{"a": 1}')   # parsed
    cache.line_map('{"a": 1}')   # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from json_structural_diff.positions.config import ParserConfig
from json_structural_diff.positions.line_map import LineMap
from json_structural_diff.positions.parser import LineMapParser, ParsedDocument

__all__ = ["LineMapCache"]


class LineMapCache:
    """LRU-backed memo around ``LineMapParser.parse``.

    Only successful parses are stored: malformed text raises on every call.
    LRU eviction is silent.

    Args:
        config:   Parser options used for every entry.
        max_size: Maximum number of texts held in memory.  Defaults to 64.
    """

    def __init__(self, config: ParserConfig | None = None, max_size: int = 64) -> None:
        self._parser = LineMapParser(config=config)
        self._cache: LRUCache[str, ParsedDocument] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParsedDocument:
        """Return the parsed document for ``text``, parsing only on a miss.

        Raises:
            TypeError: If ``text`` is not a str.
            JSONPositionError: If the text is empty or malformed.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text)!r}")

        document = self._cache.get(text)
        if document is None:
            document = self._parser.parse(text)
            self._cache[text] = document
        return document

    def line_map(self, text: str) -> LineMap:
        """Return the LineMap for ``text`` (see ``parse``)."""
        return self.parse(text).line_map

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
