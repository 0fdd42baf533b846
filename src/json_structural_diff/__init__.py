"""JSON structural diff - ordered change records and source line mapping."""

from __future__ import annotations

from json_structural_diff.algorithm.sorting import sort_json
from json_structural_diff.api import compare, compare_documents, is_identical
from json_structural_diff.comparator import DocumentComparator
from json_structural_diff.errors import JSONPositionError
from json_structural_diff.paths import path_to_string, string_to_path
from json_structural_diff.positions import (
    LineMap,
    ParsedDocument,
    ParserConfig,
    build_line_map,
    find_line_number,
    parse_json,
    parse_with_lines,
)
from json_structural_diff.result import (
    AnnotatedChange,
    ChangeKind,
    ChangeRecord,
    DiffReport,
)
from json_structural_diff.tree.kinds import MISSING

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "AnnotatedChange",
    "ChangeKind",
    "ChangeRecord",
    "DiffReport",
    "DocumentComparator",
    "JSONPositionError",
    "LineMap",
    "ParsedDocument",
    "ParserConfig",
    "build_line_map",
    "compare",
    "compare_documents",
    "find_line_number",
    "is_identical",
    "parse_json",
    "parse_with_lines",
    "path_to_string",
    "sort_json",
    "string_to_path",
]
