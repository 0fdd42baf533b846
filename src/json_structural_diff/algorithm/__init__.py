"""algorithm subpackage: the structural diff engine and canonical sort.

Example::

    from json_structural_diff.algorithm import StructuralDiffer

    StructuralDiffer().diff({"firstName": "John"}, {"givenName": "John"})
    # [removed ('firstName',), added ('givenName',)]
"""

from __future__ import annotations

from json_structural_diff.algorithm.differ import StructuralDiffer
from json_structural_diff.algorithm.ordering import change_sort_key, sort_changes
from json_structural_diff.algorithm.sorting import sort_json

__all__ = ["StructuralDiffer", "change_sort_key", "sort_changes", "sort_json"]
