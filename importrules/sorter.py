"""
Total ordering of a file's imports.
"""

from __future__ import annotations

from typing import AbstractSet, List, Sequence, Tuple

from .classifier import classify
from .collation import collation_key
from .types import ImportRecord, Priority


def prioritize(
    records: Sequence[ImportRecord],
    equal: Sequence[str] = (),
    dependencies: AbstractSet[str] = frozenset(),
    local: Sequence[str] = (),
) -> List[Tuple[ImportRecord, Priority]]:
    """Pair every record with its priority, computed once per import."""
    return [(rec, classify(rec.source, equal, dependencies, local)) for rec in records]


def sort_imports(prioritized: Sequence[Tuple[ImportRecord, Priority]]) -> List[ImportRecord]:
    """
    Order records by priority, then by source.

    Returns a new list; the input is left untouched. Records equal on both
    keys keep their relative input order.
    """
    ordered = sorted(prioritized, key=lambda pair: (pair[1], collation_key(pair[0].source)))
    return [rec for rec, _ in ordered]


__all__ = ["prioritize", "sort_imports"]
