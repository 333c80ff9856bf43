"""
Conformance check: compares the written import order with the computed one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .types import Fix, ImportRecord, Violation


@dataclass(frozen=True)
class OrderCheck:
    """Outcome of comparing a file's imports with their sorted order."""
    violations: List[Violation] = field(default_factory=list)
    fix: Optional[Fix] = None

    @property
    def ok(self) -> bool:
        return not self.violations


def order_message(source: str) -> str:
    return f'Import "{source}" is not in the configured order'


def render_block(ordered: Sequence[ImportRecord]) -> str:
    """Statement texts of the ordered imports, one per line."""
    return "\n".join(rec.text for rec in ordered)


def check_order(original: Sequence[ImportRecord], ordered: Sequence[ImportRecord]) -> OrderCheck:
    """
    Walk both sequences in lockstep and report every position whose source differs.

    Args:
        original: Imports in order of appearance
        ordered: The same imports in computed order

    Returns:
        OrderCheck with one violation per mismatched position and, when there is
        at least one, a single fix spanning the whole import block
    """
    if len(original) != len(ordered):
        raise ValueError(f"Import lists differ in length: {len(original)} != {len(ordered)}")

    violations = [
        Violation(record=rec, expected=exp, message=order_message(rec.source))
        for rec, exp in zip(original, ordered)
        if rec.source != exp.source
    ]
    if not violations:
        return OrderCheck()

    fix = Fix(start=original[0].start, end=original[-1].end, replacement=render_block(ordered))
    return OrderCheck(violations=violations, fix=fix)


__all__ = ["OrderCheck", "check_order", "order_message", "render_block"]
