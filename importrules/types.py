"""
Plain value types shared by the classifier, sorter and conformance check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional

Priority = int

RuleName = Literal["sort-imports", "deep-relative-imports"]


@dataclass(frozen=True)
class ImportRecord:
    """One import statement of a file, in order of appearance."""
    source: str                    # literal import path, quotes stripped
    original_index: int            # position among the file's imports
    text: str = ""                 # statement text as written
    start: int = 0                 # char offset of the statement
    end: int = 0
    line: int = 0                  # 0-based
    column: int = 0
    source_start: int = 0          # char range of the quoted source literal
    source_end: int = 0
    node: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Fix:
    """Replace text[start:end] with replacement."""
    start: int
    end: int
    replacement: str


@dataclass(frozen=True)
class Violation:
    """An out-of-place import found by the conformance check."""
    record: ImportRecord
    expected: ImportRecord
    message: str


@dataclass
class Finding:
    """A reportable problem with its location."""
    rule: RuleName
    message: str
    source: str
    line: int
    column: int
    fix: Optional[Fix] = None


@dataclass
class FileReport:
    path: str
    findings: List[Finding] = field(default_factory=list)
    fixes: List[Fix] = field(default_factory=list)
    fixed: bool = False

    @property
    def ok(self) -> bool:
        return not self.findings


__all__ = ["Priority", "RuleName", "ImportRecord", "Fix", "Violation", "Finding", "FileReport"]
