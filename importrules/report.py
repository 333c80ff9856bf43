"""
JSON report schema for the CLI.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .classifier import Classification
from .types import FileReport


class FindingModel(BaseModel):
    rule: str
    message: str
    source: str
    line: int = Field(description="1-based line")
    column: int = Field(description="1-based column")
    fixable: bool


class FileModel(BaseModel):
    path: str
    fixed: bool = False
    findings: List[FindingModel] = Field(default_factory=list)


class CheckReport(BaseModel):
    files: List[FileModel] = Field(default_factory=list)
    total_findings: int = 0
    files_with_findings: int = 0


class ExplainItem(BaseModel):
    source: str
    priority: int
    category: str


def build_check_report(reports: List[FileReport]) -> CheckReport:
    files = [
        FileModel(
            path=r.path,
            fixed=r.fixed,
            findings=[
                FindingModel(
                    rule=f.rule,
                    message=f.message,
                    source=f.source,
                    line=f.line + 1,
                    column=f.column + 1,
                    fixable=f.fix is not None,
                )
                for f in r.findings
            ],
        )
        for r in reports
    ]
    return CheckReport(
        files=files,
        total_findings=sum(len(f.findings) for f in files),
        files_with_findings=sum(1 for f in files if f.findings),
    )


def build_explain_items(items: List[Classification]) -> List[ExplainItem]:
    return [ExplainItem(source=c.source, priority=c.priority, category=c.category) for c in items]


def format_text(reports: List[FileReport]) -> str:
    """One line per finding: path:line:col: rule: message."""
    lines = []
    for r in reports:
        for f in r.findings:
            lines.append(f"{r.path}:{f.line + 1}:{f.column + 1}: {f.rule}: {f.message}")
    return "\n".join(lines)


__all__ = [
    "FindingModel",
    "FileModel",
    "CheckReport",
    "ExplainItem",
    "build_check_report",
    "build_explain_items",
    "format_text",
]
