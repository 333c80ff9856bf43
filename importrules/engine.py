"""
Per-file lint pipeline: parse, classify, sort, check, fix.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence, Tuple

from .config import Settings
from .conformance import check_order
from .depth import check_depth
from .files import collect_files
from .manifest import load_dependencies
from .parsing import comment_ranges, create_document, extract_imports
from .range_edits import RangeEditor
from .sorter import prioritize, sort_imports
from .types import FileReport, Finding, ImportRecord

logger = logging.getLogger(__name__)

MAX_FIX_PASSES = 10


def attach_comments(
    text: str,
    records: Sequence[ImportRecord],
    comments: Sequence[Tuple[int, int]] = (),
) -> Optional[List[ImportRecord]]:
    """
    Fold comments sitting between imports into the neighbouring import's text.

    A comment on the same line as the previous import stays with it. Any other
    comment moves together with the import that follows it.

    Returns:
        Records with extended text, or None if anything other than whitespace
        and comments separates two imports
    """
    attached = list(records)
    for i in range(1, len(records)):
        prev, cur = records[i - 1], records[i]
        trailing: List[str] = []
        leading: List[str] = []
        pos = prev.end
        for start, end in comments:
            if start < prev.end or end > cur.start:
                continue
            if text[pos:start].strip():
                return None
            if not leading and "\n" not in text[prev.end:start]:
                trailing.append(text[start:end])
            else:
                leading.append(text[start:end])
            pos = end
        if text[pos:cur.start].strip():
            return None

        if trailing:
            attached[i - 1] = replace(attached[i - 1], text=" ".join([attached[i - 1].text, *trailing]))
        if leading:
            attached[i] = replace(cur, text="\n".join([*leading, cur.text]))
    return attached


def order_findings(
    text: str,
    records: Sequence[ImportRecord],
    settings: Settings,
    dependencies: AbstractSet[str],
    comments: Sequence[Tuple[int, int]] = (),
) -> List[Finding]:
    """Findings of the import ordering rule for one file's imports."""
    block = attach_comments(text, records, comments)
    written = block if block is not None else list(records)
    ordered = sort_imports(prioritize(written, settings.sort.equal, dependencies, settings.sort.local))
    check = check_order(written, ordered)
    if check.ok:
        return []

    fix = check.fix
    if fix is not None and block is None:
        logger.warning("Imports are separated by other code, order fix skipped")
        fix = None

    return [
        Finding(
            rule="sort-imports",
            message=v.message,
            source=v.record.source,
            line=v.record.line,
            column=v.record.column,
            fix=fix,
        )
        for v in check.violations
    ]


def lint_text(
    text: str,
    filename: Path,
    settings: Settings,
    dependencies: AbstractSet[str] = frozenset(),
    cwd: Optional[Path] = None,
) -> FileReport:
    """
    Run the enabled rules over one file's text.

    Args:
        text: File content
        filename: Path used for grammar selection and relative import resolution
        settings: Loaded configuration
        dependencies: Declared package names
        cwd: Project root for the deep relative imports rule (default: current directory)

    Returns:
        FileReport with findings and the distinct fixes they propose
    """
    doc = create_document(text, filename)
    records = extract_imports(doc)
    report = FileReport(path=str(filename))

    if settings.sort_imports and len(records) > 1:
        report.findings.extend(order_findings(text, records, settings, dependencies, comment_ranges(doc)))

    if settings.deep_relative:
        report.findings.extend(check_depth(
            records,
            filename,
            cwd or Path.cwd(),
            max_depth=settings.depth.max_depth,
            root_dir=settings.depth.root_dir,
        ))

    for finding in report.findings:
        if finding.fix is not None and finding.fix not in report.fixes:
            report.fixes.append(finding.fix)

    report.findings.sort(key=lambda f: (f.line, f.column))
    return report


def fix_text(
    text: str,
    filename: Path,
    settings: Settings,
    dependencies: AbstractSet[str] = frozenset(),
    cwd: Optional[Path] = None,
) -> str:
    """Apply fixes until the file is stable or no fix applies."""
    for _ in range(MAX_FIX_PASSES):
        report = lint_text(text, filename, settings, dependencies, cwd)
        if not report.fixes:
            break
        editor = RangeEditor(text)
        for fix in report.fixes:
            editor.add_fix(fix)
        new_text, stats = editor.apply_edits()
        logger.debug("%s: %s", filename, stats)
        if new_text == text:
            break
        text = new_text
    return text


def lint_paths(
    paths: Sequence[Path],
    settings: Settings,
    root: Path,
    fix: bool = False,
) -> List[FileReport]:
    """
    Lint every supported file under paths.

    The manifest is read once from root and shared by all files.
    With fix=True files are rewritten in place and re-linted.
    """
    root = root.resolve()
    dependencies = load_dependencies(root)
    reports: List[FileReport] = []

    for path in collect_files(paths, settings.exclude, root):
        # relative import targets are resolved from the absolute file location
        filename = path.resolve()
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Skipping %s: not valid UTF-8 (%s)", path, e.reason)
            continue

        if fix:
            new_text = fix_text(text, filename, settings, dependencies, root)
            if new_text != text:
                path.write_text(new_text, encoding="utf-8")
                logger.info("Fixed %s", path)
            report = lint_text(new_text, filename, settings, dependencies, root)
            report.fixed = new_text != text
        else:
            report = lint_text(text, filename, settings, dependencies, root)
        report.path = str(path)
        reports.append(report)

    return reports


__all__ = ["MAX_FIX_PASSES", "attach_comments", "order_findings", "lint_text", "fix_text", "lint_paths"]
