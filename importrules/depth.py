"""
Deep relative imports rule.

Flags imports that climb more than `max_depth` parent directories and
proposes a replacement rooted at the configured source directory.
"""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path
from typing import List, Sequence

from .classifier import parent_level
from .types import Finding, Fix, ImportRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3
DEFAULT_ROOT_DIR = "src"


def depth_message(source: str, suggestion: str) -> str:
    return (
        f"Avoid deeply nested relative import '{source}', "
        f"use an absolute path such as '{suggestion}'"
    )


def rooted_path(source: str, filename: Path, cwd: Path, root_dir: str) -> str:
    """
    Rewrite a relative import as a path under root_dir.

    The import is resolved against the importing file's directory and then made
    relative to <cwd>/<root_dir>.
    """
    file_dir = Path(filename)
    if not file_dir.is_absolute():
        file_dir = Path(cwd) / file_dir
    base = posixpath.join(file_dir.parent.as_posix(), source)
    target = posixpath.normpath(base)
    project_root = posixpath.normpath(posixpath.join(Path(cwd).as_posix(), root_dir))
    rel = os.path.relpath(target, project_root).replace(os.sep, "/")
    return f"{root_dir}/{rel}"


def check_depth(
    records: Sequence[ImportRecord],
    filename: Path,
    cwd: Path,
    max_depth: int = DEFAULT_MAX_DEPTH,
    root_dir: str = DEFAULT_ROOT_DIR,
) -> List[Finding]:
    """One finding per import with more than max_depth '../' segments."""
    findings: List[Finding] = []
    for rec in records:
        if parent_level(rec.source) <= max_depth:
            continue
        new_path = rooted_path(rec.source, filename, cwd, root_dir)
        logger.debug("%s: %s -> %s", filename, rec.source, new_path)
        findings.append(Finding(
            rule="deep-relative-imports",
            message=depth_message(rec.source, new_path),
            source=rec.source,
            line=rec.line,
            column=rec.column,
            fix=Fix(rec.source_start, rec.source_end, f"'{new_path}'"),
        ))
    return findings


__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_ROOT_DIR", "check_depth", "depth_message", "rooted_path"]
