"""
Discovery of lintable files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List, Sequence

import pathspec

from .parsing import is_supported

logger = logging.getLogger(__name__)


def _rel_posix(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def collect_files(paths: Sequence[Path], exclude: Sequence[str], root: Path) -> List[Path]:
    """
    Supported source files under paths, sorted, without duplicates.

    Exclusion patterns use gitignore syntax relative to root. Files given
    explicitly are kept even when they match an exclusion.
    """
    spec = pathspec.PathSpec.from_lines("gitwildmatch", exclude)
    seen = set()
    result: List[Path] = []

    for path in paths:
        if path.is_file():
            candidates: Iterator[Path] = iter([path])
        elif path.is_dir():
            candidates = _walk(path, spec, root)
        else:
            logger.warning("Path does not exist: %s", path)
            continue

        for file in candidates:
            key = file.resolve()
            if key in seen or not is_supported(file):
                continue
            seen.add(key)
            result.append(file)

    result.sort()
    return result


def _walk(top: Path, spec: pathspec.PathSpec, root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(top):
        current = Path(dirpath)
        # Prune excluded directories early
        dirnames[:] = sorted(
            d for d in dirnames
            if not spec.match_file(_rel_posix(current / d, root) + "/")
        )
        for name in sorted(filenames):
            file = current / name
            if spec.match_file(_rel_posix(file, root)):
                continue
            yield file


__all__ = ["collect_files"]
