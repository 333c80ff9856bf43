"""
Declared project dependencies from package.json.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import FrozenSet

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"
_SECTIONS = ("dependencies", "devDependencies")


def load_dependencies(root: Path) -> FrozenSet[str]:
    """
    Names from `dependencies` and `devDependencies` of <root>/package.json.

    A missing, unreadable or malformed manifest yields an empty set.
    """
    path = root / MANIFEST_FILE
    if not path.is_file():
        return frozenset()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable manifest %s: %s", path, e)
        return frozenset()

    if not isinstance(data, dict):
        logger.warning("Ignoring manifest %s: top-level value is not an object", path)
        return frozenset()

    names = set()
    for section in _SECTIONS:
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            logger.warning("Ignoring '%s' in %s: not an object", section, path)
            continue
        names.update(deps.keys())

    logger.debug("Loaded %d dependencies from %s", len(names), path)
    return frozenset(names)


__all__ = ["MANIFEST_FILE", "load_dependencies"]
