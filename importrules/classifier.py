"""
Import source classification.

Maps an import source string to an integer priority. Priorities live in
non-overlapping bands, so the category of an import always dominates the
tie-breaking applied inside a band:

    equal list          0 .. 999   (index in the list)
    third-party         1000
    absolute paths      2000 + segment count
    local roots         just below 3000
    ../ non-style       3000 + (5 - hops) * 100 - depth
    ../ style files     4000 + (5 - hops) * 100 - depth
    ./ files            3999 / 4999 - segment count
    everything else     5000

The rules are an ordered predicate chain: the first one that matches wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Literal, Sequence

from .types import Priority

EQUAL_BASE = 0
THIRD_PARTY_BASE = 1000
ABSOLUTE_PATH_BASE = 2000
RELATIVE_NON_STYLE_BASE = 3000
RELATIVE_STYLE_BASE = 4000
DEFAULT_PRIORITY = 5000

# Hop count the ../ formula counts down from. Beyond it, and with enough path
# segments, a parent-relative priority drops below its base into the band
# underneath (six hops to ../../../../../../x gives 2900, a local-root value).
MAX_PARENT_LEVEL = 5

MAX_EQUAL_ENTRIES = THIRD_PARTY_BASE - EQUAL_BASE

_STYLE_RE = re.compile(r"\.(css|scss|less)$")

Category = Literal[
    "equal",
    "third_party",
    "local_root",
    "absolute",
    "parent_relative",
    "parent_relative_style",
    "sibling_relative",
    "sibling_relative_style",
    "default",
]


@dataclass(frozen=True)
class Classification:
    """Priority of a source together with the rule that produced it."""
    source: str
    priority: Priority
    category: Category


def is_style_file(source: str) -> bool:
    """True for stylesheet imports (.css, .scss, .less)."""
    return _STYLE_RE.search(source) is not None


def segment_count(source: str) -> int:
    """Number of '/'-separated segments, empty ones included."""
    return len(source.split("/"))


def parent_level(source: str) -> int:
    """Number of literal '../' occurrences."""
    return source.count("../")


def _local_root_priority(source: str, local: Sequence[str]) -> Priority | None:
    for i, root in enumerate(local):
        if source.startswith(root + "/"):
            return RELATIVE_NON_STYLE_BASE - len(local) + i
    return None


def explain(
    source: str,
    equal: Sequence[str] = (),
    dependencies: AbstractSet[str] = frozenset(),
    local: Sequence[str] = (),
) -> Classification:
    """
    Classify an import source.

    Args:
        source: Import path as written in the statement
        equal: Sources pinned to a fixed order (exact match, index is the rank)
        dependencies: Package names declared by the project manifest
        local: Local root prefixes; later entries sort closer to relative imports

    Returns:
        Classification with the priority and the matching category
    """
    # 1. Pinned order
    if source in equal:
        return Classification(source, EQUAL_BASE + list(equal).index(source), "equal")

    # 2. Third-party packages
    if source in dependencies or source.startswith("@"):
        return Classification(source, THIRD_PARTY_BASE, "third_party")

    # 3. Absolute paths
    if not source.startswith("."):
        prio = _local_root_priority(source, local)
        if prio is not None:
            return Classification(source, prio, "local_root")
        return Classification(source, ABSOLUTE_PATH_BASE + segment_count(source), "absolute")

    style = is_style_file(source)

    # 4. Parent-directory relative paths
    if source.startswith("../"):
        other_level = segment_count(source.replace("../", "")) - 1
        base = RELATIVE_STYLE_BASE if style else RELATIVE_NON_STYLE_BASE
        prio = base + (MAX_PARENT_LEVEL - parent_level(source)) * 100 - other_level
        return Classification(source, prio, "parent_relative_style" if style else "parent_relative")

    # 5. Same-directory relative paths
    if source.startswith("./"):
        level = segment_count(source)
        if style:
            return Classification(source, RELATIVE_STYLE_BASE - 1 - level, "sibling_relative_style")
        return Classification(source, DEFAULT_PRIORITY - 1 - level, "sibling_relative")

    return Classification(source, DEFAULT_PRIORITY, "default")


def classify(
    source: str,
    equal: Sequence[str] = (),
    dependencies: AbstractSet[str] = frozenset(),
    local: Sequence[str] = (),
) -> Priority:
    """Priority of an import source. Total over all strings."""
    return explain(source, equal, dependencies, local).priority


__all__ = [
    "EQUAL_BASE",
    "THIRD_PARTY_BASE",
    "ABSOLUTE_PATH_BASE",
    "RELATIVE_NON_STYLE_BASE",
    "RELATIVE_STYLE_BASE",
    "DEFAULT_PRIORITY",
    "MAX_EQUAL_ENTRIES",
    "Category",
    "Classification",
    "classify",
    "explain",
    "is_style_file",
    "parent_level",
    "segment_count",
]
