"""
import-rules: classify, order and rewrite JavaScript/TypeScript import blocks.
"""

from .classifier import Classification, classify, explain
from .config import Settings, SortConfig, DepthConfig, load_config
from .conformance import OrderCheck, check_order
from .engine import fix_text, lint_paths, lint_text
from .errors import ImportRulesUserError, ConfigError, UnsupportedFileError
from .manifest import load_dependencies
from .sorter import prioritize, sort_imports
from .types import FileReport, Finding, Fix, ImportRecord, Violation

__all__ = [
    "Classification",
    "classify",
    "explain",
    "Settings",
    "SortConfig",
    "DepthConfig",
    "load_config",
    "OrderCheck",
    "check_order",
    "fix_text",
    "lint_paths",
    "lint_text",
    "ImportRulesUserError",
    "ConfigError",
    "UnsupportedFileError",
    "load_dependencies",
    "prioritize",
    "sort_imports",
    "FileReport",
    "Finding",
    "Fix",
    "ImportRecord",
    "Violation",
]
