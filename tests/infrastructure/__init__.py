"""
Shared test infrastructure for import-rules.

Modules:
- file_utils: creating files and small projects
- records: building ImportRecord lists without a parser
- config_builders: Settings for individual rules
"""

from .file_utils import write, write_json
from .records import make_records, sources_of
from .config_builders import sort_settings, depth_settings

__all__ = ["write", "write_json", "make_records", "sources_of", "sort_settings", "depth_settings"]
