"""
Source parsing for JavaScript/TypeScript files.
"""

from .imports import ImportExtractor, comment_ranges, extract_imports
from .languages import SUPPORTED_EXTENSIONS, create_document, is_supported
from .tree_sitter_support import TreeSitterDocument

__all__ = [
    "ImportExtractor",
    "extract_imports",
    "comment_ranges",
    "SUPPORTED_EXTENSIONS",
    "create_document",
    "is_supported",
    "TreeSitterDocument",
]
