"""
JavaScript and TypeScript documents.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from tree_sitter import Language

from ..errors import UnsupportedFileError
from .tree_sitter_support import TreeSitterDocument

# Only statements directly under the program node form the import block
QUERIES: Dict[str, str] = {
    "imports": """
    (program (import_statement) @import)
    """,

    "comments": """
    (program (comment) @comment)
    """,
}

JS_EXTENSIONS = {"js", "jsx", "mjs", "cjs"}
TS_EXTENSIONS = {"ts", "mts", "cts"}
TSX_EXTENSIONS = {"tsx"}

SUPPORTED_EXTENSIONS = frozenset(JS_EXTENSIONS | TS_EXTENSIONS | TSX_EXTENSIONS)


class JavaScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        # TS and TSX have two different grammars in one package
        if self.ext in TSX_EXTENSIONS:
            return Language(tsts.language_tsx())
        return Language(tsts.language_typescript())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


def extension_of(filename: Path | str) -> str:
    return Path(filename).suffix.lstrip(".").lower()


def is_supported(filename: Path | str) -> bool:
    return extension_of(filename) in SUPPORTED_EXTENSIONS


def create_document(text: str, filename: Path | str) -> TreeSitterDocument:
    """Pick the grammar by file extension."""
    ext = extension_of(filename)
    if ext in JS_EXTENSIONS:
        return JavaScriptDocument(text, ext)
    if ext in TS_EXTENSIONS or ext in TSX_EXTENSIONS:
        return TypeScriptDocument(text, ext)
    raise UnsupportedFileError(f"Unsupported file type: {filename}")
