"""
Import statement extraction using Tree-sitter AST.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..types import ImportRecord
from .tree_sitter_support import TreeSitterDocument, Node

logger = logging.getLogger(__name__)


class ImportExtractor:
    """Collects top-level import statements of a document as ImportRecords."""

    def extract(self, doc: TreeSitterDocument) -> List[ImportRecord]:
        if doc.has_error():
            logger.debug("Syntax errors in document, imports may be incomplete")

        records: List[ImportRecord] = []
        for node, _capture in doc.query("imports"):
            rec = self._record_from_ast(doc, node, len(records))
            if rec is not None:
                records.append(rec)
        return records

    def _record_from_ast(self, doc: TreeSitterDocument, node: Node, index: int) -> Optional[ImportRecord]:
        source_node = self._find_source(node)
        if source_node is None:
            # import x = require('y') and similar forms carry no import source
            return None

        start, end = doc.get_node_range(node)
        source_start, source_end = doc.get_node_range(source_node)
        line_start = doc.text.rfind("\n", 0, start) + 1

        return ImportRecord(
            source=doc.get_node_text(source_node)[1:-1],
            original_index=index,
            text=doc.get_node_text(node),
            start=start,
            end=end,
            line=doc.text.count("\n", 0, start),
            column=start - line_start,
            source_start=source_start,
            source_end=source_end,
            node=node,
        )

    @staticmethod
    def _find_source(node: Node) -> Optional[Node]:
        source = node.child_by_field_name("source")
        if source is not None and source.type == "string":
            return source
        for child in node.children:
            if child.type == "string":
                return child
        return None


def extract_imports(doc: TreeSitterDocument) -> List[ImportRecord]:
    return ImportExtractor().extract(doc)


def comment_ranges(doc: TreeSitterDocument) -> List[Tuple[int, int]]:
    """Char ranges of top-level comments, in document order."""
    return [doc.get_node_range(node) for node, _capture in doc.query("comments")]


__all__ = ["ImportExtractor", "extract_imports", "comment_ranges"]
