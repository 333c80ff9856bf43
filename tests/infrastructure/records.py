"""
ImportRecord builders that mimic a parsed file without tree-sitter.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from importrules.types import ImportRecord


def make_records(sources: Sequence[str]) -> List[ImportRecord]:
    """
    One side-effect import per line: import '<source>';

    Offsets match the text "\\n".join(rec.text for rec in records).
    """
    records = []
    offset = 0
    for i, source in enumerate(sources):
        text = f"import '{source}';"
        source_start = offset + len("import ")
        records.append(ImportRecord(
            source=source,
            original_index=i,
            text=text,
            start=offset,
            end=offset + len(text),
            line=i,
            column=0,
            source_start=source_start,
            source_end=source_start + len(source) + 2,
        ))
        offset += len(text) + 1
    return records


def sources_of(records: Iterable[ImportRecord]) -> List[str]:
    return [rec.source for rec in records]
