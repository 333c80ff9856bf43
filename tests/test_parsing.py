"""
Tests for import extraction with Tree-sitter.
"""

import textwrap

import pytest

from importrules.errors import UnsupportedFileError
from importrules.parsing import comment_ranges, create_document, extract_imports, is_supported
from importrules.parsing.languages import JavaScriptDocument, TypeScriptDocument
from tests.infrastructure import sources_of


def _imports(code: str, filename: str = "a.js"):
    return extract_imports(create_document(textwrap.dedent(code).lstrip(), filename))


class TestJavaScript:

    def test_sources_in_document_order(self):
        records = _imports("""
        import React from 'react';
        import { a, b as c } from "./a";
        import * as path from 'path';
        import './styles.css';
        """)
        assert sources_of(records) == ["react", "./a", "path", "./styles.css"]
        assert [r.original_index for r in records] == [0, 1, 2, 3]

    def test_offsets_and_text(self):
        code = "const x = 1;\nimport React from 'react';\n"
        doc = create_document(code, "x.js")
        [rec] = extract_imports(doc)

        assert rec.text == "import React from 'react';"
        assert rec.start == code.index("import")
        assert rec.end == rec.start + len(rec.text)
        assert rec.line == 1
        assert rec.column == 0
        assert code[rec.source_start:rec.source_end] == "'react'"

    def test_only_top_level_statements(self):
        records = _imports("""
        import a from 'a';
        async function load() {
          return import('lazy');
        }
        export { b } from 'b';
        """)
        assert sources_of(records) == ["a"]

    def test_no_imports(self):
        assert _imports("const x = 1;\n") == []

    def test_non_ascii_text_before_imports(self):
        code = "// héllo wörld\nimport b from 'b';\n"
        [rec] = extract_imports(create_document(code, "u.mjs"))
        assert rec.start == code.index("import")
        assert code[rec.start:rec.end] == "import b from 'b';"

    def test_top_level_comment_ranges(self):
        code = "// head\nimport 'a'; /* tail */\nfunction f() {\n  // inner\n}\n"
        doc = create_document(code, "x.js")

        assert [code[s:e] for s, e in comment_ranges(doc)] == ["// head", "/* tail */"]


class TestTypeScript:

    def test_type_imports(self):
        records = _imports("""
        import type { Props } from './types';
        import { Component } from '@angular/core';
        """, "c.ts")
        assert sources_of(records) == ["./types", "@angular/core"]

    def test_require_import_is_skipped(self):
        records = _imports("""
        import fs = require('fs');
        import { x } from './x';
        """, "c.ts")
        assert sources_of(records) == ["./x"]

    def test_tsx(self):
        records = _imports("""
        import React from 'react';
        import { Button } from 'components/Button';

        export const App = () => <Button />;
        """, "App.tsx")
        assert sources_of(records) == ["react", "components/Button"]


class TestDocumentSelection:

    @pytest.mark.parametrize("name, cls", [
        ("a.js", JavaScriptDocument),
        ("a.jsx", JavaScriptDocument),
        ("a.mjs", JavaScriptDocument),
        ("a.cjs", JavaScriptDocument),
        ("a.ts", TypeScriptDocument),
        ("a.mts", TypeScriptDocument),
        ("A.TSX", TypeScriptDocument),
    ])
    def test_grammar_by_extension(self, name, cls):
        assert isinstance(create_document("", name), cls)
        assert is_supported(name)

    def test_unsupported_extension(self):
        assert not is_supported("style.css")
        with pytest.raises(UnsupportedFileError):
            create_document("", "style.css")
