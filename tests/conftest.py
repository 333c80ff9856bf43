import logging
import textwrap
from pathlib import Path

import pytest

from importrules.config import Settings
from tests.infrastructure import write, write_json


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Small JS project: package.json, .importrules.yaml and an unsorted source file."""
    root = tmp_path
    write_json(root / "package.json", {
        "name": "demo",
        "dependencies": {"react": "^18.2.0"},
        "devDependencies": {"lodash": "^4.17.21"},
    })
    write(
        root / ".importrules.yaml",
        textwrap.dedent("""
        sort:
          equal: ["./polyfills"]
          local: ["components"]
        depth:
          max_depth: 2
        """).strip() + "\n",
    )
    write(
        root / "src" / "app.js",
        textwrap.dedent("""
        import { helper } from './helper';
        import React from 'react';
        import './polyfills';

        export const App = () => helper(React);
        """).lstrip(),
    )
    write(root / "src" / "sorted.js", "import React from 'react';\nimport { helper } from './helper';\n")
    return root


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    # main() installs a stderr handler bound to the captured stream of one test
    yield
    logger = logging.getLogger("importrules")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
