"""
Tests for reading declared dependencies from package.json.
"""

import logging

from importrules.manifest import load_dependencies
from tests.infrastructure import write, write_json


def test_dependencies_and_dev_dependencies(tmpproj):
    assert load_dependencies(tmpproj) == frozenset({"react", "lodash"})


def test_missing_manifest(tmp_path):
    assert load_dependencies(tmp_path) == frozenset()


def test_manifest_without_sections(tmp_path):
    write_json(tmp_path / "package.json", {"name": "x"})
    assert load_dependencies(tmp_path) == frozenset()


def test_malformed_manifest_degrades_to_empty(tmp_path, caplog):
    write(tmp_path / "package.json", "{ not json")
    with caplog.at_level(logging.WARNING, logger="importrules"):
        assert load_dependencies(tmp_path) == frozenset()
    assert "unreadable manifest" in caplog.text


def test_non_object_manifest(tmp_path, caplog):
    write_json(tmp_path / "package.json", ["react"])
    with caplog.at_level(logging.WARNING, logger="importrules"):
        assert load_dependencies(tmp_path) == frozenset()
    assert "not an object" in caplog.text


def test_invalid_section_is_skipped(tmp_path, caplog):
    write_json(tmp_path / "package.json", {
        "dependencies": ["react"],
        "devDependencies": {"vitest": "^1.0.0"},
    })
    with caplog.at_level(logging.WARNING, logger="importrules"):
        assert load_dependencies(tmp_path) == frozenset({"vitest"})
    assert "'dependencies'" in caplog.text
