"""
Tests for the deep relative imports rule.
"""

from pathlib import Path

from importrules.depth import check_depth, depth_message, rooted_path
from tests.infrastructure import make_records

CWD = Path("/proj")
FILE = Path("/proj/src/a/b/c/d/view.js")


def test_rooted_path_resolves_against_file_directory():
    assert rooted_path("../../../../utils/x", FILE, CWD, "src") == "src/utils/x"
    assert rooted_path("../../lib", FILE, CWD, "src") == "src/a/b/lib"


def test_rooted_path_with_relative_filename():
    assert rooted_path("../../../../utils/x", Path("src/a/b/c/d/view.js"), CWD, "src") == "src/utils/x"


def test_rooted_path_other_root_dir():
    assert rooted_path("../../x", Path("/proj/app/one/two/f.ts"), CWD, "app") == "app/x"


def test_imports_within_limit_pass():
    records = make_records(["../../../x", "./y", "react"])
    assert check_depth(records, FILE, CWD, max_depth=3) == []


def test_imports_beyond_limit_are_flagged_with_fix():
    records = make_records(["react", "../../../../utils/x"])
    findings = check_depth(records, FILE, CWD, max_depth=3, root_dir="src")

    assert len(findings) == 1
    f = findings[0]
    assert f.rule == "deep-relative-imports"
    assert f.source == "../../../../utils/x"
    assert f.line == 1
    assert f.message == depth_message("../../../../utils/x", "src/utils/x")
    assert f.fix.start == records[1].source_start
    assert f.fix.end == records[1].source_end
    assert f.fix.replacement == "'src/utils/x'"


def test_zero_depth_flags_any_parent_traversal():
    records = make_records(["../x", "./y"])
    findings = check_depth(records, FILE, CWD, max_depth=0)
    assert [f.source for f in findings] == ["../x"]
