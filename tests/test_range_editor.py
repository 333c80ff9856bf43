import pytest

from importrules.range_edits import RangeEditor, TextRange
from importrules.types import Fix


def test_multiple_edits_reverse_order_and_stats():
    text = "abcdef\n123456\nXYZ\n"
    ed = RangeEditor(text)

    ed.add_replacement(2, 5, "C", edit_type="sort-imports")
    ed.add_replacement(0, 0, ">>> ", edit_type=None)
    start_del = text.index("456")
    ed.add_replacement(start_del, start_del + len("456\n"), "", edit_type="sort-imports")

    result, stats = ed.apply_edits()

    assert result == ">>> abCf\n123XYZ\n"
    assert stats["edits_applied"] == 3
    assert stats["sort-imports"] == 2


def test_overlapping_edits_first_wins_on_equal_width():
    ed = RangeEditor("hello world")
    assert ed.add_replacement(0, 5, "hi", edit_type="first")
    assert not ed.add_replacement(1, 6, "HELLO", edit_type="second")

    result, stats = ed.apply_edits()
    assert result == "hi world"
    assert stats["edits_applied"] == 1


def test_wider_edit_absorbs_narrower():
    text = "import a from '../../x';\nimport b from 'b';"
    ed = RangeEditor(text)
    ed.add_fix(Fix(14, 23, "'src/x'"), "deep-relative-imports")
    ed.add_fix(Fix(0, len(text), "SORTED"), "sort-imports")

    result, _ = ed.apply_edits()
    assert result == "SORTED"


def test_narrower_edit_inside_wider_is_skipped():
    ed = RangeEditor("0123456789")
    ed.add_replacement(0, 10, "X", None)
    assert not ed.add_replacement(2, 4, "Y", None)
    assert ed.apply_edits()[0] == "X"


def test_unicode_offsets_are_characters():
    text = "héllo wörld"
    ed = RangeEditor(text)
    ed.add_replacement(6, 11, "world", None)
    assert ed.apply_edits()[0] == "héllo world"


def test_no_edits_returns_original():
    result, stats = RangeEditor("same").apply_edits()
    assert result == "same"
    assert stats["edits_applied"] == 0


def test_out_of_bounds_edit_fails_validation():
    ed = RangeEditor("abc")
    ed.add_replacement(1, 10, "x", None)
    with pytest.raises(ValueError):
        ed.apply_edits()


def test_invalid_range():
    with pytest.raises(ValueError):
        TextRange(5, 2)
