"""Tests for path rendering and trimming."""

from ringpath.path import format_path, trim_to_end


def test_format_path_empty():
    assert format_path([]) == "[]"


def test_format_path_none():
    assert format_path(None) == "null"


def test_format_path_labels():
    assert format_path(["A", "C", "B"]) == "[A, C, B]"
    assert format_path(("A",)) == "[A]"


def test_format_path_unset_slots():
    assert format_path(("A", "B", None)) == "[A, B, ]"
    assert format_path(("A", "B", None, None)) == "[A, B, , ]"


def test_trim_to_end():
    assert trim_to_end(("A", "B", None), "B") == ("A", "B")
    assert trim_to_end(("A", "C", "B"), "B") == ("A", "C", "B")


def test_trim_to_end_first_occurrence():
    assert trim_to_end(("A", "B", "A", "B"), "B") == ("A", "B")


def test_trim_to_end_missing():
    assert trim_to_end(("A", "X", "Y"), "B") is None
    assert trim_to_end((), "B") is None
