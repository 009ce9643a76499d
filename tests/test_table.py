import pytest

from strawberry import table


def test_rows_and_fields():
    assert table.from_string("a\tb\nc\td\n") == [["a", "b"], ["c", "d"]]


def test_last_line_without_newline_is_kept():
    assert table.from_string("a\tb\nc") == [["a", "b"], ["c"]]


def test_trailing_empty_field_dropped_inner_kept():
    assert table.from_string("a\t\tb\t") == [["a", "", "b"]]


def test_blank_line_in_middle_is_empty_row():
    assert table.from_string("a\n\nb") == [["a"], [], ["b"]]


def test_empty_string_gives_no_rows():
    assert table.from_string("") == []


def test_custom_delimiter():
    assert table.from_string("x,y\n1,2", ",") == [["x", "y"], ["1", "2"]]


def test_tab_kept_when_delimiter_is_comma():
    assert table.from_string("x\ty,z", ",") == [["x\ty", "z"]]


def test_bad_delimiter_raises():
    with pytest.raises(ValueError):
        table.from_string("a", "::")


def test_from_file_matches_from_string(tmp_path):
    text = "name\tvalue\nalpha\t1\n"
    path = tmp_path / "data.tsv"
    path.write_text(text, encoding="utf-8")
    assert table.from_file(path) == table.from_string(text)


def test_from_file_missing_returns_none(tmp_path):
    assert table.from_file(tmp_path / "missing.tsv") is None