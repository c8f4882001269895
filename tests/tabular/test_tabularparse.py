"""Tests for delimited text parsing and writing."""

import pytest

from worldmapidentity.tabular import parse, serialize


class TestParse:
    """Reader behavior on spreadsheet exports"""

    def test_empty_input(self):
        assert parse("") == []

    def test_simple_rows(self):
        assert parse("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_quoted_multiline_cell(self):
        """Line breaks inside quotes stay in the cell"""
        rows = parse('Name,Remark\nFrance,"Line1\nLine2"')
        assert len(rows) == 2
        assert rows[1][1] == "Line1\nLine2"

    def test_separator_inside_quotes(self):
        assert parse('"Korea, Republic of",Seoul') == [["Korea, Republic of", "Seoul"]]

    def test_doubled_quote_escape(self):
        assert parse('a,"say ""hi"""') == [["a", 'say "hi"']]

    @pytest.mark.parametrize("terminator", ["\n", "\r\n", "\r"])
    def test_row_terminators(self, terminator):
        text = f"a,b{terminator}c,d{terminator}"
        assert parse(text) == [["a", "b"], ["c", "d"]]

    def test_trailing_row_without_terminator(self):
        assert parse("a,b\nc,d")[-1] == ["c", "d"]

    def test_blank_lines_are_skipped(self):
        assert parse("a\n\n\nb\n") == [["a"], ["b"]]

    def test_trailing_empty_cell(self):
        assert parse("France,\n") == [["France", ""]]

    def test_crlf_inside_quotes_is_kept(self):
        assert parse('x,"1\r\n2"\r\n') == [["x", "1\r\n2"]]

    def test_unterminated_quote_consumes_rest(self):
        """Malformed quoting never raises"""
        rows = parse('a,"open\nstill open,b\nc')
        assert rows == [["a", "open\nstill open,b\nc"]]

    def test_quoted_empty_field_is_a_row(self):
        assert parse('""') == [[""]]

    def test_custom_separator(self):
        assert parse("a;b\n", sep=";") == [["a", "b"]]


class TestSerialize:
    """Companion writer"""

    def test_plain_cells_unquoted(self):
        assert serialize([["Name", "Remark"], ["France", "ok"]]) == "Name,Remark\nFrance,ok"

    def test_special_cells_quoted(self):
        out = serialize([["Korea, Republic of", 'say "hi"', "a\nb"]])
        assert out == '"Korea, Republic of","say ""hi""","a\nb"'

    def test_parse_reads_back_rows(self):
        rows = [
            ["Country/Region", "Remark"],
            ["France", "Line1\nLine2"],
            ["Korea, Republic of", 'quoted "name"'],
            ["Peru", ""],
            [""],
        ]
        assert parse(serialize(rows)) == rows

    def test_empty_rows_skipped(self):
        """A row with no cells has no text form; it is dropped"""
        assert serialize([["a"], [], ["b"]]) == "a\nb"
        assert parse(serialize([["a"], [], ["b"]])) == [["a"], ["b"]]
        assert serialize([[]]) == ""


def test_module_docstring_examples():
    """The module compiles and its documented examples hold"""
    import doctest

    from worldmapidentity.tabular import tabularparse

    result = doctest.testmod(tabularparse)
    assert result.attempted > 0
    assert result.failed == 0
