"""
Tests for the quote-aware CSV tokenizer.
"""

from __future__ import annotations

from data_prep.csv_parser import parse_csv, split_line


def test_quoted_delimiter_is_not_split():
    assert parse_csv('a,"b,c",d') == [["a", "b,c", "d"]]


def test_blank_and_whitespace_lines_dropped():
    assert parse_csv("a,b\n\n  \n1,2") == [["a", "b"], ["1", "2"]]


def test_padded_line_with_content_is_kept():
    # only blank or whitespace-only lines are dropped; " c " still carries a field
    assert parse_csv("a,b\n\n c \n1,2") == [["a", "b"], ["c"], ["1", "2"]]
    assert parse_csv("a,b\n \t \n1,2") == [["a", "b"], ["1", "2"]]


def test_fields_are_trimmed():
    assert split_line("  x ,  y  ,z") == ["x", "y", "z"]


def test_crlf_line_endings():
    assert parse_csv("Age,LoanAmount\r\n30,1000\r\n") == [["Age", "LoanAmount"], ["30", "1000"]]


def test_doubled_quotes_emit_nothing():
    assert split_line('a,"say ""hi""",b') == ["a", "say hi", "b"]


def test_unterminated_quote_swallows_rest_of_line():
    assert split_line('a,"b,c') == ["a", "b,c"]


def test_empty_fields_preserved():
    assert split_line("a,,c,") == ["a", "", "c", ""]


def test_empty_text_gives_no_rows():
    assert parse_csv("") == []
    assert parse_csv("\n\n   \n") == []


def test_ragged_rows_are_kept():
    assert parse_csv("a,b,c\n1\n1,2,3,4") == [["a", "b", "c"], ["1"], ["1", "2", "3", "4"]]
