# tests/test_scrape.py

from __future__ import annotations

import pytest

from manuscript_build.errors import ParseError
from manuscript_build.scrape import parse_page_count, parse_word_count


def test_word_count_uses_total_line():
    out = "   300 text/01/a.mdown\n   200 text/02/b.mdown\n   500 total\n"
    assert parse_word_count(out) == 500


def test_word_count_single_file_has_no_total_line():
    assert parse_word_count("42 text/01/a.mdown\n") == 42


def test_word_count_without_total_line_fails():
    with pytest.raises(ParseError):
        parse_word_count("1 a.mdown\n2 b.mdown\n")


@pytest.mark.parametrize("out", ["", "\n\n", "wc: text: No such file or directory\n"])
def test_word_count_rejects_unexpected_output(out):
    with pytest.raises(ParseError):
        parse_word_count(out)


def test_page_count_takes_page_tree_root():
    data = (
        b"%PDF-1.4\n1 0 obj << /Type /Pages /Kids [3 0 R 4 0 R] /Count 212 >>\n"
        b"3 0 obj << /Type /Pages /Count 12 >>\n"
        b"9 0 obj << /Type /Outlines /Count -4 >>\n\x00\xff"
    )
    assert parse_page_count(data) == 212


def test_page_count_without_marker_fails():
    with pytest.raises(ParseError):
        parse_page_count(b"%PDF-1.4\nnothing here\n")
