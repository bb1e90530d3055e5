import pytest

from zeekit.utils import (
    TAB_WIDTH,
    ensure_trailing_newline_with_content,
    grapheme_width,
    graphemes,
    strip_trailing_whitespace,
)


def test_tab_is_tab_width():
    assert grapheme_width("\t") == TAB_WIDTH


def test_ascii_width_is_one_column_per_char():
    assert grapheme_width("abc") == len("abc")


def test_wide_character_is_twice_ascii():
    assert grapheme_width("漢") == 2 * grapheme_width("a")


def test_combining_mark_adds_no_width():
    assert grapheme_width("e\u0301") == grapheme_width("e")


def test_tabs_inside_text_count_tab_width():
    assert grapheme_width("\t\t") == 2 * TAB_WIDTH


def test_graphemes_keep_combining_sequences_together():
    assert list(graphemes("e\u0301a")) == ["e\u0301", "a"]


def test_graphemes_treat_crlf_as_one():
    assert list(graphemes("\r\n")) == ["\r\n"]


@pytest.mark.parametrize("text", ["", "hello", "a\u0301b\r\nc", "👩\u200d💻 x"])
def test_graphemes_reassemble_text(text):
    assert "".join(graphemes(text)) == text


def test_strip_keeps_clean_text():
    text = "fn main() {}\n"
    assert strip_trailing_whitespace(text) == text


def test_strip_removes_trailing_spaces():
    assert strip_trailing_whitespace("let x = 1;   \n") == "let x = 1;\n"


def test_strip_removes_trailing_empty_lines():
    assert strip_trailing_whitespace("a\n\n\n") == "a\n"


def test_strip_appends_newline_after_content():
    assert strip_trailing_whitespace("abc") == "abc" + "\n"


@pytest.mark.parametrize(
    "text",
    ["a  \n b \t\n\n", "x\n  \n\ny\n\n", "one\r\ntwo  \r\n", "  \n\n"],
)
def test_strip_is_idempotent(text):
    once = strip_trailing_whitespace(text)
    assert strip_trailing_whitespace(once) == once


@pytest.mark.parametrize("text", ["a  \nb\t\n", "x\n  \ny  \n\n\n"])
def test_strip_leaves_no_space_before_newlines(text):
    result = strip_trailing_whitespace(text)
    assert result.endswith("\n")
    assert all(line == line.rstrip() for line in result.split("\n"))


def test_ensure_newline_on_empty_text():
    assert ensure_trailing_newline_with_content("") == "\n"


def test_ensure_newline_appends_when_missing():
    assert ensure_trailing_newline_with_content("abc") == "abc" + "\n"


def test_ensure_newline_keeps_existing():
    assert ensure_trailing_newline_with_content("abc\n") == "abc\n"