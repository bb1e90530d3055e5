"""Text helpers: grapheme iteration, display widths and whitespace cleanup."""

from __future__ import annotations

from collections.abc import Iterator

import regex
from wcwidth import wcwidth

TAB_WIDTH = 4

_GRAPHEME = regex.compile(r"\X")
_LINE_BREAKS = frozenset("\n\x0b\x0c\r\x85\u2028\u2029")
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def grapheme_width(text: str) -> int:
    """Return the number of terminal columns a grapheme occupies."""
    if text == "\t":
        return TAB_WIDTH
    return text.count("\t") * TAB_WIDTH + sum(max(wcwidth(char), 0) for char in text)


def graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text``."""
    for match in _GRAPHEME.finditer(text):
        yield match.group()


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def _line_starts(chars: list[str]) -> list[int]:
    starts = [0]
    index = 0
    while index < len(chars):
        char = chars[index]
        if char == "\r" and index + 1 < len(chars) and chars[index + 1] == "\n":
            index += 2
            starts.append(index)
            continue
        index += 1
        if char in _LINE_BREAKS:
            starts.append(index)
    return starts


def strip_trailing_whitespace(text: str) -> str:
    """Remove whitespace at the end of lines and empty lines at the end of the text."""
    chars = list(text)
    trailing_empty_line = True
    for line_index in reversed(range(len(_line_starts(chars)))):
        starts = _line_starts(chars)
        start = starts[line_index]
        end = starts[line_index + 1] if line_index + 1 < len(starts) else len(chars)
        if start == end:
            continue

        cursor = end - 1
        while cursor > start:
            cursor -= 1
            if _is_whitespace(chars[cursor]):
                del chars[cursor]
            else:
                trailing_empty_line = False
                break
        if trailing_empty_line and cursor == start:
            del chars[start:]

    if len(chars) > 1 and chars[-1] != "\n":
        chars.append("\n")
    return "".join(chars)


def ensure_trailing_newline_with_content(text: str) -> str:
    """Return ``text`` ending in a newline; empty text becomes a single newline."""
    if not text or text[-1] != "\n":
        return text + "\n"
    return text