"""Editing modes and how files are matched to them by name."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import PurePath


class _PatternKind(enum.Enum):
    SUFFIX = "suffix"
    NAME = "name"


@dataclass(frozen=True)
class FilenamePattern:
    """Matches a file either by the end of its name or by its whole name."""

    kind: _PatternKind
    text: str

    @classmethod
    def suffix(cls, suffix: str) -> FilenamePattern:
        return cls(_PatternKind.SUFFIX, suffix)

    @classmethod
    def name(cls, name: str) -> FilenamePattern:
        return cls(_PatternKind.NAME, name)

    def matches(self, filename: str | PurePath) -> bool:
        """Check the final component of ``filename`` against the pattern."""
        base = PurePath(filename).name
        if base in ("", ".."):
            return False
        if self.kind is _PatternKind.SUFFIX:
            return base.endswith(self.text)
        return base == self.text


@dataclass(eq=False)
class Mode:
    """A named editing mode; modes compare equal only to themselves."""

    name: str = "Plain"
    file_patterns: tuple[FilenamePattern, ...] = field(default_factory=tuple)

    def matches_by_filename(self, filename: str | PurePath) -> bool:
        return any(pattern.matches(filename) for pattern in self.file_patterns)


def _suffixes(*suffixes: str) -> tuple[FilenamePattern, ...]:
    return tuple(FilenamePattern.suffix(suffix) for suffix in suffixes)


LANGUAGE_MODES: tuple[Mode, ...] = (
    Mode("Shell Script", _suffixes(".sh")),
    Mode("Rust", _suffixes(".rs")),
    Mode(
        "Python",
        _suffixes(
            ".py", ".py3", ".py2", ".pyi", ".pyx", ".pyx.in", ".pxd",
            ".pxd.in", ".pxi", ".pxi.in", ".rpy", ".cpy",
        ),
    ),
    Mode("Javascript", _suffixes(".js")),
    Mode("HTML", _suffixes(".html", ".htm", ".xhtml", ".shtml")),
    Mode("JSON", _suffixes(".json", ".jsonl")),
    Mode("C", _suffixes(".c", ".h")),
    Mode(
        "C++",
        _suffixes(
            ".cpp", ".cc", ".cp", ".cxx", ".c++", ".C", ".h", ".hh",
            ".hpp", ".hxx", ".h++", ".inl", ".ipp",
        ),
    ),
    Mode("CSS", _suffixes(".css")),
    Mode("Markdown", _suffixes(".md")),
    Mode("Typescript", _suffixes(".ts")),
    Mode("Typescript TSX", _suffixes(".tsx")),
    Mode("Dockerfile", (FilenamePattern.name("Dockerfile"),)),
)

PLAIN_TEXT_MODE = Mode()


def find_by_filename(filename: str | PurePath) -> Mode:
    """Return the first mode whose patterns match the file, or the plain text mode."""
    return next(
        (mode for mode in LANGUAGE_MODES if mode.matches_by_filename(filename)),
        PLAIN_TEXT_MODE,
    )