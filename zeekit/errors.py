"""Errors raised while compiling highlighting rules."""

from __future__ import annotations


class HighlightError(Exception):
    """Base class for every highlighting rule error."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HighlightError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class SelectorSyntaxError(HighlightError):
    """A selector string could not be parsed."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Invalid selector syntax."


class NodeKindNotFoundError(HighlightError):
    """A selector names a node kind the language does not define."""

    def __init__(self, node_kind: str) -> None:
        super().__init__(node_kind)
        self.node_kind = node_kind

    def __str__(self) -> str:
        return f"Node kind `{self.node_kind}` does not exist in the supplied language."


class RegexSyntaxError(HighlightError):
    """A scope pattern holds a regular expression that does not compile."""

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Invalid regex syntax: {self.error}"