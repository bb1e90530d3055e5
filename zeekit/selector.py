"""Parsing of CSS-like node selectors used by highlighting rules."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from zeekit.errors import NodeKindNotFoundError, SelectorSyntaxError

NTH_CHILD_ANY = -1
_NTH_CHILD_MAX = 2**15 - 1

_MULTISPACE = " \t\r\n"
_DIGITS = "0123456789"
_NTH_CHILD_OPEN = ":nth-child("


@dataclass(frozen=True)
class NodeSelectorRaw:
    """One step of a selector: a node kind and an optional sibling index."""

    node_kind: str
    nth_child: int | None = None


@dataclass(frozen=True)
class SelectorRaw:
    """A chain of node selectors, outermost first."""

    node_selectors: tuple[NodeSelectorRaw, ...] = ()


@dataclass(frozen=True)
class Selector:
    """A compiled selector: node kind ids and nth-child constraints, innermost first."""

    node_kinds: tuple[int, ...]
    nth_children: tuple[int, ...]


class _Fail(Exception):
    """Internal signal that a parser did not match."""


def _multispace0(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _MULTISPACE:
        pos += 1
    return pos


def _expect(text: str, pos: int, literal: str) -> int:
    if text.startswith(literal, pos):
        return pos + len(literal)
    raise _Fail


def _quoted_body(text: str, pos: int) -> int:
    """Consume characters up to an unescaped quote; escapes are kept verbatim."""
    start = pos
    while pos < len(text):
        char = text[pos]
        if char not in '\\"':
            while pos < len(text) and text[pos] not in '\\"':
                pos += 1
        elif char == "\\":
            if pos + 1 >= len(text) or text[pos + 1] not in '\\"':
                raise _Fail
            pos += 2
        else:
            if pos == start:
                raise _Fail
            return pos
    return pos


def _identifier(text: str, pos: int) -> tuple[int, str]:
    try:
        body_start = _expect(text, pos, '"')
        body_end = _quoted_body(text, body_start)
        after = _expect(text, body_end, '"')
        return after, text[body_start:body_end]
    except _Fail:
        pass
    end = pos
    while end < len(text) and (text[end].isalnum() or text[end] in "_-"):
        end += 1
    if end == pos:
        raise _Fail
    return end, text[pos:end]


def _node_selector(text: str, pos: int) -> tuple[int, NodeSelectorRaw]:
    pos = _multispace0(text, pos)
    pos, name = _identifier(text, pos)
    nth_child = None
    if text.startswith(_NTH_CHILD_OPEN, pos):
        digits_start = pos + len(_NTH_CHILD_OPEN)
        digits_end = digits_start
        while digits_end < len(text) and text[digits_end] in _DIGITS:
            digits_end += 1
        if digits_end > digits_start and text.startswith(")", digits_end):
            nth_child = int(text[digits_start:digits_end])
            pos = digits_end + 1
    return pos, NodeSelectorRaw(name, nth_child)


def _selector(text: str, pos: int) -> tuple[int, SelectorRaw]:
    try:
        pos, node = _node_selector(text, pos)
    except _Fail:
        return pos, SelectorRaw()
    nodes = [node]
    while True:
        separator = _multispace0(text, pos)
        if not text.startswith(">", separator):
            break
        try:
            next_pos, node = _node_selector(text, separator + 1)
        except _Fail:
            break
        nodes.append(node)
        pos = next_pos
    return pos, SelectorRaw(tuple(nodes))


def _selectors(text: str, pos: int) -> tuple[int, list[SelectorRaw]]:
    next_pos, selector = _selector(text, pos)
    if next_pos == pos:
        raise _Fail
    result = [selector]
    pos = next_pos
    while True:
        separator = _multispace0(text, pos)
        if not text.startswith(",", separator):
            return pos, result
        pos, selector = _selector(text, separator + 1)
        result.append(selector)


def parse_selectors(text: str) -> tuple[str, list[SelectorRaw]]:
    """Parse a comma separated selector list; return the unparsed rest and the selectors."""
    try:
        pos, selectors = _selectors(text, 0)
    except _Fail:
        raise SelectorSyntaxError() from None
    return text[pos:], selectors


def parse_node_selector(text: str) -> tuple[str, NodeSelectorRaw]:
    """Parse a single node selector; return the unparsed rest and the node selector."""
    try:
        pos, node = _node_selector(text, 0)
    except _Fail:
        raise SelectorSyntaxError() from None
    return text[pos:], node


def parse_identifier(text: str) -> tuple[str, str]:
    """Parse a bare or quoted node kind name; return the unparsed rest and the name."""
    try:
        pos, name = _identifier(text, 0)
    except _Fail:
        raise SelectorSyntaxError() from None
    return text[pos:], name


def parse(text: str) -> list[SelectorRaw]:
    """Parse a selector list, dropping empty selectors such as after a trailing comma."""
    _, selectors = parse_selectors(text)
    return [selector for selector in selectors if selector.node_selectors]


def map_node_kind_names(
    node_kind_id_for_name: Mapping[str, int], selector: SelectorRaw
) -> Selector:
    """Resolve node kind names to ids, ordering them from the innermost node outwards."""
    node_kinds: list[int] = []
    nth_children: list[int] = []
    for node in reversed(selector.node_selectors):
        try:
            node_kinds.append(node_kind_id_for_name[node.node_kind])
        except KeyError:
            raise NodeKindNotFoundError(node.node_kind) from None
        if node.nth_child is None:
            nth_children.append(NTH_CHILD_ANY)
        elif node.nth_child > _NTH_CHILD_MAX:
            raise ValueError(f"nth-child index {node.nth_child} is too large")
        else:
            nth_children.append(node.nth_child)
    return Selector(tuple(node_kinds), tuple(nth_children))