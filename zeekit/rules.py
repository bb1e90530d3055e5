"""Highlighting rules: scope patterns keyed by node selectors, compiled per language."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import regex

from zeekit.errors import RegexSyntaxError
from zeekit.selector import Selector, map_node_kind_names, parse

Scope = str


class ScopePattern:
    """Maps the text of a node to the scope it should be highlighted with."""

    def matches(self, content: str) -> Scope | None:
        """Return the scope for ``content``, or None when the pattern does not apply."""
        raise NotImplementedError


@dataclass(frozen=True)
class AllPattern(ScopePattern):
    """Applies one scope whatever the node's text."""

    scopes: Scope

    def matches(self, content: str) -> Scope | None:
        return self.scopes


@dataclass(frozen=True)
class ExactPattern(ScopePattern):
    """Applies a scope only when the node's text equals a given string."""

    exact: str
    scopes: Scope

    def matches(self, content: str) -> Scope | None:
        return self.scopes if content == self.exact else None


@dataclass(frozen=True)
class RegexPattern(ScopePattern):
    """Applies a scope when a regular expression matches somewhere in the node's text."""

    pattern: str
    scopes: Scope
    _compiled: Any = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        try:
            compiled = regex.compile(self.pattern)
        except regex.error as error:
            raise RegexSyntaxError(error) from None
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, content: str) -> Scope | None:
        return self.scopes if self._compiled.search(content) else None


@dataclass(frozen=True)
class PatternList(ScopePattern):
    """Tries each pattern in turn and uses the first that applies."""

    patterns: tuple[ScopePattern, ...] = ()

    def matches(self, content: str) -> Scope | None:
        for pattern in self.patterns:
            scope = pattern.matches(content)
            if scope is not None:
                return scope
        return None


def scope_pattern_from_json(value: Any) -> ScopePattern:
    """Build a scope pattern from its decoded JSON form."""
    if isinstance(value, str):
        return AllPattern(value)
    if isinstance(value, Mapping):
        scopes = value.get("scopes")
        if isinstance(scopes, str):
            exact = value.get("exact")
            if isinstance(exact, str):
                return ExactPattern(exact, scopes)
            pattern = value.get("match")
            if isinstance(pattern, str):
                return RegexPattern(pattern, scopes)
    if isinstance(value, list):
        return PatternList(tuple(scope_pattern_from_json(item) for item in value))
    raise ValueError(f"data did not match any scope pattern: {value!r}")


@dataclass(frozen=True)
class HighlightRule:
    """A set of selectors that all share one scope pattern."""

    selectors: tuple[Selector, ...]
    scope: ScopePattern


@dataclass
class HighlightRules:
    """Compiled highlighting rules for one language."""

    name: str
    node_id_to_selector_id: dict[int, int]
    rules: list[HighlightRule] = field(default_factory=list)

    def get_selector_node_id(self, node_kind_id: int) -> int:
        """Return the selector id of a node kind; unknown kinds get an id no rule uses."""
        return self.node_id_to_selector_id.get(
            node_kind_id, len(self.node_id_to_selector_id)
        )

    def matches(
        self,
        node_stack: Sequence[int],
        nth_children: Sequence[int],
        content: str,
    ) -> Scope | None:
        """Find the scope of the most specific rule matching a node and its ancestors.

        ``node_stack`` and ``nth_children`` run from the innermost node outwards.
        Closer matches win; at equal distance, the selector spanning more nodes wins.
        """
        if not node_stack:
            return None

        distance_to_match = sys.maxsize
        num_nodes_match = 0
        scope_found: Scope | None = None
        for rule in self.rules:
            rule_scope = rule.scope.matches(content)
            if rule_scope is None:
                continue

            for selector in rule.selectors:
                kinds = selector.node_kinds
                span = len(kinds)
                assert span > 0
                if span > len(node_stack):
                    continue

                for start in range(min(len(node_stack) - span, distance_to_match) + 1):
                    if tuple(node_stack[start : start + span]) != tuple(kinds):
                        continue

                    siblings = nth_children[start : start + span]
                    if any(
                        wanted >= 0 and wanted != actual
                        for wanted, actual in zip(selector.nth_children, siblings)
                    ):
                        continue

                    if start == distance_to_match and num_nodes_match > span:
                        break

                    distance_to_match = start
                    num_nodes_match = span
                    scope_found = rule_scope
                    break

        return scope_found


def build_node_to_selector_id_maps(
    node_kind_names: Iterable[str],
) -> tuple[dict[str, int], dict[int, int]]:
    """Give every distinct node kind name a selector id.

    ``node_kind_names`` lists the name of each node kind id in order; several ids
    may share a name and then share a selector id.
    """
    name_to_selector_id: dict[str, int] = {}
    id_to_selector_id: dict[int, int] = {}
    for node_id, node_name in enumerate(node_kind_names):
        selector_id = name_to_selector_id.setdefault(
            node_name, len(name_to_selector_id)
        )
        id_to_selector_id[node_id] = selector_id
    return name_to_selector_id, id_to_selector_id


@dataclass
class RawHighlightRules:
    """Highlighting rules as written: selector strings mapped to scope patterns."""

    name: str
    scopes: dict[str, ScopePattern] = field(default_factory=dict)

    @classmethod
    def from_json(cls, text: str) -> RawHighlightRules:
        """Decode rules from a JSON document."""
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise ValueError("highlighting rules must be a JSON object")
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("missing field `name`")
        raw_scopes = data.get("scopes", {})
        if not isinstance(raw_scopes, Mapping):
            raise ValueError("`scopes` must be a JSON object")
        scopes = {
            selector: scope_pattern_from_json(pattern)
            for selector, pattern in raw_scopes.items()
        }
        return cls(name=name, scopes=scopes)

    def compile(self, node_kind_names: Sequence[str]) -> HighlightRules:
        """Resolve selectors against a language's node kind names."""
        name_to_selector_id, id_to_selector_id = build_node_to_selector_id_maps(
            node_kind_names
        )
        rules = [
            HighlightRule(
                selectors=tuple(
                    map_node_kind_names(name_to_selector_id, raw)
                    for raw in parse(selector_text)
                ),
                scope=scope,
            )
            for selector_text, scope in self.scopes.items()
        ]
        return HighlightRules(
            name=self.name, node_id_to_selector_id=id_to_selector_id, rules=rules
        )