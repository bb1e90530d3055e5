import pytest

from zeekit.errors import NodeKindNotFoundError, RegexSyntaxError, SelectorSyntaxError
from zeekit.rules import (
    AllPattern,
    ExactPattern,
    PatternList,
    RawHighlightRules,
    RegexPattern,
    build_node_to_selector_id_maps,
    scope_pattern_from_json,
)

NODE_KINDS = ["source_file", "function", "identifier", "string", "pair", "identifier"]


def compiled(scopes_json):
    text = '{"name": "Test", "scopes": ' + scopes_json + "}"
    return RawHighlightRules.from_json(text).compile(NODE_KINDS)


def ids(rules, *names):
    return [rules.get_selector_node_id(NODE_KINDS.index(name)) for name in names]


def test_deserialize_no_scopes():
    actual = RawHighlightRules.from_json('{"name": "Rust"}')
    assert actual.name == "Rust"
    assert actual.scopes == {}


def test_deserialize_all_scope_types():
    style_str = """{
        "name": "Rust",
        "scopes": {
            "type_identifier": "support.type",
            "\\"let\\"": {"exact": "let", "scopes": "keyword.control" }
        }
    }"""
    actual = RawHighlightRules.from_json(style_str)
    assert actual.name == "Rust"
    assert actual.scopes == {
        "type_identifier": AllPattern("support.type"),
        '"let"': ExactPattern("let", "keyword.control"),
    }


def test_deserialize_regex_list():
    pattern = scope_pattern_from_json(
        [{"match": "^[A-Z\\d_]{2,}$", "scopes": "constant.other"}]
    )
    assert pattern == PatternList((RegexPattern("^[A-Z\\d_]{2,}$", "constant.other"),))


def test_scope_pattern_rejects_unknown_shape():
    with pytest.raises(ValueError):
        scope_pattern_from_json({"scopes": "x"})


def test_invalid_regex_raises():
    with pytest.raises(RegexSyntaxError):
        RegexPattern("(", "x")


def test_pattern_matching():
    assert AllPattern("a").matches("anything") == "a"
    assert ExactPattern("let", "kw").matches("let") == "kw"
    assert ExactPattern("let", "kw").matches("lets") is None
    regex_pattern = RegexPattern("^[A-Z\\d_]{2,}$", "constant.other")
    assert regex_pattern.matches("MAX_SIZE") == "constant.other"
    assert regex_pattern.matches("x") is None
    listed = PatternList((ExactPattern("self", "self"), AllPattern("fallback")))
    assert listed.matches("self") == "self"
    assert listed.matches("other") == "fallback"


def test_build_maps_share_ids_for_duplicate_names():
    by_name, by_id = build_node_to_selector_id_maps(NODE_KINDS)
    assert len(by_name) == 5
    assert by_id[2] == by_id[5] == by_name["identifier"]
    assert len(set(by_name.values())) == len(by_name)


def test_unknown_node_kind_id_gets_unused_selector_id():
    rules = compiled("{}")
    assert rules.get_selector_node_id(1000) == 5
    assert rules.get_selector_node_id(5) == rules.get_selector_node_id(2)


def test_compile_unknown_node_kind():
    with pytest.raises(NodeKindNotFoundError) as info:
        compiled('{"missing": "x"}')
    assert info.value == NodeKindNotFoundError("missing")


def test_compile_bad_selector():
    with pytest.raises(SelectorSyntaxError):
        compiled('{"": "x"}')


def test_more_specific_selector_wins():
    for scopes in (
        '{"identifier": "variable", "function > identifier": "entity.name.function"}',
        '{"function > identifier": "entity.name.function", "identifier": "variable"}',
    ):
        rules = compiled(scopes)
        stack = ids(rules, "identifier", "function", "source_file")
        assert rules.matches(stack, [0, 0, 0], "main") == "entity.name.function"


def test_closer_match_wins():
    rules = compiled('{"source_file": "outer", "string": "string.quoted"}')
    stack = ids(rules, "string", "pair", "source_file")
    assert rules.matches(stack, [0, 0, 0], '"a"') == "string.quoted"
    stack = ids(rules, "pair", "source_file")
    assert rules.matches(stack, [0, 0], "x") == "outer"


def test_nth_child_constraint():
    rules = compiled('{"pair > string:nth-child(0)": "key"}')
    stack = ids(rules, "string", "pair")
    assert rules.matches(stack, [0, 0], '"k"') == "key"
    assert rules.matches(stack, [1, 0], '"v"') is None


def test_content_pattern_filters_rules():
    rules = compiled(
        '{"identifier": [{"match": "^[A-Z\\\\d_]{2,}$", "scopes": "constant.other"}]}'
    )
    stack = ids(rules, "identifier")
    assert rules.matches(stack, [0], "FOO_1") == "constant.other"
    assert rules.matches(stack, [0], "foo") is None


def test_empty_stack_matches_nothing():
    rules = compiled('{"identifier": "variable"}')
    assert rules.matches([], [], "x") is None