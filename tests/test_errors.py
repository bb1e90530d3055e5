import pytest
import regex

from zeekit.errors import (
    HighlightError,
    NodeKindNotFoundError,
    RegexSyntaxError,
    SelectorSyntaxError,
)


def test_selector_syntax_message():
    assert str(SelectorSyntaxError()) == "Invalid selector syntax."


def test_node_kind_not_found_message_and_attribute():
    error = NodeKindNotFoundError("identifier")
    assert error.node_kind == "identifier"
    assert str(error) == (
        "Node kind `identifier` does not exist in the supplied language."
    )


def test_regex_syntax_message_wraps_original():
    with pytest.raises(regex.error) as caught:
        regex.compile("(")
    error = RegexSyntaxError(caught.value)
    assert error.error is caught.value
    assert str(error) == f"Invalid regex syntax: {caught.value}"


def test_errors_compare_by_value():
    assert NodeKindNotFoundError("pair") == NodeKindNotFoundError("pair")
    assert not NodeKindNotFoundError("pair") == NodeKindNotFoundError("string")
    assert SelectorSyntaxError() == SelectorSyntaxError()
    assert not SelectorSyntaxError() == NodeKindNotFoundError("pair")


@pytest.mark.parametrize(
    "error",
    [SelectorSyntaxError(), NodeKindNotFoundError("pair")],
)
def test_all_errors_share_a_base(error):
    with pytest.raises(HighlightError) as caught:
        raise error
    assert caught.value == error