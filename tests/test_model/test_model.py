"""Tests for the rule tree and atomic rule models."""

import pytest

from atomicss.errors import AtomicssError, CompileError, NestedRuleError, ParseError
from atomicss.model import (
    AtomicRule,
    ConditionalBlock,
    Declaration,
    Rule,
    RuleTree,
    SourcePosition,
)


class TestSourcePosition:
    def test_str(self) -> None:
        assert str(SourcePosition(3, 11)) == "<css input>:3:11"
        assert str(SourcePosition(1, 2, "a.css")) == "a.css:1:2"


class TestDeclaration:
    def test_source_not_part_of_identity(self) -> None:
        assert Declaration("color", "blue", source=SourcePosition(1, 1)) == Declaration(
            "color", "blue"
        )

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Declaration("color", "blue").value = "red"  # type: ignore[misc]


class TestRule:
    def test_from_selector(self) -> None:
        rule = Rule.from_selector(" div ,span ")
        assert rule.selectors == ("div", "span")
        assert rule.selector == "div, span"
        assert rule.nodes == ()


class TestConditionalBlock:
    def test_label_and_prelude(self) -> None:
        block = ConditionalBlock("media", "(min-width: 30rem)")
        assert block.label == "media(min-width: 30rem)"
        assert block.prelude == "@media (min-width: 30rem)"

    def test_prelude_without_params(self) -> None:
        assert ConditionalBlock("document").prelude == "@document"


class TestRuleTree:
    def test_iteration(self) -> None:
        decl = Declaration("color", "blue")
        tree = RuleTree(nodes=(decl,))
        assert list(tree) == [decl]
        assert len(tree) == 1


class TestAtomicRule:
    def test_context_labels(self) -> None:
        rule = AtomicRule(
            class_name="_aaaabbbb",
            context=(ConditionalBlock("media", "print"), ConditionalBlock("supports", "(gap: 0)")),
            selector="._aaaabbbb",
            declaration=Declaration("gap", "0"),
        )
        assert rule.context_labels == ("mediaprint", "supports(gap: 0)")


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(NestedRuleError, CompileError)
        assert issubclass(CompileError, AtomicssError)

    def test_parse_error_shares_the_base(self) -> None:
        assert issubclass(ParseError, AtomicssError)
        assert not issubclass(ParseError, CompileError)

    def test_parse_error_position(self) -> None:
        err = ParseError("Unknown word 'color blue'", SourcePosition(2, 3, "a.css"))
        assert str(err) == "a.css:2:3: Unknown word 'color blue'"
        assert (err.line, err.column) == (2, 3)
        assert err.reason == "Unknown word 'color blue'"

    def test_parse_error_without_position(self) -> None:
        err = ParseError("Unexpected end of input")
        assert str(err) == "Unexpected end of input"
        assert err.line is None and err.column is None

    def test_message_with_position(self) -> None:
        err = NestedRuleError("span", SourcePosition(3, 11))
        assert str(err) == "atomicify-rules: <css input>:3:11: Nested rules are not allowed."
        assert err.reason == "Nested rules are not allowed."

    def test_message_without_position(self) -> None:
        err = CompileError("boom")
        assert str(err) == "atomicify-rules: boom"
        assert err.source is None
