"""Lark Transformer that converts a CSS-like parse tree into a RuleTree."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from atomicss.compiler.selectors import split_selector_list
from atomicss.errors import ParseError
from atomicss.model.tree import (
    Comment,
    ConditionalBlock,
    Declaration,
    Node,
    Rule,
    RuleTree,
    SourcePosition,
    UnknownNode,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

DEFAULT_SOURCE_NAME = "<css input>"

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_AT_RULE_RE = re.compile(r"@(?P<name>[A-Za-z-]+)\s*(?P<params>.*)", re.DOTALL)


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into rule tree nodes."""

    def __init__(self, source_name: str = DEFAULT_SOURCE_NAME) -> None:
        super().__init__()
        self.source_name = source_name

    def _position(self, token: Token) -> SourcePosition:
        return SourcePosition(token.line, token.column, self.source_name)

    def declaration(self, items: list[Token]) -> Declaration:
        token = items[0]
        prop, sep, value = str(token).partition(":")
        prop = prop.strip()
        if not sep or not prop:
            raise ParseError(f"Unknown word {str(token).strip()!r}", self._position(token))
        important = bool(_IMPORTANT_RE.search(value))
        if important:
            value = _IMPORTANT_RE.sub("", value)
        return Declaration(
            prop=prop,
            value=value.strip(),
            important=important,
            source=self._position(token),
        )

    def rule(self, items: list[object]) -> Rule:
        token = items[0]
        assert isinstance(token, Token)
        return Rule(
            selectors=split_selector_list(str(token)),
            nodes=tuple(items[1:]),  # type: ignore[arg-type]
            source=self._position(token),
        )

    def at_rule(self, items: list[object]) -> ConditionalBlock:
        token = items[0]
        assert isinstance(token, Token)
        match = _AT_RULE_RE.match(str(token).strip())
        assert match is not None
        return ConditionalBlock(
            name=match.group("name"),
            params=match.group("params").strip(),
            nodes=tuple(items[1:]),  # type: ignore[arg-type]
            source=self._position(token),
        )

    def at_statement(self, items: list[Token]) -> UnknownNode:
        token = items[0]
        match = _AT_RULE_RE.match(str(token))
        name = match.group("name") if match else "atrule"
        return UnknownNode(
            kind=f"@{name}", text=str(token).strip(), source=self._position(token)
        )

    def comment(self, items: list[Token]) -> Comment:
        token = items[0]
        return Comment(text=str(token)[2:-2].strip(), source=self._position(token))

    def start(self, items: list[Node]) -> RuleTree:
        return RuleTree(nodes=tuple(items))


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_css(source: str, source_name: str = DEFAULT_SOURCE_NAME) -> RuleTree:
    """Parse CSS-like source text into a RuleTree."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        # Lark exceptions carry line/column when the failure is positional;
        # an unexpected end of input reports -1.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        position = None
        if isinstance(line, int) and line > 0 and isinstance(column, int):
            position = SourcePosition(line, column, source_name)
        raise ParseError(str(e), position) from e
    try:
        return CssTransformer(source_name).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
