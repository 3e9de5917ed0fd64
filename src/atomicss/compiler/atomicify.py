"""Atomic rule compiler: one rule per declaration, one class per rule.

Preconditions:

1. No nested rules. Rules inside rules must be flattened before
   compiling; a nested rule raises :class:`NestedRuleError` rather than
   producing a wrong group hash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator

from atomicss.compiler.naming import encode
from atomicss.compiler.selectors import normalize_selector, replace_self_reference
from atomicss.config import DEFAULT_CONFIG, AtomicConfig
from atomicss.errors import NestedRuleError
from atomicss.model.atomic import AtomicRule
from atomicss.model.tree import (
    Comment,
    ConditionalBlock,
    Declaration,
    Node,
    Rule,
    RuleTree,
    UnknownNode,
)

__all__ = ["AtomicCompiler", "ClassNameCollector", "compile_tree"]

logger = logging.getLogger(__name__)

ClassNameCallback = Callable[[str], None]


@dataclass
class ClassNameCollector:
    """Observer that records emitted class names in emission order."""

    names: list[str] = field(default_factory=list)

    def __call__(self, class_name: str) -> None:
        self.names.append(class_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def unique(self) -> list[str]:
        """Distinct class names, first occurrence order."""
        return list(dict.fromkeys(self.names))


class AtomicCompiler:
    """Transform a rule tree into atomic rules.

    When a *callback* is given it is called with every created class name,
    in the same order the atomic rules are returned.

    Top-level at-rules that cannot be atomicized (``@keyframes``,
    ``@font-face``, ``@import``) are collected in :attr:`passthrough` by the
    last :meth:`compile` call so they can be shipped unchanged.
    """

    def __init__(
        self,
        config: AtomicConfig = DEFAULT_CONFIG,
        callback: ClassNameCallback | None = None,
        sort_shorthand: bool = False,
    ) -> None:
        self.config = config
        self.callback = callback
        self.sort_shorthand = sort_shorthand
        self.passthrough: list[Node] = []

    def compile(self, tree: RuleTree | Iterable[Node]) -> list[AtomicRule]:
        nodes = tree.nodes if isinstance(tree, RuleTree) else tuple(tree)
        if self.sort_shorthand:
            from atomicss.shorthand.ordering import order_declarations

            nodes = order_declarations(nodes)

        self.passthrough = []
        rules: list[AtomicRule] = []
        for node in nodes:
            if isinstance(node, Declaration):
                rules.extend(self._atomicify_decl(node, (), ()))
            elif isinstance(node, Rule):
                rules.extend(self._atomicify_rule(node, ()))
            elif isinstance(node, ConditionalBlock):
                if node.name in self.config.supported_at_rules:
                    rules.extend(self._atomicify_block(node, ()))
                else:
                    logger.debug("Passing through at-rule %s", node.prelude)
                    self.passthrough.append(node)
            elif isinstance(node, Comment):
                continue
            elif isinstance(node, UnknownNode) and node.text:
                logger.debug("Passing through %s statement", node.kind)
                self.passthrough.append(node)
            else:
                logger.debug("Dropping unrecognized node %r", node)

        logger.debug(
            "Compiled %d top-level node(s) into %d atomic rule(s)", len(nodes), len(rules)
        )
        return rules

    # ---- traversal --------------------------------------------------------

    def _atomicify_decl(
        self,
        node: Declaration,
        context: tuple[ConditionalBlock, ...],
        selectors: tuple[str, ...],
    ) -> list[AtomicRule]:
        labels = [block.label for block in context]
        rules: list[AtomicRule] = []
        for selector in selectors or ("",):
            normalized = normalize_selector(selector)
            class_name = encode(labels, normalized, node, self.config)
            rules.append(
                AtomicRule(
                    class_name=class_name,
                    context=context,
                    selector=replace_self_reference(normalized, class_name),
                    declaration=node,
                )
            )
            if self.callback is not None:
                self.callback(class_name)
        return rules

    def _atomicify_rule(
        self, node: Rule, context: tuple[ConditionalBlock, ...]
    ) -> list[AtomicRule]:
        rules: list[AtomicRule] = []
        for child in node.nodes:
            if isinstance(child, Rule):
                raise NestedRuleError(child.selector, child.source)
            if isinstance(child, Declaration):
                rules.extend(self._atomicify_decl(child, context, node.selectors))
            elif isinstance(child, ConditionalBlock):
                logger.warning(
                    "Dropping %s nested inside rule %r; hoist it out of the rule first",
                    child.prelude,
                    node.selector,
                )
        return rules

    def _atomicify_block(
        self, node: ConditionalBlock, context: tuple[ConditionalBlock, ...]
    ) -> list[AtomicRule]:
        # Keep only the block header; its children become separate rules.
        inner = context + (replace(node, nodes=()),)
        rules: list[AtomicRule] = []
        for child in node.nodes:
            if isinstance(child, ConditionalBlock):
                rules.extend(self._atomicify_block(child, inner))
            elif isinstance(child, Rule):
                rules.extend(self._atomicify_rule(child, inner))
            elif isinstance(child, Declaration):
                rules.extend(self._atomicify_decl(child, inner, ()))
        return rules


def compile_tree(
    tree: RuleTree | Iterable[Node],
    *,
    callback: ClassNameCallback | None = None,
    config: AtomicConfig = DEFAULT_CONFIG,
    sort_shorthand: bool = False,
) -> list[AtomicRule]:
    """Compile *tree* into atomic rules in depth-first source order."""
    return AtomicCompiler(config, callback, sort_shorthand).compile(tree)
