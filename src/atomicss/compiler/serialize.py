"""Render atomic rules as CSS text."""

from __future__ import annotations

from typing import Iterable

from atomicss.model.atomic import AtomicRule
from atomicss.model.tree import ConditionalBlock, Declaration, Node, Rule, UnknownNode

__all__ = ["declaration_to_css", "node_to_css", "to_css", "to_stylesheet"]


def declaration_to_css(declaration: Declaration) -> str:
    important = " !important" if declaration.important else ""
    return f"{declaration.prop}:{declaration.value}{important}"


def _body(nodes: Iterable[Node]) -> str:
    css = ""
    for node in nodes:
        text = node_to_css(node)
        if not text:
            continue
        # A declaration needs ";" before whatever follows it.
        if css and not css.endswith(("}", ";")):
            css += ";"
        css += text
    return css


def node_to_css(node: Node) -> str:
    """Render a rule tree node verbatim, as used for passed-through at-rules.

    ``@keyframes spin{from{opacity:0}to{opacity:1}}``
    """
    if isinstance(node, Declaration):
        return declaration_to_css(node)
    if isinstance(node, Rule):
        return f"{node.selector}{{{_body(node.nodes)}}}"
    if isinstance(node, ConditionalBlock):
        return f"{node.prelude}{{{_body(node.nodes)}}}"
    if isinstance(node, UnknownNode):
        return node.text
    return ""


def to_css(rule: AtomicRule) -> str:
    """Render one atomic rule, wrapped in its conditional blocks.

    ``@media (min-width: 30rem){._a1b2c3d4{display:block}}``
    """
    css = f"{rule.selector}{{{declaration_to_css(rule.declaration)}}}"
    for block in reversed(rule.context):
        css = f"{block.prelude}{{{css}}}"
    return css


def to_stylesheet(
    rules: Iterable[AtomicRule],
    separator: str = "",
    passthrough: Iterable[Node] = (),
) -> str:
    """Render *rules* in order, shipping each distinct rule once.

    *passthrough* nodes (see :attr:`AtomicCompiler.passthrough`) are
    rendered verbatim ahead of the atomic rules, which keeps ``@import``
    statements at the top where CSS requires them.
    """
    verbatim = (node_to_css(node) for node in passthrough)
    atomic = (to_css(rule) for rule in rules)
    rendered = dict.fromkeys(css for css in (*verbatim, *atomic) if css)
    return separator.join(rendered)
