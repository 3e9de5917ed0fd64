"""Shorthand-before-longhand ordering of declarations."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from atomicss.model.tree import ConditionalBlock, Declaration, Node, Rule
from atomicss.shorthand.table import SHORTHAND_FOR

__all__ = ["is_shorthand", "precedes_in_cascade", "order_declarations"]

_CONSTITUENTS: dict[str, frozenset[str]] = {
    prop: frozenset(targets)
    for prop, targets in SHORTHAND_FOR.items()
    if targets is not True
}


def is_shorthand(prop: str) -> bool:
    return prop in SHORTHAND_FOR


def precedes_in_cascade(a: str, b: str) -> bool:
    """Return True if shorthand *a* must be emitted before property *b*."""
    if SHORTHAND_FOR.get(a) is True:
        return a != b
    constituents = _CONSTITUENTS.get(a)
    return constituents is not None and b in constituents


def _order_scope(declarations: list[Declaration]) -> list[Declaration]:
    # Each declaration is emitted after any not-yet-emitted shorthand that
    # supersedes it; everything else keeps its authored position.
    ordered: list[Declaration] = []
    state = [0] * len(declarations)  # 0 = pending, 1 = visiting, 2 = emitted

    def visit(index: int) -> None:
        if state[index]:
            return
        state[index] = 1
        prop = declarations[index].prop
        for other, declaration in enumerate(declarations):
            if other != index and precedes_in_cascade(declaration.prop, prop):
                visit(other)
        state[index] = 2
        ordered.append(declarations[index])

    for index in range(len(declarations)):
        visit(index)
    return ordered


def order_declarations(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Reorder declarations so shorthands precede their constituents.

    Ordering is applied per scope (top level, each rule, each conditional
    block). Declarations only move among the slots declarations already
    occupy; rules, blocks and comments keep their positions.
    """
    nodes = list(nodes)
    slots = [i for i, node in enumerate(nodes) if isinstance(node, Declaration)]
    ordered = _order_scope([nodes[i] for i in slots])  # type: ignore[misc]

    result: list[Node] = list(nodes)
    for slot, declaration in zip(slots, ordered):
        result[slot] = declaration
    for i, node in enumerate(result):
        if isinstance(node, (Rule, ConditionalBlock)) and node.nodes:
            result[i] = replace(node, nodes=order_declarations(node.nodes))
    return tuple(result)
