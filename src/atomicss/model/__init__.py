"""atomicss model layer -- public type re-exports."""

from atomicss.model.atomic import AtomicRule
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

__all__ = [
    # tree
    "SourcePosition",
    "Declaration",
    "Rule",
    "ConditionalBlock",
    "Comment",
    "UnknownNode",
    "Node",
    "RuleTree",
    # output
    "AtomicRule",
]
