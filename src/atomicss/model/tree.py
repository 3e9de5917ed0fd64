"""Rule tree model: the already-parsed input of the atomic compiler.

A tree is a tagged union of frozen dataclasses. Nodes never reference
their parents; the compiler carries selector and conditional context
down the traversal itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SourcePosition:
    """Where a node started in its source text (1-based)."""

    line: int
    column: int
    source_name: str = "<css input>"

    def __str__(self) -> str:
        return f"{self.source_name}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    prop: str
    value: str
    important: bool = False
    source: SourcePosition | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Rule:
    """A selector list with the nodes declared inside it."""

    selectors: tuple[str, ...]
    nodes: tuple[Node, ...] = ()
    source: SourcePosition | None = field(default=None, compare=False)

    @classmethod
    def from_selector(
        cls,
        selector: str,
        nodes: tuple[Node, ...] | list[Node] = (),
        source: SourcePosition | None = None,
    ) -> Rule:
        """Build a rule from a raw, possibly comma-separated, selector."""
        from atomicss.compiler.selectors import split_selector_list

        return cls(selectors=split_selector_list(selector), nodes=tuple(nodes), source=source)

    @property
    def selector(self) -> str:
        return ", ".join(self.selectors)


@dataclass(frozen=True)
class ConditionalBlock:
    """A selector-less at-rule block such as ``@media (min-width: 30rem)``."""

    name: str
    params: str = ""
    nodes: tuple[Node, ...] = ()
    source: SourcePosition | None = field(default=None, compare=False)

    @property
    def label(self) -> str:
        """Context label contributed to the group hash, e.g. ``media(min-width: 30rem)``."""
        return f"{self.name}{self.params}"

    @property
    def prelude(self) -> str:
        """The at-rule header as written in CSS, e.g. ``@media (min-width: 30rem)``."""
        if self.params:
            return f"@{self.name} {self.params}"
        return f"@{self.name}"


@dataclass(frozen=True)
class Comment:
    text: str = ""
    source: SourcePosition | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnknownNode:
    """A node shape the compiler cannot atomicize.

    Nodes that carry their raw CSS *text* (such as an ``@import`` statement)
    are passed through to the stylesheet; the rest are dropped.
    """

    kind: str
    text: str = ""
    source: SourcePosition | None = field(default=None, compare=False)


Node = Union[Declaration, Rule, ConditionalBlock, Comment, UnknownNode]


@dataclass(frozen=True)
class RuleTree:
    """Root of a rule tree: an ordered sequence of top-level nodes."""

    nodes: tuple[Node, ...] = ()

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
