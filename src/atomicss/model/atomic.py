"""Atomic rule: the unit of compiler output."""

from __future__ import annotations

from dataclasses import dataclass

from atomicss.model.tree import ConditionalBlock, Declaration


@dataclass(frozen=True)
class AtomicRule:
    """One declaration scoped to one generated class.

    Attributes:
        class_name: The generated class name token, e.g. ``_k2hc13q2``.
        context: Enclosing conditional blocks, outermost first. Their
            ``nodes`` are not carried over; only name and params matter.
        selector: Concrete selector with the self-reference replaced by
            ``.class_name``, e.g. ``._k2hc13q2 div``.
        declaration: The declaration this rule applies.
    """

    class_name: str
    context: tuple[ConditionalBlock, ...]
    selector: str
    declaration: Declaration

    @property
    def context_labels(self) -> tuple[str, ...]:
        return tuple(block.label for block in self.context)
