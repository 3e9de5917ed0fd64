"""Error hierarchy for atomicss."""

from __future__ import annotations

from atomicss.model.tree import SourcePosition

PLUGIN_NAME = "atomicify-rules"


class AtomicssError(Exception):
    """Base error for all atomicss errors."""


class CompileError(AtomicssError):
    """Raised when a rule tree cannot be compiled into atomic rules."""

    def __init__(self, message: str, source: SourcePosition | None = None) -> None:
        self.source = source
        self.reason = message
        if source is not None:
            message = f"{PLUGIN_NAME}: {source}: {message}"
        else:
            message = f"{PLUGIN_NAME}: {message}"
        super().__init__(message)


class NestedRuleError(CompileError):
    """A rule was found directly inside another rule.

    Nesting has to be flattened before compiling; the group hash of the
    inner rule would otherwise silently be wrong.
    """

    def __init__(self, selector: str, source: SourcePosition | None = None) -> None:
        self.selector = selector
        if source is None:
            message = f"Nested rules are not allowed (nested selector {selector!r})."
        else:
            message = "Nested rules are not allowed."
        super().__init__(message, source)


class ParseError(AtomicssError):
    """Raised when CSS-like source cannot be parsed into a rule tree."""

    def __init__(self, message: str, source: SourcePosition | None = None) -> None:
        self.source = source
        self.reason = message
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)

    @property
    def line(self) -> int | None:
        return self.source.line if self.source is not None else None

    @property
    def column(self) -> int | None:
        return self.source.column if self.source is not None else None
