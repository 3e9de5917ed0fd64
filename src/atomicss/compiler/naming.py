"""Deterministic atomic class names.

A class name has the form::

    <sentinel><group prefix><declaration suffix>

The group prefix hashes the conditional context, the normalized selector
and the property; the suffix hashes the value and importance. Two
declarations competing for the same property of the same element under
the same conditions therefore share a prefix, which is all the runtime
merger needs to emulate last-write-wins.
"""

from __future__ import annotations

import hashlib
import re
from typing import Iterable, Sequence

from atomicss.config import DEFAULT_CONFIG, AtomicConfig
from atomicss.model.tree import Declaration

__all__ = [
    "safe_string",
    "short_hash",
    "group_prefix",
    "declaration_suffix",
    "encode",
]

_SEPARATOR = "__"
_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9-]")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _escape(match: re.Match[str]) -> str:
    return f"_{ord(match.group()):x}_"


def safe_string(text: str | None) -> str:
    """Trim, collapse whitespace, and escape every non CSS-safe character.

    Each unsafe character becomes ``_<hex code point>_`` (``_`` itself is
    escaped too), so ``calc(1px - 2px)`` and ``calc(1px + 2px)`` stay
    distinct while ``div  >  a`` and ``div > a`` do not.
    """
    if not isinstance(text, str):
        return ""
    collapsed = _WHITESPACE_RE.sub(" ", text.strip())
    return _UNSAFE_RE.sub(_escape, collapsed)


def _composite(parts: Iterable[str | None]) -> str:
    # Read left to right, "_" opens an escape of at least one hex digit, so
    # an empty escape ("__") can only be the component separator.
    sanitized = (safe_string(p) for p in parts)
    return _SEPARATOR.join(p for p in sanitized if p)


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out))


def short_hash(text: str, length: int) -> str:
    """sha256 of *text* rendered in base36, truncated to *length* characters."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return _base36(int.from_bytes(digest, "big")).rjust(length, "0")[:length]


def group_prefix(
    context: Sequence[str],
    selector: str,
    prop: str,
    config: AtomicConfig = DEFAULT_CONFIG,
) -> str:
    """Hash of everything that identifies the slot a declaration fills."""
    composite = _composite(["".join(context), selector, prop])
    return short_hash(composite, config.prefix_width)


def declaration_suffix(
    value: str,
    important: bool = False,
    config: AtomicConfig = DEFAULT_CONFIG,
) -> str:
    """Hash of what a declaration puts into its slot."""
    composite = _composite([value, "important" if important else None])
    return short_hash(composite, config.suffix_width)


def encode(
    context: Sequence[str],
    selector: str,
    declaration: Declaration,
    config: AtomicConfig = DEFAULT_CONFIG,
) -> str:
    """Return the class name for *declaration* under *context* and *selector*.

    *selector* should already be normalized; *context* is the ordered list
    of conditional labels, outermost first.
    """
    prefix = group_prefix(context, selector, declaration.prop, config)
    suffix = declaration_suffix(declaration.value, declaration.important, config)
    return f"{config.sentinel}{prefix}{suffix}"
