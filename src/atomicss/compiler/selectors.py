"""Selector normalization relative to the ``&`` self-reference marker."""

from __future__ import annotations

SELF_REFERENCE = "&"

__all__ = [
    "SELF_REFERENCE",
    "normalize_selector",
    "replace_self_reference",
    "split_selector_list",
]


def normalize_selector(selector: str | None) -> str:
    """Return a canonical selector that always contains ``&``.

    - ``None`` / empty -> ``&``
    - ``div`` -> ``& div``
    - ``:first-child`` -> ``&:first-child`` (an orphaned pseudo belongs to
      the element itself)
    - selectors that already reference ``&`` are only trimmed
    """
    if not selector:
        return SELF_REFERENCE

    trimmed = selector.strip()
    if not trimmed:
        return SELF_REFERENCE
    if SELF_REFERENCE in trimmed:
        return trimmed
    if trimmed.startswith(":"):
        return f"{SELF_REFERENCE}{trimmed}"
    return f"{SELF_REFERENCE} {trimmed}"


def replace_self_reference(selector: str, class_name: str) -> str:
    """Replace every ``&`` with ``.class_name``."""
    return selector.replace(SELF_REFERENCE, f".{class_name}")


def split_selector_list(text: str) -> tuple[str, ...]:
    """Split a selector list at top-level commas.

    Commas inside parentheses, brackets or quotes (``:is(a, b)``,
    ``[title="a,b"]``) do not separate selectors. Empty entries are dropped.
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    quote = ""
    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = ""
            continue
        if ch in ("'", '"'):
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]" and depth > 0:
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return tuple(p for p in parts if p)
