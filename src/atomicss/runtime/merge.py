"""Runtime class merging with last-write-wins per atomic group.

``ax(["_aaaabbbb", "_aaaacccc"])`` keeps only ``_aaaacccc``: both classes
set the same property of the same element under the same conditions
(shared group key ``_aaaa``), and the later one wins as it would in the
cascade. Classes that are not atomic pass through untouched.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Union

from atomicss.config import DEFAULT_CONFIG, AtomicConfig
from atomicss.runtime.groups import AtomicGroups

if TYPE_CHECKING:
    from atomicss.runtime.cache import MergeCache

__all__ = ["Candidate", "ac", "ax", "classify_classes", "group_key", "is_atomic"]

Candidate = Union[str, AtomicGroups, Iterable["Candidate"], bool, None]

# (group key, class name); the key is None for non-atomic classes.
Classified = tuple[tuple[Union[str, None], str], ...]


def is_atomic(class_name: str, config: AtomicConfig = DEFAULT_CONFIG) -> bool:
    return class_name.startswith(config.sentinel) and len(class_name) >= config.group_length


def group_key(class_name: str, config: AtomicConfig = DEFAULT_CONFIG) -> str | None:
    """Return the group key of an atomic class name, or None."""
    if is_atomic(class_name, config):
        return class_name[: config.group_length]
    return None


def classify_classes(classes: str, config: AtomicConfig = DEFAULT_CONFIG) -> Classified:
    """Split a whitespace separated class string into (group key, class) pairs."""
    return tuple((group_key(token, config), token) for token in classes.split())


def _flatten(candidates: Iterable[Candidate]) -> Iterator[str | AtomicGroups]:
    for candidate in candidates:
        if not candidate:
            continue
        if isinstance(candidate, (str, AtomicGroups)):
            yield candidate
        elif isinstance(candidate, (list, tuple)):
            yield from _flatten(candidate)


def _merge(
    candidates: Iterable[Candidate],
    classify: Callable[[str], Classified],
) -> AtomicGroups:
    classes: dict[str, None] = {}
    groups: dict[str, str] = {}
    for candidate in _flatten(candidates):
        if isinstance(candidate, AtomicGroups):
            classes.update(dict.fromkeys(candidate.classes))
            groups.update(candidate.groups)
            continue
        for key, class_name in classify(candidate):
            if key is None:
                classes[class_name] = None
            else:
                # Overwriting keeps the key's first-seen position.
                groups[key] = class_name
    return AtomicGroups(groups, classes)


def _prepare(
    candidates: Candidate,
    config: AtomicConfig | None,
    cache: MergeCache | None,
) -> tuple[list[Candidate], Callable[[str], Classified]]:
    # A lone class string or merged result is one candidate, not an iterable.
    if isinstance(candidates, (str, AtomicGroups)):
        candidates = [candidates]
    elif not candidates or isinstance(candidates, bool):
        candidates = []
    if cache is None:
        return list(candidates), partial(classify_classes, config=config or DEFAULT_CONFIG)
    if config is not None and config != cache.config:
        raise ValueError(
            f"cache was built for {cache.config!r}, which does not match config {config!r}"
        )
    return list(candidates), cache.classify


def ac(
    candidates: Candidate,
    *,
    config: AtomicConfig | None = None,
    cache: MergeCache | None = None,
) -> AtomicGroups | None:
    """Merge *candidates* into an :class:`AtomicGroups`, or None if empty.

    The result can be passed back into :func:`ax` or :func:`ac` as a
    candidate without re-splitting its classes. When only *cache* is given
    its config applies; a *config* that differs from the cache's raises
    ``ValueError``.
    """
    candidates, classify = _prepare(candidates, config, cache)
    merged = _merge(candidates, classify)
    return merged or None


def ax(
    candidates: Candidate,
    *,
    config: AtomicConfig | None = None,
    cache: MergeCache | None = None,
) -> str | None:
    """Merge *candidates* into a class attribute value, or None if empty.

    Candidates may be class strings, falsy values (skipped), nested lists
    of candidates, or :class:`AtomicGroups` from an earlier merge. A bare
    string is treated as a single candidate.
    """
    candidates, classify = _prepare(candidates, config, cache)
    if len(candidates) <= 1:
        only = candidates[0] if candidates else None
        if not only:
            return None
        if isinstance(only, str) and not any(ch.isspace() for ch in only):
            return only

    merged = _merge(candidates, classify)
    return str(merged) or None
