"""Atomic group map: the reusable result of a class merge."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


class AtomicGroups:
    """Ordered mapping of group key -> winning atomic class name.

    Also carries the non-atomic classes seen during the merge, so a group
    map can be nested inside a later merge without losing them. Instances
    are never mutated after construction.
    """

    __slots__ = ("_groups", "_classes")

    def __init__(self, groups: Mapping[str, str] | None = None, classes: Iterable[str] = ()) -> None:
        self._groups: dict[str, str] = dict(groups or {})
        self._classes: tuple[str, ...] = tuple(dict.fromkeys(classes))

    @property
    def groups(self) -> Mapping[str, str]:
        return MappingProxyType(self._groups)

    @property
    def classes(self) -> tuple[str, ...]:
        return self._classes

    def __iter__(self) -> Iterator[str]:
        yield from self._classes
        yield from self._groups.values()

    def __len__(self) -> int:
        return len(self._classes) + len(self._groups)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AtomicGroups):
            return NotImplemented
        return (
            self._classes == other._classes
            and list(self._groups.items()) == list(other._groups.items())
        )

    def __hash__(self) -> int:
        return hash((self._classes, tuple(self._groups.items())))

    def __str__(self) -> str:
        return " ".join(self)

    def __repr__(self) -> str:
        return f"AtomicGroups({self._groups!r}, classes={list(self._classes)!r})"
