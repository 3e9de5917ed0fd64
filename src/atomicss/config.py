"""Compiler and runtime configuration for atomic class names."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SENTINEL_RE = re.compile(r"^[A-Za-z_]$")


@dataclass(frozen=True)
class AtomicConfig:
    """Shape of generated class names and the at-rules the compiler atomicizes.

    The sentinel and widths form the wire contract between the compiler and
    the runtime merger: both sides must be given the same values.
    """

    sentinel: str = "_"
    prefix_width: int = 4
    suffix_width: int = 4
    supported_at_rules: tuple[str, ...] = ("media", "supports", "document", "container")

    def __post_init__(self) -> None:
        if not _SENTINEL_RE.match(self.sentinel):
            raise ValueError(
                f"sentinel must be a single CSS identifier character, got {self.sentinel!r}"
            )
        if self.prefix_width < 1 or self.suffix_width < 1:
            raise ValueError("prefix_width and suffix_width must be >= 1")

    @property
    def group_length(self) -> int:
        """Length of the group key: sentinel plus the group prefix."""
        return len(self.sentinel) + self.prefix_width

    @property
    def class_name_length(self) -> int:
        return self.group_length + self.suffix_width


DEFAULT_CONFIG = AtomicConfig()
