"""Render-time merging of atomic class names."""

from atomicss.runtime.cache import MergeCache
from atomicss.runtime.groups import AtomicGroups
from atomicss.runtime.merge import ac, ax, group_key, is_atomic

__all__ = ["AtomicGroups", "MergeCache", "ac", "ax", "group_key", "is_atomic"]
