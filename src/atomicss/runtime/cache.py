"""Explicit cache for the runtime merger."""

from __future__ import annotations

from functools import lru_cache, partial

from atomicss.config import DEFAULT_CONFIG, AtomicConfig
from atomicss.runtime.merge import Classified, classify_classes


class MergeCache:
    """Memoizes how class strings split into atomic groups.

    Generated call sites pass the same class strings on every render, so
    splitting and classifying them once pays off on the hot path. Create one
    per process (or per render batch) and pass it to ``ax``/``ac``; the
    underlying ``lru_cache`` is safe to share between threads.
    """

    def __init__(self, config: AtomicConfig = DEFAULT_CONFIG, maxsize: int | None = 1024) -> None:
        self.config = config
        self._classify = lru_cache(maxsize=maxsize)(partial(classify_classes, config=config))

    def classify(self, classes: str) -> Classified:
        return self._classify(classes)

    def clear(self) -> None:
        self._classify.cache_clear()

    @property
    def hits(self) -> int:
        return self._classify.cache_info().hits

    @property
    def misses(self) -> int:
        return self._classify.cache_info().misses

    def __len__(self) -> int:
        return self._classify.cache_info().currsize
