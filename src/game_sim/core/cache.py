"""
Single-slot memoization keyed by state.

Remembers only the most recently computed (key, value) pair. A lookup for
any other key recomputes and replaces the slot, so unrelated states evict
each other. The driver loop queries the same state repeatedly within one
turn, which is the only access pattern this serves.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LastValueCache(Generic[K, V]):
    """Holds the value computed for the last key only."""

    __slots__ = ("_key", "_value", "hits", "misses")

    def __init__(self):
        self._key: Optional[K] = None
        self._value: Optional[V] = None
        self.hits = 0
        self.misses = 0

    def get(self, key: K, compute: Callable[[K], V]) -> V:
        if self._key is not None and self._key == key:
            self.hits += 1
            return self._value
        self.misses += 1
        value = compute(key)
        self._key, self._value = key, value
        return value

    @property
    def key(self) -> Optional[K]:
        return self._key

    def clear(self) -> None:
        self._key = None
        self._value = None
