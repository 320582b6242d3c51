"""Bounded in-memory caches for upstream documents."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Generic, Hashable, Protocol, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(Protocol[K, V]):
    """Minimal key/value store used by the loaders."""

    def get(self, key: K) -> V | None:
        ...

    def add(self, key: K, value: V) -> V:
        ...


class LRUCache(Generic[K, V]):
    """Least-recently-used cache with a fixed capacity.

    Values published upstream are immutable, so ``add`` never replaces an
    existing entry: the first stored value wins and is returned. Entries only
    leave the cache when capacity is exceeded.
    """

    def __init__(self, capacity: int, *, name: str = "cache") -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._name = name
        self._entries: "OrderedDict[K, V]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> V | None:
        try:
            value = self._entries[key]
        except KeyError:
            self.misses += 1
            logger.debug("%s miss for %s", self._name, key)
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        logger.debug("%s hit for %s", self._name, key)
        return value

    def add(self, key: K, value: V) -> V:
        existing = self._entries.get(key)
        if existing is not None:
            self._entries.move_to_end(key)
            return existing
        self._entries[key] = value
        while len(self._entries) > self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("%s evicted %s", self._name, evicted)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> dict[str, int]:
        """Snapshot of size and counters (for diagnostics)."""

        return {
            "size": len(self._entries),
            "capacity": self._capacity,
            "hits": self.hits,
            "misses": self.misses,
        }
